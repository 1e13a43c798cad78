from __future__ import annotations

"""Exam results: immutable scoring snapshots produced at submission."""

from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from ..app.explain import trace as xtrace

if TYPE_CHECKING:
    from storage.schema import ResultRow

    from ..app.exam_session import ExamSession


class ExamResult:
    """Score for one submitted session.

    Only ``comments`` and the ``published`` flag change after creation.
    Whether an unpublished result is shown to the student is the caller's
    decision.
    """

    def __init__(self, session: "ExamSession", score: int, total_marks: int) -> None:
        if not 0 <= score <= total_marks:
            raise ValueError(f"score {score} outside 0..{total_marks}")
        self._result_id = str(uuid4())
        self._session = session
        self._score = int(score)
        self._total_marks = int(total_marks)
        self._comments: Optional[str] = None
        self._published = False

    @property
    def result_id(self) -> str:
        return self._result_id

    @property
    def session(self) -> "ExamSession":
        return self._session

    @property
    def score(self) -> int:
        return self._score

    @property
    def total_marks(self) -> int:
        return self._total_marks

    @property
    def percentage(self) -> float:
        return 100.0 * self._score / self._total_marks if self._total_marks else 0.0

    @property
    def comments(self) -> Optional[str]:
        return self._comments

    @property
    def published(self) -> bool:
        return self._published

    def add_comments(self, comments: str) -> None:
        self._comments = comments

    def publish(self) -> None:
        if self._published:
            return
        self._published = True
        xtrace(
            "result_published",
            {"result": self._result_id, "student": self._session.student.username, "exam": self._session.exam.name},
        )

    def to_row(self) -> "ResultRow":
        from storage.schema import ResultRow

        s = self._session
        return ResultRow(
            result_id=self._result_id,
            session_id=s.session_id,
            exam_id=s.exam.exam_id,
            exam_name=s.exam.name,
            student_id=s.student.user_id,
            student_name=s.student.username,
            score=self._score,
            total_marks=self._total_marks,
            answered=len(s.answers),
            auto_submitted=s.auto_submitted,
            published=self._published,
            ended_at=s.ended_at,
        )

    def __repr__(self) -> str:
        return f"ExamResult(result_id={self._result_id!r}, score={self._score}, total_marks={self._total_marks})"
