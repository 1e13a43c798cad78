from __future__ import annotations

"""Exam composition: explicit questions, pool draws, and publish state."""

import random
from datetime import timedelta
from typing import TYPE_CHECKING, Any, List, Optional, Tuple
from uuid import uuid4

from ..app.explain import trace as xtrace, warn
from .pool import QuestionPool
from .question import Question

if TYPE_CHECKING:
    from ..app.exam_session import ExamSession
    from .result import ExamResult


class Exam:
    """An exam definition.

    Questions come from two places: the explicit list built with
    ``add_question`` and up to ``random_question_count`` questions drawn from
    the optional pool each time the exam is resolved for a session.
    """

    def __init__(
        self,
        name: str,
        duration: timedelta,
        creator: Any | None = None,
        pool: Optional[QuestionPool] = None,
        rng: random.Random | None = None,
    ) -> None:
        self.exam_id = str(uuid4())
        self.name = name
        self.duration = duration
        self.creator = creator
        self.pool = pool
        self._rng = rng or random.Random()
        self._questions: List[Question] = []
        self._random_question_count = 0
        self._published = False
        self._sessions: List["ExamSession"] = []

    @property
    def questions(self) -> Tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def random_question_count(self) -> int:
        return self._random_question_count

    @property
    def published(self) -> bool:
        return self._published

    @property
    def exam_sessions(self) -> Tuple["ExamSession", ...]:
        return tuple(self._sessions)

    def add_question(self, question: Question) -> None:
        self._questions.append(question)

    def set_random_question_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"random question count must be >= 0, got {count}")
        self._random_question_count = int(count)

    def _can_resolve(self) -> bool:
        if self._questions:
            return True
        if self.pool is None or self._random_question_count <= 0:
            return False
        return bool(self.pool.available(self._questions))

    def publish(self) -> bool:
        """Make the exam available to students. Irreversible.

        Returns False, leaving the exam unpublished, when it would resolve to
        no questions at all.
        """
        if self._published:
            return True
        if not self._can_resolve():
            warn(f"Exam '{self.name}' cannot be published without questions.")
            return False
        self._published = True
        xtrace("exam_published", {"exam": self.exam_id, "name": self.name})
        return True

    def resolve_questions(self, rng: random.Random | None = None) -> List[Question]:
        """Explicit questions plus random pool draws, shuffled as one list."""
        rng = rng or self._rng
        resolved = list(self._questions)
        if self.pool is not None and self._random_question_count > 0:
            resolved.extend(self.pool.resolve_random(self._random_question_count, exclude=resolved, rng=rng))
        rng.shuffle(resolved)
        return resolved

    def add_session_record(self, session: "ExamSession") -> None:
        self._sessions.append(session)

    def results(self) -> List["ExamResult"]:
        """Results of every submitted session, in session order."""
        return [s.result for s in self._sessions if s.result is not None]
