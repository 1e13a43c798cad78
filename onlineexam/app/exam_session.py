from __future__ import annotations

"""Exam session: question traversal, answer capture, timeout and scoring.

A session snapshots the exam's resolved question list when it is created,
runs a countdown once started, and freezes on submission. Submission
happens exactly once, whether the student submits or the timer expires
first; every later call gets the same ExamResult back.
"""

import random
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
from uuid import uuid4

from ..errors import NoQuestionsError
from ..model.exam import Exam
from ..model.question import Question
from ..model.result import ExamResult
from .explain import trace as xtrace, warn
from .timer import Timer

CREATED = "created"
IN_PROGRESS = "in_progress"
SUBMITTED = "submitted"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RuntimeState:
    position: int = 0
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None


class ExamSession:
    def __init__(self, student: Any, exam: Exam, rng: random.Random | None = None) -> None:
        questions = exam.resolve_questions(rng)
        if not questions:
            raise NoQuestionsError(f"Exam '{exam.name}' has no questions.")
        self._session_id = str(uuid4())
        self._student = student
        self._exam = exam
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._answers: Dict[Question, str] = {}
        self._lock = threading.Lock()
        self._started = False
        self._submitted = False
        self._auto_submitted = False
        self._result: Optional[ExamResult] = None
        self._timer = Timer(exam.duration, self._on_timeout)
        self.created_at = _now()
        self.state = RuntimeState()
        xtrace(
            "session_created",
            {"session": self._session_id, "exam": exam.name, "questions": [q.question_id for q in self._questions]},
        )

    @classmethod
    def create(cls, student: Any, exam: Exam, rng: random.Random | None = None) -> "ExamSession":
        return cls(student, exam, rng=rng)

    # --- read-only views ---

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def student(self) -> Any:
        return self._student

    @property
    def exam(self) -> Exam:
        return self._exam

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def answers(self) -> Mapping[Question, str]:
        with self._lock:
            return MappingProxyType(dict(self._answers))

    @property
    def submitted(self) -> bool:
        return self._submitted

    @property
    def auto_submitted(self) -> bool:
        return self._auto_submitted

    @property
    def result(self) -> Optional[ExamResult]:
        return self._result

    @property
    def started_at(self) -> Optional[datetime]:
        return self.state.started_at

    @property
    def ended_at(self) -> Optional[datetime]:
        return self.state.ended_at

    @property
    def status(self) -> str:
        if self._submitted:
            return SUBMITTED
        if self._started:
            return IN_PROGRESS
        return CREATED

    # --- lifecycle ---

    def start(self) -> bool:
        with self._lock:
            if self._started or self._submitted:
                warn(f"Session {self._session_id} already started.")
                return False
            self._started = True
            self.state.position = 0
            self.state.started_at = _now()
            self._timer.start()
        xtrace("session_started", {"session": self._session_id, "student": getattr(self._student, "username", None)})
        return True

    def current_question(self) -> Optional[Question]:
        if self.state.position < len(self._questions):
            return self._questions[self.state.position]
        return None

    def advance(self) -> Optional[Question]:
        self.state.position += 1
        return self.current_question()

    def remaining(self) -> timedelta:
        return self._timer.remaining()

    def remaining_formatted(self) -> str:
        return self._timer.remaining_formatted()

    def submit_answer(self, question: Question, answer: str) -> bool:
        with self._lock:
            if self._submitted:
                warn("Exam already submitted, cannot submit more answers.")
                return False
            if not any(q is question for q in self._questions):
                warn(f"Question {question.question_id} is not part of this exam session.")
                xtrace("answer_rejected", {"session": self._session_id, "question": question.question_id})
                return False
            self._answers[question] = answer
        xtrace("answer_recorded", {"session": self._session_id, "question": question.question_id})
        return True

    def submit(self) -> ExamResult:
        return self._submit(auto=False)

    def _submit(self, auto: bool) -> ExamResult:
        with self._lock:
            if self._submitted:
                if self._result is None:
                    raise RuntimeError(f"Session {self._session_id} is submitted but has no result.")
                return self._result
            # Score before committing: a failure here leaves the session open.
            # unanswered questions are absent from the map and add nothing
            score = sum(q.check_answer(a) for q, a in self._answers.items())
            total_marks = sum(q.marks for q in self._questions)
            result = ExamResult(self, score, total_marks)
            self._timer.stop()
            self.state.ended_at = _now()
            self._result = result
            self._auto_submitted = auto
            self._submitted = True
        xtrace(
            "session_submitted",
            {"session": self._session_id, "score": result.score, "total": result.total_marks, "auto": auto},
        )
        return result

    def _on_timeout(self) -> None:
        if self._submitted:
            return
        xtrace("session_timed_out", {"session": self._session_id})
        self._submit(auto=True)
