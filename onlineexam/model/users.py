from __future__ import annotations

"""Student and admin identities plus the workflows each one drives."""

import random
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, List, Optional, Tuple
from uuid import uuid4

from ..app.exam_session import ExamSession
from ..app.explain import trace as xtrace, warn
from ..errors import AlreadyTakenError, NotPublishedError
from ..stats.stats import ResultSummary, summarize_results
from .exam import Exam
from .pool import QuestionPool
from .result import ExamResult

if TYPE_CHECKING:
    from ..app.registry import ExamRegistry


@dataclass(eq=False)
class User:
    username: str
    user_id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(eq=False)
class Student(User):
    _sessions: List[ExamSession] = field(default_factory=list, repr=False)

    @property
    def exam_sessions(self) -> Tuple[ExamSession, ...]:
        return tuple(self._sessions)

    def has_taken(self, exam: Exam) -> bool:
        return any(s.exam is exam for s in self._sessions)

    def start_exam(self, exam: Exam, rng: random.Random | None = None) -> Optional[ExamSession]:
        """Create and start a session, or return None when the exam is unavailable.

        Raises:
            NoQuestionsError: the published exam still resolved to nothing.
        """
        if not exam.published:
            warn(f"Exam {exam.name} is not published yet.")
            xtrace("start_refused", {"exam": exam.exam_id, "reason": NotPublishedError.__name__})
            return None
        if self.has_taken(exam):
            warn(f"{self.username} has already taken exam: {exam.name}")
            xtrace("start_refused", {"exam": exam.exam_id, "reason": AlreadyTakenError.__name__})
            return None
        session = ExamSession(self, exam, rng=rng)
        self._sessions.append(session)
        exam.add_session_record(session)
        session.start()
        return session

    def submit_exam(self, session: ExamSession) -> ExamResult:
        if session.submitted:
            warn("Exam already submitted.")
        return session.submit()

    def view_exam_result(self, exam: Exam) -> Optional[ExamResult]:
        for s in self._sessions:
            if s.exam is exam:
                return s.result
        return None


@dataclass(eq=False)
class Admin(User):
    registry: Optional["ExamRegistry"] = field(default=None, repr=False)
    _pools: List[QuestionPool] = field(default_factory=list, repr=False)

    @property
    def question_pools(self) -> Tuple[QuestionPool, ...]:
        return tuple(self._pools)

    def create_question_pool(self, name: str) -> QuestionPool:
        pool = QuestionPool(name, creator=self)
        self._pools.append(pool)
        return pool

    def create_exam(
        self,
        name: str,
        duration: timedelta,
        pool: Optional[QuestionPool] = None,
        rng: random.Random | None = None,
    ) -> Exam:
        exam = Exam(name, duration, creator=self, pool=pool, rng=rng)
        # Exams only become visible through the registry this admin was given.
        if self.registry is not None:
            self.registry.add_exam(exam)
        xtrace("exam_created", {"exam": exam.exam_id, "name": name, "registered": self.registry is not None})
        return exam

    def publish_exam(self, exam: Exam) -> bool:
        return exam.publish()

    def view_exam_results(self, exam: Exam) -> List[ExamResult]:
        return exam.results()

    def generate_exam_summary(self, exam: Exam) -> ResultSummary:
        return summarize_results(self.view_exam_results(exam))
