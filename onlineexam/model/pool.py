from __future__ import annotations

"""Question pools: named collections exams can draw random questions from."""

import random
from typing import Any, Iterable, List, Optional, Tuple
from uuid import uuid4

from ..app.explain import trace as xtrace
from .question import Question


class QuestionPool:
    def __init__(self, name: str, creator: Any | None = None) -> None:
        self.pool_id = str(uuid4())
        self.name = name
        self.creator = creator
        self._questions: List[Question] = []

    @property
    def questions(self) -> Tuple[Question, ...]:
        return tuple(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def add_question(self, question: Question) -> None:
        self._questions.append(question)
        xtrace("pool_question_added", {"pool": self.name, "question": question.question_id})

    def get_question(self, question_id: str) -> Optional[Question]:
        for q in self._questions:
            if q.question_id == question_id:
                return q
        return None

    def available(self, exclude: Iterable[Question] = ()) -> List[Question]:
        """Questions not in ``exclude``, compared by identity."""
        excluded = {id(q) for q in exclude}
        return [q for q in self._questions if id(q) not in excluded]

    def resolve_random(self, count: int, exclude: Iterable[Question] = (), rng: random.Random | None = None) -> List[Question]:
        """Sample up to ``count`` distinct questions not in ``exclude``.

        Returns every available question when the pool cannot satisfy the
        request.
        """
        if count <= 0:
            return []
        pick = self.available(exclude)
        if len(pick) <= count:
            return pick
        return (rng or random.Random()).sample(pick, count)
