from __future__ import annotations

"""Question variants and the answer-checking capability they share."""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..app.explain import trace as xtrace
from ..errors import InvalidGradeError


class Question(Protocol):
    question_id: str
    text: str
    marks: int

    def check_answer(self, answer: Optional[str]) -> int: ...


def _normalize_marks(marks: int) -> int:
    """Return marks as an int, rejecting bools, fractions and non-positive values."""
    if isinstance(marks, bool):
        raise ValueError(f"marks must be a positive integer, got {marks!r}")
    try:
        value = int(marks)
    except (TypeError, ValueError):
        raise ValueError(f"marks must be a positive integer, got {marks!r}") from None
    if isinstance(marks, float) and value != marks:
        raise ValueError(f"marks must be a positive integer, got {marks!r}")
    if value <= 0:
        raise ValueError(f"marks must be a positive integer, got {marks!r}")
    return value


# eq=False keeps hashing and equality by identity: a session only accepts the
# exact question objects it was built with.
@dataclass(frozen=True, eq=False)
class ObjectiveQuestion:
    """Multiple-choice question with a single correct answer."""

    question_id: str
    text: str
    marks: int
    options: Tuple[str, ...]
    correct_answer: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", _normalize_marks(self.marks))
        if not isinstance(self.correct_answer, str) or not self.correct_answer.strip():
            raise ValueError(f"question {self.question_id} needs a non-blank correct answer")
        object.__setattr__(self, "options", tuple(self.options))

    def check_answer(self, answer: Optional[str]) -> int:
        if answer is None:
            return 0
        if answer.strip().lower() == self.correct_answer.strip().lower():
            return self.marks
        return 0


@dataclass(frozen=True, eq=False)
class EssayQuestion:
    """Free-text question; scores 0 automatically until graded by hand."""

    question_id: str
    text: str
    marks: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", _normalize_marks(self.marks))

    def check_answer(self, answer: Optional[str]) -> int:
        xtrace("needs_manual_grading", {"question": self.question_id, "text": self.text[:20]})
        return 0

    def manual_grade(self, awarded: int) -> int:
        """Validate marks assigned by an admin.

        Raises:
            InvalidGradeError: when ``awarded`` is outside ``0..marks``.
        """
        if 0 <= awarded <= self.marks:
            return awarded
        raise InvalidGradeError(awarded, self.marks)
