from __future__ import annotations

"""Exception taxonomy for exam sessions and grading."""


class ExamError(Exception):
    """Base class for exam workflow errors."""


class NoQuestionsError(ExamError):
    """Raised when a session is requested for an exam that resolves to no questions."""


class InvalidGradeError(ExamError, ValueError):
    """Raised when a manual grade falls outside 0..marks."""

    def __init__(self, awarded: int, marks: int) -> None:
        super().__init__(f"Invalid marks {awarded}: must be between 0 and {marks}")
        self.awarded = awarded
        self.marks = marks


class NotPublishedError(ExamError):
    """Condition: the exam is not published yet (reported, not raised)."""


class AlreadyTakenError(ExamError):
    """Condition: the student already has a session for this exam (reported, not raised)."""
