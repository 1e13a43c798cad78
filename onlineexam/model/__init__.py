"""Exam domain model: questions, pools, exams, results and users."""

from .question import EssayQuestion, ObjectiveQuestion, Question  # noqa: F401
from .pool import QuestionPool  # noqa: F401
from .exam import Exam  # noqa: F401
from .result import ExamResult  # noqa: F401
