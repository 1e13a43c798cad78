"""onlineexam package initialization.

Public names are resolved lazily so ``import onlineexam`` stays cheap and
submodules can import each other without cycles through this module.
"""

from __future__ import annotations

import importlib
from typing import Dict

__version__ = "0.1.0"

_EXPORTS: Dict[str, str] = {
    "ObjectiveQuestion": "onlineexam.model.question",
    "EssayQuestion": "onlineexam.model.question",
    "QuestionPool": "onlineexam.model.pool",
    "Exam": "onlineexam.model.exam",
    "ExamResult": "onlineexam.model.result",
    "Student": "onlineexam.model.users",
    "Admin": "onlineexam.model.users",
    "ExamSession": "onlineexam.app.exam_session",
    "Timer": "onlineexam.app.timer",
    "ExamRegistry": "onlineexam.app.registry",
    "ResultSummary": "onlineexam.stats.stats",
    "summarize_results": "onlineexam.stats.stats",
    "ExamError": "onlineexam.errors",
    "NoQuestionsError": "onlineexam.errors",
    "InvalidGradeError": "onlineexam.errors",
    "NotPublishedError": "onlineexam.errors",
    "AlreadyTakenError": "onlineexam.errors",
}

__all__ = ["__version__", *_EXPORTS]


def __getattr__(name: str):
    """Import public names on first access."""

    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(name)
    value = getattr(importlib.import_module(module_name), name)
    globals()[name] = value
    return value
