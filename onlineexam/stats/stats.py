from __future__ import annotations

"""Aggregate result summaries and text formatting."""

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

if TYPE_CHECKING:
    from ..model.result import ExamResult


@dataclass(frozen=True)
class ResultSummary:
    count: int
    average: float
    highest: Optional[int]
    lowest: Optional[int]

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_results(results: Iterable["ExamResult"]) -> ResultSummary:
    """Count, average, max and min score over a set of results."""
    scores = [r.score for r in results]
    if not scores:
        return ResultSummary(count=0, average=0.0, highest=None, lowest=None)
    return ResultSummary(
        count=len(scores),
        average=sum(scores) / len(scores),
        highest=max(scores),
        lowest=min(scores),
    )


def format_summary(summary: ResultSummary, title: str = "") -> str:
    """Return a human-readable summary."""
    lines = [f"--- Exam Summary for: {title} ---"] if title else []
    if summary.count == 0:
        lines.append("No students have taken this exam yet.")
        return "\n".join(lines)
    lines.append(f"Total Students Taken Exam: {summary.count}")
    lines.append(f"Average Score: {summary.average:.2f}")
    lines.append(f"Highest Score: {summary.highest}")
    lines.append(f"Lowest Score: {summary.lowest}")
    return "\n".join(lines)


def format_result_line(result: "ExamResult") -> str:
    s = result.session
    return f"Student: {s.student.username}, Score: {result.score}/{result.total_marks}"
