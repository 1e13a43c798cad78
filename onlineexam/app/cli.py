from __future__ import annotations

"""CLI for onlineexam: scripted demo run, stored-result summary, config dump."""

import argparse
import random
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .. import __version__
from ..config.config import load_config, validate_config
from ..model.question import EssayQuestion, ObjectiveQuestion
from ..model.result import ExamResult
from ..model.users import Student
from ..stats.stats import format_result_line, format_summary
from ..util.randomness import make_rng, seed_from_env
from .explain import enable as explain_enable
from .registry import ExamRegistry

# Scripted answers per demo student, keyed by question id.
DEMO_ANSWERS: Dict[str, Dict[str, str]] = {
    "student1": {
        "GK_Q1": "Paris",
        "GK_Q2": "Mars",
        "GK_Q3": "blue whale ",
        "GK_E1": "This is a brief explanation of relativity...",
    },
    "student2": {
        "GK_Q1": "London",
        "GK_Q2": "Mars",
        "GK_E2": "Another essay answer...",
    },
}

DEMO_ESSAY_GRADE = 3


def _build_pool(admin: Any):
    pool = admin.create_question_pool("General Knowledge Pool")
    pool.add_question(ObjectiveQuestion("GK_Q1", "What is the capital of France?", 1, ["London", "Paris", "Berlin", "Rome"], "Paris"))
    pool.add_question(ObjectiveQuestion("GK_Q2", "Which planet is known as the 'Red Planet'?", 1, ["Earth", "Mars", "Jupiter", "Venus"], "Mars"))
    pool.add_question(EssayQuestion("GK_E1", "Explain the theory of relativity in brief.", 5))
    pool.add_question(ObjectiveQuestion("GK_Q3", "What is the largest mammal?", 2, ["Elephant", "Blue Whale", "Giraffe", "Lion"], "Blue Whale"))
    pool.add_question(EssayQuestion("GK_E2", "Discuss the impact of artificial intelligence on society.", 8))
    return pool


def _take_exam(student: Student, exam, answers: Dict[str, str], rng: random.Random) -> ExamResult | None:
    session = student.start_exam(exam, rng=rng)
    if session is None:
        return None
    print(f"\n{student.username} started exam: {exam.name} ({session.total_questions} questions, {session.remaining_formatted()} left)")
    q = session.current_question()
    while q is not None:
        if q.question_id in answers:
            session.submit_answer(q, answers[q.question_id])
        q = session.advance()
    result = student.submit_exam(session)
    print(f"{student.username} submitted exam. Score: {result.score}/{result.total_marks}")
    return result


def _grade_essays(result: ExamResult) -> None:
    notes: List[str] = []
    for q, _answer in result.session.answers.items():
        if isinstance(q, EssayQuestion):
            notes.append(f"{q.question_id}: {q.manual_grade(min(DEMO_ESSAY_GRADE, q.marks))}/{q.marks}")
    if notes:
        result.add_comments("Essay grades: " + ", ".join(notes))


def _persist(results: List[ExamResult], data_dir: str) -> None:
    from storage.store import append_results, init_store, validate_records

    path = Path(data_dir)
    init_store(path)
    append_results(validate_records([r.to_row() for r in results]), path)
    print(f"Saved {len(results)} result(s) to {path}")


def run_demo(cfg: Dict[str, Any], *, persist: bool = False) -> int:
    seed = cfg["session"].get("seed")
    if seed is None:
        seed = seed_from_env()
    rng = make_rng(seed)

    registry = ExamRegistry()
    admin = registry.create_admin("adminUser")
    students = [registry.create_student("student1"), registry.create_student("student2")]

    pool = _build_pool(admin)
    exam = admin.create_exam(
        "General Knowledge Test",
        timedelta(minutes=cfg["exam"]["duration_minutes"]),
        pool=pool,
        rng=rng,
    )
    exam.add_question(pool.get_question("GK_Q1"))
    exam.set_random_question_count(cfg["exam"]["random_question_count"])
    if not admin.publish_exam(exam):
        return 1
    print(f"Exam published: {exam.name}")

    results: List[ExamResult] = []
    for student in students:
        result = _take_exam(student, exam, DEMO_ANSWERS.get(student.username, {}), rng)
        if result is not None:
            results.append(result)

    print("\nAdmin viewing exam results:")
    for result in admin.view_exam_results(exam):
        _grade_essays(result)
        result.publish()
        print(format_result_line(result))
        for q, answer in result.session.answers.items():
            print(f"  Q: {q.text[:20]}..., Answer: {answer}")
        if result.comments:
            print(f"  {result.comments}")

    print()
    print(format_summary(admin.generate_exam_summary(exam), title=exam.name))

    if persist or cfg["storage"]["enabled"]:
        _persist(results, cfg["storage"]["data_dir"])
    return 0


def show_summary(data_dir: str) -> int:
    from storage.store import load_all, summarize_by_exam

    df = load_all(Path(data_dir))
    if df.empty:
        print(f"No stored results in {data_dir}")
        return 0
    for row in summarize_by_exam(df).to_dict("records"):
        print(f"{row['exam_name']}: {row['count']} result(s), avg {row['average']:.2f}, max {row['highest']}, min {row['lowest']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="onlineexam")
    p.add_argument("--version", action="version", version=f"onlineexam {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    dp = sub.add_parser("demo", help="Run the scripted two-student exam")
    dp.add_argument("--config", default=None)
    dp.add_argument("--seed", type=int, default=None)
    dp.add_argument("--explain", action="store_true")
    dp.add_argument("--persist", action="store_true", help="Append results to the Parquet store")

    sp = sub.add_parser("summary", help="Summarize stored results per exam")
    sp.add_argument("--data-dir", default="storage/data")

    cp = sub.add_parser("show-config")
    cp.add_argument("--config", default=None)

    args = p.parse_args(argv)

    if args.cmd == "show-config":
        print(yaml.safe_dump(validate_config(load_config(args.config)), sort_keys=False), end="")
        return 0

    if args.cmd == "summary":
        return show_summary(args.data_dir)

    if args.cmd == "demo":
        cfg = validate_config(load_config(args.config))
        if args.seed is not None:
            cfg["session"]["seed"] = args.seed
        explain_enable(bool(args.explain or cfg["explain"]["enabled"]))
        return run_demo(cfg, persist=args.persist)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
