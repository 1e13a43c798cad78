from __future__ import annotations

"""Configuration loading and validation for onlineexam.

This module loads YAML configuration, applies defaults, and sanitizes
values that would otherwise break exam or session construction.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("exam", {})
    cfg.setdefault("session", {})
    cfg.setdefault("explain", {})
    cfg.setdefault("storage", {})

    exam = cfg["exam"]
    session = cfg["session"]
    explain = cfg["explain"]
    storage = cfg["storage"]

    exam.setdefault("duration_minutes", 30)
    exam.setdefault("random_question_count", 3)

    session.setdefault("seed", None)

    explain.setdefault("enabled", False)

    storage.setdefault("enabled", False)
    storage.setdefault("data_dir", "storage/data")

    duration = _as_int(exam.get("duration_minutes"))
    if duration is None or duration <= 0:
        print(f"WARNING: Invalid duration_minutes '{exam.get('duration_minutes')}', using 30.")
        duration = 30
    exam["duration_minutes"] = duration

    count = _as_int(exam.get("random_question_count"))
    if count is None or count < 0:
        print(f"WARNING: Invalid random_question_count '{exam.get('random_question_count')}', using 0.")
        count = 0
    exam["random_question_count"] = count

    seed = session.get("seed")
    if seed is not None:
        parsed = _as_int(seed)
        if parsed is None:
            print(f"WARNING: Invalid seed '{seed}', ignoring.")
        session["seed"] = parsed

    explain["enabled"] = bool(explain.get("enabled"))
    storage["enabled"] = bool(storage.get("enabled"))
    storage["data_dir"] = str(storage.get("data_dir") or "storage/data")

    return cfg
