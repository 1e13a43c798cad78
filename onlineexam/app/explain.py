from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the CLI flag or config and emit terse, readable lines at
session milestones. Warnings are always printed.
"""

import json
import sys
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    data = payload or {}
    try:
        # keep it short; one line JSON
        print(f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',', ':'), default=str)}")
    except (TypeError, ValueError):
        print(f"[EXPLAIN] {event}")


def warn(message: str) -> None:
    """Report a recoverable condition on stderr."""
    print(f"WARNING: {message}", file=sys.stderr)
