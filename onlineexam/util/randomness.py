from __future__ import annotations

"""Randomness helpers: seeded, injectable random sources."""

import os
import random
from typing import Optional


def seed_from_env() -> Optional[int]:
    """Return the SEED env var as an int, or None when unset or malformed."""
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        return None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build an independent random source; a None seed draws from system entropy."""
    return random.Random(seed)
