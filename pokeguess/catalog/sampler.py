"""
Identifier Sampler - Picks which creature a session is about.
"""

from __future__ import annotations
import random

from ..config import MAX_SUBJECT_ID, MIN_SUBJECT_ID


def random_subject_id(
    rng: random.Random | None = None,
    low: int = MIN_SUBJECT_ID,
    high: int = MAX_SUBJECT_ID,
) -> int:
    """Uniform integer in [low, high], both ends inclusive."""
    rng = rng or random
    return rng.randint(low, high)
