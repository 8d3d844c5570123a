"""
Hint Disclosure - Which hints the player can currently see.

The hint table is closed and ordered. Each entry is a pure function of
the Subject, so hints are recomputed on every query instead of cached.

Disclosure rule:
- One hint is unlocked before any guess
- One more hint per wrong guess
- Never more than the attempt cap
"""

from __future__ import annotations
from typing import Callable

from ..config import MAX_ATTEMPTS
from .formatting import capitalize, format_generation
from .state import Subject


def type_hint(subject: Subject) -> str:
    return "Type: " + " / ".join(capitalize(t) for t in subject.types)


def generation_hint(subject: Subject) -> str:
    return "Generation: " + format_generation(subject.generation)


def color_hint(subject: Subject) -> str:
    return "Main colour: " + capitalize(subject.color)


def species_hint(subject: Subject) -> str:
    return "Species: " + subject.species_name


def cry_hint(subject: Subject) -> str:
    if subject.cry_url:
        return "Cry: (play the sound!)"
    return "Cry: (Pokémon cry hint – audio not wired in yet)"


HINTS: tuple[Callable[[Subject], str], ...] = (
    type_hint,
    generation_hint,
    color_hint,
    species_hint,
    cry_hint,
)


def visible_hint_count(attempts: int, max_attempts: int = MAX_ATTEMPTS) -> int:
    """Number of hints unlocked after `attempts` guesses."""
    return min(attempts + 1, max_attempts)


def visible_hints(
    subject: Subject | None,
    attempts: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> list[str]:
    """
    Render the currently unlocked hints, in order.

    Returns an empty list while no subject is bound (loading or error).
    """
    if subject is None:
        return []
    count = visible_hint_count(attempts, max_attempts)
    return [hint(subject) for hint in HINTS[:count]]
