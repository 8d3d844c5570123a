"""
Engine Core - Guess evaluation and hint disclosure.

The engine is the pure part of the game:
1. Holds the Subject and GameSession values
2. Normalizes names for comparison
3. Decides which hints are visible
4. Applies session transitions via the reducer
"""

from .state import GamePhase, GameSession, Subject
from .formatting import capitalize, format_generation, normalize_name
from .hints import HINTS, visible_hint_count, visible_hints
from .reducer import (
    GuessOutcome,
    GuessResult,
    begin_loading,
    evaluate_guess,
    is_current,
    resolve_failed,
    resolve_loaded,
)

__all__ = [
    "GamePhase",
    "GameSession",
    "Subject",
    "capitalize",
    "format_generation",
    "normalize_name",
    "HINTS",
    "visible_hint_count",
    "visible_hints",
    "GuessOutcome",
    "GuessResult",
    "begin_loading",
    "evaluate_guess",
    "is_current",
    "resolve_failed",
    "resolve_loaded",
]
