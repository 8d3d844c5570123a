"""
Session Module - Runs guessing games.

A session represents one play-through against one creature:
- Created when the player starts (or replays) a game
- Holds the current phase, attempts and status text
- Replaced wholesale on replay

Sessions are EPHEMERAL:
- No persistence to database
- Nothing survives a restart
"""

from .controller import GameController, RevealedSubject, SessionSnapshot
from .manager import ManagedSession, SessionManager

__all__ = [
    "GameController",
    "RevealedSubject",
    "SessionSnapshot",
    "ManagedSession",
    "SessionManager",
]
