"""
Formatting - Name normalization and display helpers.

normalize_name() is only ever used for guess/answer equality.
The display helpers never feed back into comparisons.
"""

from __future__ import annotations
import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_name(text: str) -> str:
    """
    Canonicalize a name for equality comparison.

    Steps (order matters):
    1. Lower-case
    2. Gender symbols become "f" / "m" (nidoran♀ -> nidoranf)
    3. Drop spaces, hyphens, punctuation and anything else non-alphanumeric
    """
    folded = text.lower()
    folded = folded.replace("♀", "f").replace("♂", "m")
    return _NON_ALNUM.sub("", folded)


def capitalize(word: str | None) -> str:
    """Upper-case the first character, leave the rest alone."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def format_generation(label: str | None) -> str:
    """Format a generation label: "generation-iii" -> "Generation III"."""
    if not label:
        return "Unknown"
    suffix = label.replace("generation-", "", 1)
    return "Generation " + suffix.upper()
