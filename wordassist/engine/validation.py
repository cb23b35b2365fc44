"""
Lightweight word validation at the user boundary.

A word supplied on the command line (opening word, test-mode answer) is
acceptable iff:
  - it is a string
  - it is alphabetic a-z only
  - it has exact length N
  - it exists in the provided `allowed` list/set
"""

from __future__ import annotations

from typing import Iterable, Set

from .feedback import WORD_LENGTH


def is_word(w: str, N: int = WORD_LENGTH) -> bool:
    """True for exactly N letters a-z (ASCII only, any case)."""
    return len(w) == N and w.isascii() and w.isalpha()


def validate_guess(word: str, allowed: Iterable[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid word per the rules above.

    Args:
      word    : proposed word
      allowed : the dictionary
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if not is_word(w, N):
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set
