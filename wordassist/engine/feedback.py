"""
Per-letter feedback classes and their textual encoding.

Conventions (case-insensitive on input, lowercase on output):
  - 'g' : green  = EXACT   (correct letter, correct position)
  - 'y' : yellow = PRESENT (letter in the answer, wrong position)
  - 'b' : black  = ABSENT  (letter not in the answer, or an excess repeat)

Parsing never raises: an unrecognized symbol yields None and the caller
decides whether to re-prompt, skip or abort.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

WORD_LENGTH = 5


class Feedback(Enum):
    EXACT = "g"
    PRESENT = "y"
    ABSENT = "b"


# One feedback value per letter position of a guess.
Pattern = Tuple[Feedback, ...]

_SYMBOLS = {f.value: f for f in Feedback}


def parse_symbol(ch: str) -> Optional[Feedback]:
    """Map a single character to its Feedback class, or None if unrecognized."""
    if not isinstance(ch, str) or len(ch) != 1:
        return None
    return _SYMBOLS.get(ch.lower())


def parse_feedback(text: str, N: int = WORD_LENGTH) -> Optional[Pattern]:
    """
    Parse a feedback string like "gybbg" into a Pattern.

    Returns None if `text` is not exactly N characters long or contains
    any unrecognized symbol.
    """
    text = text.strip()
    if len(text) != N:
        return None
    out = []
    for ch in text:
        f = parse_symbol(ch)
        if f is None:
            return None
        out.append(f)
    return tuple(out)


def encode(feedback: Iterable[Feedback]) -> str:
    """Pattern -> symbol string, e.g. (EXACT, ABSENT, ...) -> "gb..."."""
    return "".join(f.value for f in feedback)


def is_solved(feedback: Iterable[Feedback]) -> bool:
    fb = list(feedback)
    return bool(fb) and all(f is Feedback.EXACT for f in fb)
