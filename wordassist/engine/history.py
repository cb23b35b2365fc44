"""
Resumable round history.

Format: comma-separated entries, each a 5-letter guess followed by its
5-symbol feedback, e.g. "slateybbbb,pastsgbbbg". Whitespace around entries
is ignored. Malformed entries are skipped with a warning; the rest of the
history is still used.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .constraints import ConstraintState, apply_feedback
from .feedback import WORD_LENGTH, Feedback, Pattern, encode, parse_feedback
from .validation import is_word

logger = logging.getLogger(__name__)

HISTORY_DELIMITER = ","

Round = Tuple[str, Pattern]


def parse_history(text: str, N: int = WORD_LENGTH) -> List[Round]:
    """Parse a serialized history into (guess, feedback) rounds, skipping bad entries."""
    rounds: List[Round] = []
    if not text:
        return rounds

    for entry in (e.strip() for e in text.split(HISTORY_DELIMITER)):
        if len(entry) != 2 * N:
            logger.warning("skipping invalid history entry %r (expected %d characters)",
                           entry, 2 * N)
            continue
        guess, symbols = entry[:N].lower(), entry[N:]
        if not is_word(guess, N):
            logger.warning("skipping history entry %r: guess %r is not a word", entry, guess)
            continue
        feedback = parse_feedback(symbols, N)
        if feedback is None:
            logger.warning("skipping history entry %r: invalid feedback %r", entry, symbols)
            continue
        rounds.append((guess, feedback))
    return rounds


def format_history(rounds: Iterable[Tuple[str, Sequence[Feedback]]]) -> str:
    """Inverse of parse_history for well-formed rounds."""
    return HISTORY_DELIMITER.join(g + encode(fb) for g, fb in rounds)


def restore_state(
        text: str,
        state: Optional[ConstraintState] = None,
) -> Tuple[ConstraintState, List[Round]]:
    """
    Replay a serialized history into a ConstraintState.

    Returns the state and the rounds that were actually applied; callers
    decrement their guess budget by len(rounds).
    """
    if state is None:
        state = ConstraintState()
    rounds = parse_history(text, state.N)
    for guess, feedback in rounds:
        apply_feedback(guess, feedback, state)
    if rounds:
        logger.debug("restored %d round(s) from history", len(rounds))
    return state, rounds
