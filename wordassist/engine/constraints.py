"""
Constraint accumulation and candidate filtering.

A ConstraintState is the knowledge gathered from every (guess, feedback)
round seen so far:
  - fixed      : letter forced at each position (from EXACT)
  - misplaced  : (letter, position) pairs; letter is in the word, not there
  - excluded   : letters reported ABSENT in at least one round
  - min_counts : per-letter minimum occurrence count, merged by max per round

The state only ever grows. Candidates are recomputed from scratch against
the full dictionary every round (order preserved as in the dictionary).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .feedback import WORD_LENGTH, Feedback


@dataclass
class ConstraintState:
    N: int = WORD_LENGTH
    fixed: List[Optional[str]] = field(default_factory=list)
    misplaced: List[Tuple[str, int]] = field(default_factory=list)
    excluded: Set[str] = field(default_factory=set)
    min_counts: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        if not self.fixed:
            self.fixed = [None] * self.N

    def copy(self) -> "ConstraintState":
        return ConstraintState(
            N=self.N,
            fixed=list(self.fixed),
            misplaced=list(self.misplaced),
            excluded=set(self.excluded),
            min_counts=dict(self.min_counts),
        )


def apply_feedback(guess: str, feedback: Sequence[Feedback], state: ConstraintState) -> None:
    """
    Fold one round of feedback into `state` (mutated in place).

    Letter counts are tallied per round (EXACT + PRESENT occurrences) and
    merged into min_counts by max, never summed across rounds.
    """
    round_counts: Counter = Counter()

    for i, (ch, f) in enumerate(zip(guess, feedback)):
        if f is Feedback.EXACT:
            state.fixed[i] = ch
            round_counts[ch] += 1
        elif f is Feedback.PRESENT:
            state.misplaced.append((ch, i))
            round_counts[ch] += 1
        else:
            state.excluded.add(ch)

    for ch, count in round_counts.items():
        if count > state.min_counts.get(ch, 0):
            state.min_counts[ch] = count


def is_candidate(word: str, state: ConstraintState) -> bool:
    """Return True if `word` is consistent with everything in `state`."""
    for i, required in enumerate(state.fixed):
        if required is not None and word[i] != required:
            return False

    for ch, pos in state.misplaced:
        if word[pos] == ch or ch not in word:
            return False

    # An excluded letter that also has a minimum count is only lower-bounded.
    for ch in state.excluded:
        if ch not in state.min_counts and ch in word:
            return False

    for ch, minimum in state.min_counts.items():
        if word.count(ch) < minimum:
            return False

    return True


def filter_candidates(words: Iterable[str], state: ConstraintState) -> List[str]:
    """
    Keep only words of length N that satisfy `state`.

    Args:
      words : the dictionary (order and duplicates preserved)
      state : accumulated constraints

    Returns:
      List[str] of consistent candidates, a subsequence of `words`.
    """
    return [w for w in words if len(w) == state.N and is_candidate(w, state)]
