"""
Greedy next-guess selection.

Score = distinct letters + distinct vowels (a, e, i, o, u, y). Favors words
that cover many different letters, weighted toward vowels. Cheap and fully
deterministic; not an information-theoretic choice.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

VOWELS = frozenset("aeiouy")


def score_word(word: str) -> int:
    letters = set(word)
    return len(letters) + len(letters & VOWELS)


def select_guess(candidates: Sequence[str]) -> Optional[Tuple[str, int]]:
    """
    Pick the best-scoring candidate.

    Returns:
      (guess, number of candidates) or None when `candidates` is empty.
      Ties go to the first word in input order.
    """
    if not candidates:
        return None

    best_word, best_score = candidates[0], score_word(candidates[0])
    for w in candidates[1:]:
        s = score_word(w)
        if s > best_score:
            best_word, best_score = w, s
    return best_word, len(candidates)
