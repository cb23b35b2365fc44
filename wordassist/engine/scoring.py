"""
Oracle feedback for a single (guess, answer) pair.

Used in test mode and batch runs, where the hidden answer is known and
feedback is generated instead of typed in by a human.

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass marks PRESENT only if the letter still has remaining count,
     consuming one occurrence each time; everything else is ABSENT.
"""

from __future__ import annotations

from collections import Counter

from .feedback import Feedback, Pattern, encode


def generate_feedback(guess: str, answer: str) -> Pattern:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("allee", "eagle") -> "yybyg"
      score("reads", "reads") -> "ggggg"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError("Guess and answer must be the same length")

    n = len(guess)
    pattern = [Feedback.ABSENT] * n

    # Pass 1: exact matches; unmatched answer letters form the availability pool.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = Feedback.EXACT
        else:
            remaining[a] += 1

    # Pass 2: PRESENT is capped by the true multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] is Feedback.EXACT:
            continue
        if remaining[g] > 0:
            pattern[i] = Feedback.PRESENT
            remaining[g] -= 1

    return tuple(pattern)


def score(guess: str, answer: str) -> str:
    """Same as generate_feedback, encoded as a symbol string ("gybbg")."""
    return encode(generate_feedback(guess, answer))
