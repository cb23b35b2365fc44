"""
Round loop for one solving session, plus batch primitives.

- solve:     drive rounds until solved, out of guesses, out of candidates,
             or the feedback source runs dry.
- oracle:    automated feedback source for a known hidden answer.
- run_case:  play the oracle against a single answer (result dict).
- run_batch: run many answers in sequence (optionally a sample prefix).

These functions are UI-agnostic: the CLI supplies a feedback source that
prompts a human, tests and benchmarks supply the oracle.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from wordassist.engine import (
    ConstraintState,
    Feedback,
    apply_feedback,
    encode,
    filter_candidates,
    format_history,
    generate_feedback,
    is_solved,
    is_word,
    restore_state,
    select_guess,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_GUESSES = 6
DEFAULT_FIRST_WORD = "reads"

# guess -> feedback, or None when there is no more input
FeedbackSource = Callable[[str], Optional[Sequence[Feedback]]]


class Outcome(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    NO_CANDIDATES = "no_candidates"
    NO_INPUT = "no_input"


@dataclass(frozen=True)
class RoundReport:
    round: int
    guess: str
    candidates: int
    feedback: Optional[tuple] = None


@dataclass
class SessionResult:
    outcome: Outcome
    rounds: List[RoundReport] = field(default_factory=list)
    state: ConstraintState = field(default_factory=ConstraintState)
    max_guesses: int = DEFAULT_MAX_GUESSES
    restored: List[tuple] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    @property
    def last_round(self) -> int:
        return self.rounds[-1].round if self.rounds else 0

    def summary(self) -> str:
        if self.outcome is Outcome.SOLVED:
            return f"Solved in {self.last_round} rounds."
        if self.outcome is Outcome.EXHAUSTED:
            return f"Failed to solve the puzzle in {self.max_guesses} guesses."
        if self.outcome is Outcome.NO_CANDIDATES:
            return "No possible candidates left; feedback and dictionary disagree."
        return "No more feedback; session ended."

    def history(self) -> str:
        """Replayed plus live rounds, in the resumable history format."""
        live = [(r.guess, r.feedback) for r in self.rounds]
        return format_history(list(self.restored) + live)


def oracle(answer: str) -> FeedbackSource:
    """Feedback source that scores every guess against a fixed hidden answer."""
    answer = answer.strip().lower()

    def source(guess: str) -> Sequence[Feedback]:
        return generate_feedback(guess, answer)

    return source


def solve(
        words: Sequence[str],
        feedback_source: FeedbackSource,
        *,
        first_word: Optional[str] = None,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        history: Optional[str] = None,
        on_guess: Optional[Callable[[RoundReport], None]] = None,
) -> SessionResult:
    """
    Run one session to a terminal outcome.

    Args:
        words:           the dictionary (already filtered to word length)
        feedback_source: callable returning feedback for a guess, None to stop
        first_word:      opening guess for a fresh session (bypasses selection);
                         lowercased, ignored unless it is N letters a-z
        max_guesses:     guess budget, must be positive
        history:         serialized rounds to replay before live play
        on_guess:        called with each round's report before feedback is asked

    Returns:
        SessionResult with the outcome, per-round reports and final state.
    """
    if max_guesses <= 0:
        raise ValueError(f"max_guesses must be positive; got {max_guesses}")

    state = ConstraintState()
    replayed = []
    if history:
        state, replayed = restore_state(history, state)
    played = min(len(replayed), max_guesses)

    opening = first_word.strip().lower() if first_word else None
    if opening is not None and not is_word(opening, state.N):
        logger.warning("ignoring opening word %r: not a %d-letter word", first_word, state.N)
        opening = None

    result = SessionResult(Outcome.EXHAUSTED, state=state, max_guesses=max_guesses,
                           restored=replayed)

    for round_no in range(played + 1, max_guesses + 1):
        if round_no == 1 and opening:
            guess, total = opening, len(words)
        else:
            picked = select_guess(filter_candidates(words, state))
            if picked is None:
                logger.error("no candidates left at round %d", round_no)
                result.outcome = Outcome.NO_CANDIDATES
                return result
            guess, total = picked

        report = RoundReport(round=round_no, guess=guess, candidates=total)
        if on_guess is not None:
            on_guess(report)

        feedback = feedback_source(guess)
        if feedback is None:
            result.outcome = Outcome.NO_INPUT
            return result

        feedback = tuple(feedback)
        result.rounds.append(replace(report, feedback=feedback))
        logger.debug("round %d: %s -> %s", round_no, guess, encode(feedback))

        if is_solved(feedback):
            result.outcome = Outcome.SOLVED
            return result

        apply_feedback(guess, feedback, state)

    result.outcome = Outcome.EXHAUSTED
    return result


def run_case(
        answer: str,
        *,
        words: Sequence[str],
        first_word: Optional[str] = DEFAULT_FIRST_WORD,
        max_guesses: int = DEFAULT_MAX_GUESSES,
) -> Dict:
    """
    Play the oracle against one hidden answer.

    Returns:
        dict with keys:
            answer, outcome, success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)])
    """
    t0 = time.perf_counter()
    r = solve(words, oracle(answer), first_word=first_word, max_guesses=max_guesses)
    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "outcome": r.outcome.value,
        "success": r.solved,
        "guesses": len(r.rounds),
        "time_ms": dt,
        "history": [(rep.guess, encode(rep.feedback)) for rep in r.rounds],
    }


def run_batch(
        answers: Sequence[str],
        *,
        words: Sequence[str],
        first_word: Optional[str] = DEFAULT_FIRST_WORD,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]
    return [
        run_case(ans, words=words, first_word=first_word, max_guesses=max_guesses)
        for ans in pool
    ]
