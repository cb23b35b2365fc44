# apps/cli/solve.py
"""
Interactive solving assistant.

Manual mode: suggests a guess each round and asks for the feedback the game
showed (g = green, y = yellow, b = gray), e.g. "gbybb". A blank line or EOF
ends the session.

Test mode (-t WORD): plays against a known answer with generated feedback.

Resume (-s STATE): replay earlier rounds, e.g. "slateybbbb,pastsgbbbg",
before continuing manually. Ignored in test mode.
"""

from __future__ import annotations

import argparse
import functools
import logging
import sys
from typing import List, Optional, Sequence

from wordassist.datasets import load_words
from wordassist.engine import Feedback, parse_feedback, validate_guess
from wordassist.harness import (
    DEFAULT_FIRST_WORD,
    DEFAULT_MAX_GUESSES,
    Outcome,
    RoundReport,
    oracle,
    solve,
)

logger = logging.getLogger(__name__)

FEEDBACK_HELP = "g=green, y=yellow, b=gray"


def prompt_feedback(guess: str, input_fn=input) -> Optional[Sequence[Feedback]]:
    """
    Ask for feedback until a valid 5-symbol string is entered.
    Returns None on blank input or EOF.
    """
    while True:
        try:
            raw = input_fn(f"Enter feedback for `{guess}` ({FEEDBACK_HELP}): ")
        except EOFError:
            return None
        text = raw.strip()
        if not text:
            return None
        if len(text) != len(guess):
            print(f"Error: feedback must be {len(guess)} characters.", file=sys.stderr)
            continue
        fb = parse_feedback(text, len(guess))
        if fb is None:
            print(f"Error: invalid feedback `{text}` ({FEEDBACK_HELP}).", file=sys.stderr)
            continue
        return fb


def _print_round(report: RoundReport) -> None:
    print(f"Guess {report.round}: {report.guess} ({report.candidates} candidates)")


def _max_guesses(raw: Optional[str]) -> int:
    if raw is None:
        return DEFAULT_MAX_GUESSES
    try:
        n = int(raw)
    except ValueError:
        n = 0
    if n <= 0:
        logger.warning("invalid value for --guesses: %r; using default %d",
                        raw, DEFAULT_MAX_GUESSES)
        return DEFAULT_MAX_GUESSES
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordassist — word puzzle solving assistant")
    ap.add_argument("-w", "--words", help="path to a word list (one word per line)")
    ap.add_argument("-f", "--first", default=DEFAULT_FIRST_WORD,
                    help=f"opening guess (default: {DEFAULT_FIRST_WORD})")
    ap.add_argument("-s", "--state",
                    help="resume from history, e.g. slateybbbb,pastsgbbbg")
    ap.add_argument("-t", "--test", help="answer to play against (test mode)")
    ap.add_argument("-g", "--guesses", help=f"maximum guesses (default: {DEFAULT_MAX_GUESSES})")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None, input_fn=input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    words = load_words(args.words)
    allowed = set(words)

    first = args.first.strip().lower()
    if not validate_guess(first, allowed):
        logger.warning("invalid first word %r; using default %r", args.first, DEFAULT_FIRST_WORD)
        first = DEFAULT_FIRST_WORD

    answer = None
    if args.test is not None:
        if validate_guess(args.test, allowed):
            answer = args.test.strip().lower()
        else:
            logger.warning("invalid test word %r; ignoring --test", args.test)

    max_guesses = _max_guesses(args.guesses)

    if answer is not None:
        print(f"wordassist - (Test Mode) Answer: '{answer}'")
        source = oracle(answer)
        history = None
    else:
        print("wordassist - (Manual Mode)")
        source = functools.partial(prompt_feedback, input_fn=input_fn)
        history = args.state

    result = solve(words, source, first_word=first, max_guesses=max_guesses,
                   history=history, on_guess=_print_round)

    if result.outcome is Outcome.NO_CANDIDATES:
        print(f"Error: {result.summary()}", file=sys.stderr)
    else:
        print(result.summary())
    if result.outcome is not Outcome.SOLVED and (result.rounds or result.restored):
        print(f"State: {result.history()}")

    return 1 if result.outcome in (Outcome.NO_CANDIDATES, Outcome.EXHAUSTED) else 0


if __name__ == "__main__":
    sys.exit(main())
