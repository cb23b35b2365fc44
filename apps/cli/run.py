# apps/cli/run.py
"""
Batch benchmark for the guess heuristic.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Plays the oracle against every word (or a seeded sample) as the answer.
  3) Writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word list report, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordassist.datasets import load_words, pretty_summary, validate_wordlist
from wordassist.datasets.io import DEFAULT_WORDS
from wordassist.engine import WORD_LENGTH, validate_guess
from wordassist.harness import DEFAULT_FIRST_WORD, DEFAULT_MAX_GUESSES, run_case
from wordassist.harness.io import summarize, timestamp_id, write_csv, write_manifest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordassist — batch benchmark")
    ap.add_argument("--words", default=str(DEFAULT_WORDS), help="path to word list")
    ap.add_argument("--first", default=DEFAULT_FIRST_WORD, help="opening guess")
    ap.add_argument("--guesses", type=int, default=DEFAULT_MAX_GUESSES, help="maximum guesses")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if args.guesses <= 0:
        print(f"Error: --guesses must be positive; got {args.guesses}", file=sys.stderr)
        return 2

    # 1) Validate and load the dictionary
    rep = validate_wordlist(WORD_LENGTH, args.words)
    print(pretty_summary(rep))
    words = load_words(args.words)

    first = args.first.strip().lower()
    if not validate_guess(first, words):
        logger.warning("invalid first word %r; using default %r", args.first, DEFAULT_FIRST_WORD)
        first = DEFAULT_FIRST_WORD

    # 2) Choose cases (deterministic sample by seed)
    cases = list(dict.fromkeys(words))
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, words=words, first_word=first, max_guesses=args.guesses))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 3) Write outputs (CSV + manifest)
    stats = summarize(results)
    print(f"Solved {stats['solved']}/{total} (mean guesses when solved: {stats['mean_guesses']:.2f})")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, csv_path, max_guesses=args.guesses)
    write_manifest(manifest_path, run_id=run_id, config=vars(args), wordlist=rep, results=results)

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
