"""
Output files for a batch benchmark run.

- summarize:      solved count and mean guesses over run_case results.
- write_csv:      one row per game, with the guess/feedback history spread
                  over fixed columns.
- write_manifest: JSON record of the run (config, word list report, summary).
- timestamp_id:   UTC run id used in output file names.

Feedback strings in the CSV are prefixed with an apostrophe so spreadsheet
apps keep them as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    """Example: "gybbg" -> "'gybbg"."""
    return "'" + patt if patt else patt


def summarize(results: List[Dict]) -> Dict:
    solved = [r for r in results if r["success"]]
    mean = sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0
    outcomes: Dict[str, int] = {}
    for r in results:
        outcomes[r["outcome"]] = outcomes.get(r["outcome"], 0) + 1
    return {
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": round(mean, 4),
        "outcomes": outcomes,
    }


def write_csv(results: List[Dict], path: Path | str, max_guesses: int) -> str:
    """
    Columns: answer, outcome, guesses, time_ms, then guess_i/patt_i for
    i = 1..max_guesses (blank past the end of a game).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "outcome", "guesses", "time_ms"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()
        for r in results:
            row = {
                "answer": r["answer"],
                "outcome": r["outcome"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            for i, (g, patt) in enumerate(r["history"][:max_guesses], 1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def _git_commit() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()


def write_manifest(path: Path | str, *, run_id: str, config: Dict, wordlist: Dict,
                   results: List[Dict]) -> str:
    """Write the run manifest: id, git commit, CLI config, word list report and summary."""
    manifest = {
        "run_id": run_id,
        "git_commit": _git_commit(),
        "config": config,
        "wordlist": wordlist,
        **summarize(results),
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
