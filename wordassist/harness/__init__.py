from .core import (
    DEFAULT_FIRST_WORD,
    DEFAULT_MAX_GUESSES,
    Outcome,
    RoundReport,
    SessionResult,
    oracle,
    run_batch,
    run_case,
    solve,
)
from .io import write_csv, write_manifest

__all__ = [
    "DEFAULT_FIRST_WORD", "DEFAULT_MAX_GUESSES", "Outcome", "RoundReport", "SessionResult",
    "oracle", "run_batch", "run_case", "solve", "write_csv", "write_manifest",
]
