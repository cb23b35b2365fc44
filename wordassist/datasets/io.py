from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from wordassist.engine.feedback import WORD_LENGTH
from wordassist.engine.validation import is_word

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDS = DATA_DIR / f"words_{WORD_LENGTH}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def clean_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """Lowercase, strip, keep alphabetic tokens of length N. Order and duplicates kept."""
    out: List[str] = []
    for ln in lines:
        w = ln.strip().lower()
        if is_word(w, N):
            out.append(w)
    return out


def load_words(path: Optional[Path | str] = None, N: int = WORD_LENGTH) -> List[str]:
    """
    Load the dictionary from `path`, or the bundled list when no path is given.
    An unreadable path is logged and the bundled list is used instead.
    """
    if path is not None:
        try:
            return clean_words(read_lines(path), N)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("couldn't read word list %s (%s); using bundled list", path, e)
    return clean_words(read_lines(DEFAULT_WORDS), N)
