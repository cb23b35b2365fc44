from .validator import validate_wordlist, pretty_summary
from .io import load_words, read_lines

__all__ = ["validate_wordlist", "pretty_summary", "load_words", "read_lines"]
