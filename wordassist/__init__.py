"""wordassist: interactive word-puzzle solving assistant."""

__version__ = "0.1.0"
