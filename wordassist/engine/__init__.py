from .feedback import Feedback, parse_symbol, parse_feedback, encode, is_solved, WORD_LENGTH
from .scoring import score, generate_feedback
from .constraints import ConstraintState, apply_feedback, filter_candidates, is_candidate
from .selection import select_guess, score_word
from .history import parse_history, format_history, restore_state
from .validation import validate_guess, is_word

__all__ = [
    "Feedback", "parse_symbol", "parse_feedback", "encode", "is_solved", "WORD_LENGTH",
    "score", "generate_feedback",
    "ConstraintState", "apply_feedback", "filter_candidates", "is_candidate",
    "select_guess", "score_word",
    "parse_history", "format_history", "restore_state",
    "validate_guess", "is_word",
]
