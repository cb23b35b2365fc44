import pytest
from wordassist.engine import (
    ConstraintState, Feedback, apply_feedback, encode, filter_candidates, generate_feedback,
    is_solved, parse_feedback, parse_symbol, score, select_guess, score_word, validate_guess,
)

G, Y, B = Feedback.EXACT, Feedback.PRESENT, Feedback.ABSENT


# --- feedback symbols ---
@pytest.mark.parametrize("ch,expected", [
    ("g", G), ("G", G), ("y", Y), ("Y", Y), ("b", B), ("B", B),
    ("x", None), ("-", None), ("", None), ("gy", None),
])
def test_parse_symbol(ch, expected):
    assert parse_symbol(ch) is expected


def test_parse_feedback():
    assert parse_feedback("GyBbg") == (G, Y, B, B, G)
    assert parse_feedback("gybb") is None
    assert parse_feedback("gybbx") is None
    assert encode((G, Y, B, B, G)) == "gybbg"
    assert is_solved(parse_feedback("ggggg"))
    assert not is_solved(parse_feedback("gggyg"))


# --- oracle golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("reads", "reads", "ggggg"),
    ("allee", "eagle", "yybyg"),
    ("crane", "trace", "yggbg"),
    ("crane", "brace", "yggbg"),
    ("raise", "crane", "yybbg"),
    ("belle", "level", "bgyyy"),
    ("speed", "abide", "bbyby"),
    ("eerie", "geese", "ygbbg"),
    ("geese", "eagle", "yybbg"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_repeated_letter_never_double_counted():
    fb = generate_feedback("allee", "eagle")
    marked_l = [f for ch, f in zip("allee", fb) if ch == "l" and f is not B]
    marked_e = [f for ch, f in zip("allee", fb) if ch == "e" and f is not B]
    assert len(marked_l) == 1
    assert len(marked_e) == 2


def test_score_length_mismatch():
    with pytest.raises(ValueError):
        generate_feedback("crane", "cranes")


# --- constraint accumulation ---
def test_apply_feedback_records_everything():
    s = ConstraintState()
    apply_feedback("crane", (Y, G, G, B, G), s)
    assert s.fixed == [None, "r", "a", None, "e"]
    assert s.misplaced == [("c", 0)]
    assert s.excluded == {"n"}
    assert s.min_counts == {"c": 1, "r": 1, "a": 1, "e": 1}


def test_min_counts_merge_by_max_not_sum():
    s = ConstraintState()
    apply_feedback("eerie", generate_feedback("eerie", "geese"), s)
    assert s.min_counts["e"] == 3
    apply_feedback("geese", generate_feedback("geese", "eagle"), s)
    assert s.min_counts["e"] == 3
    assert s.min_counts["g"] == 1


def test_apply_twice_is_idempotent_for_filtering():
    words = ["crane", "slate", "trace", "brace", "react", "caret"]
    once, twice = ConstraintState(), ConstraintState()
    apply_feedback("crane", (Y, G, G, B, G), once)
    apply_feedback("crane", (Y, G, G, B, G), twice)
    apply_feedback("crane", (Y, G, G, B, G), twice)
    assert len(twice.misplaced) == 2
    assert twice.fixed == once.fixed and twice.min_counts == once.min_counts
    assert filter_candidates(words, twice) == filter_candidates(words, once)


# --- candidate filter ---
def test_filter_end_to_end_round():
    words = ["crane", "slate", "trace", "brace"]
    s = ConstraintState()
    apply_feedback("crane", generate_feedback("crane", "trace"), s)
    # "brace" yields the same feedback for "crane", so it stays a candidate.
    assert filter_candidates(words, s) == ["trace", "brace"]


def test_filter_preserves_order_and_duplicates():
    words = ["trace", "slate", "brace", "trace", "crane"]
    s = ConstraintState()
    apply_feedback("crane", (Y, G, G, B, G), s)
    assert filter_candidates(words, s) == ["trace", "brace", "trace"]
    assert filter_candidates(words, ConstraintState()) == words


def test_filter_min_count():
    words = ["eerie", "eagle", "geese", "level", "crane"]
    s = ConstraintState(min_counts={"e": 2})
    assert filter_candidates(words, s) == ["eerie", "eagle", "geese", "level"]


def test_excluded_letter_with_min_count_is_only_lower_bounded():
    words = ["eagle", "geese", "adage"]
    s = ConstraintState()
    apply_feedback("geese", generate_feedback("geese", "eagle"), s)
    assert "e" in s.excluded and s.min_counts["e"] == 2
    assert filter_candidates(words, s) == ["eagle"]


def test_excluded_letter_without_min_count_is_banned():
    s = ConstraintState()
    apply_feedback("slate", (B, B, B, B, B), s)
    assert filter_candidates(["crane", "brick", "dough"], s) == ["brick", "dough"]


def test_filter_skips_wrong_length():
    assert filter_candidates(["crane", "cranes", "cran"], ConstraintState()) == ["crane"]


# --- guess selection ---
def test_score_word():
    assert score_word("trace") == 7
    assert score_word("eerie") == 5
    assert score_word("crwth") == 5


def test_select_guess_picks_highest_first_on_ties():
    assert select_guess(["crwth", "trace", "brace"]) == ("trace", 3)
    assert select_guess(["brace", "trace"]) == ("brace", 2)
    assert select_guess(["crwth", "audio"]) == ("audio", 2)


def test_select_guess_is_deterministic():
    cands = ["slate", "crane", "adieu", "trace", "audio"]
    assert len({select_guess(cands) for _ in range(10)}) == 1


def test_select_guess_empty():
    assert select_guess([]) is None


# --- boundary validation ---
def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", allowed) is False
    assert validate_guess(None, allowed) is False


def test_state_copy_is_independent():
    s = ConstraintState()
    apply_feedback("crane", (Y, G, G, B, G), s)
    c = s.copy()
    apply_feedback("slate", (B, B, G, B, G), c)
    assert c != s
    assert s.excluded == {"n"}
    assert s.misplaced == [("c", 0)]


def test_validate_guess_rejects_non_ascii():
    assert validate_guess("éclat", ["éclat", "crane"]) is False
