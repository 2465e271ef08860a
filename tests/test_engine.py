import pytest
from packages.engine import (
    LetterState, Word, create_pattern, filter_words, filter_words_parallel,
    parse_candidate, pattern_from_feedback, pattern_to_feedback, score, validate_guess,
)

C, M, A = LetterState.CORRECT, LetterState.MISPLACED, LetterState.ABSENT

WORDS = ["paint", "taint", "saint", "print", "brain"]


# --- scoring golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("happy", "paper", "-GGY-"),
])
def test_score_golden(guess, answer, expected):
    assert pattern_to_feedback(score(guess, answer)) == expected


def test_score_does_not_mutate_word_guess():
    guess = Word("crane")
    score(guess, "raise")
    assert guess == Word("crane")


def test_filter_words_basic():
    pattern = create_pattern("paint", [(0, C), (1, C)])
    assert filter_words(WORDS, [pattern]) == ["paint"]


def test_filter_words_multiple_patterns():
    pattern1 = create_pattern("saint", [(4, C)])   # 't' correct at end
    pattern2 = create_pattern("brain", [(1, A)])   # 'r' absent
    assert filter_words(WORDS, [pattern1, pattern2]) == ["paint", "taint", "saint"]
    # patterns are conjoined, not sequenced
    assert filter_words(WORDS, [pattern2, pattern1]) == ["paint", "taint", "saint"]


def test_filter_words_edge_cases():
    assert filter_words([], [Word("tests")]) == []
    assert filter_words(["hello"], []) == ["hello"]

    invalid = ["valid", "toolong", "shor", "12345", None]
    assert filter_words(invalid, [Word("valid")]) == ["valid"]


def test_filter_words_complex_patterns():
    words = ["belle", "steel", "spell", "eagle", "whale"]
    pattern = create_pattern("spell", [(0, A), (1, A), (2, M), (3, C), (4, M)])
    assert filter_words(words, [pattern]) == ["belle"]


def test_filter_words_keeps_duplicates_order_and_spelling():
    words = ["saint", "PAINT", "paint", "brain", "paint"]
    pattern = pattern_from_feedback("paint", "GG???")
    out = filter_words(words, [pattern])
    assert out == ["PAINT", "paint", "paint"]
    assert all(w in words for w in out)


def test_filter_words_accepts_any_iterable():
    pattern = pattern_from_feedback("crane", "-Y--G")
    gen = (w for w in ["raise", "shore", "store", "crane"])
    assert filter_words(gen, [pattern]) == ["shore", "store"]


def test_filter_words_narrows_monotonically():
    words = ["total", "stoal", "bleed", "blend", "allot", "atoll"]
    p1 = score("allot", "total")
    p2 = score("stoal", "total")
    rem1 = set(filter_words(words, [p1]))
    rem2 = set(filter_words(words, [p1, p2]))
    assert rem2 <= rem1
    assert "total" in rem2


@pytest.mark.parametrize("workers", [1, 2])
def test_filter_words_parallel_matches_serial(workers):
    words = WORDS * 3 + ["bogus!", "paints", "plain", "giant", "saint"]
    patterns = [pattern_from_feedback("saint", "????G")]
    assert filter_words_parallel(words, patterns, max_workers=workers) == \
        filter_words(words, patterns)


def test_filter_words_parallel_small_inputs():
    assert filter_words_parallel([], [Word("tests")], max_workers=4) == []
    assert filter_words_parallel(["paint"], [], max_workers=4) == ["paint"]


def test_parse_candidate_is_lenient():
    assert parse_candidate("Paint") == Word("paint")
    assert parse_candidate("pain") is None
    assert parse_candidate("pa1nt") is None
    assert parse_candidate(None) is None


def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess(" crane ", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("trace", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("crane", ["crane", 3, None]) is True
    assert validate_guess("raise", [3]) is False
