import pickle

import pytest
from packages.engine import (
    Letter, LetterState, Word, InvalidLength, InvalidCharacter, WordError,
)


def test_word_creation():
    assert str(Word("hello")) == "hello"
    with pytest.raises(InvalidLength):
        Word("hi")
    with pytest.raises(InvalidLength):
        Word("toolong")
    with pytest.raises(InvalidCharacter):
        Word("12345")
    # non-ASCII letters are rejected even though str.isalpha() accepts them
    with pytest.raises(InvalidCharacter):
        Word("héllo")


def test_errors_are_value_errors_with_messages():
    with pytest.raises(ValueError, match="exactly 5 letters"):
        Word("shor")
    with pytest.raises(WordError, match="ASCII letter"):
        Word("ab-de")


def test_case_is_normalized():
    w = Word("CrAnE")
    assert w.to_text() == "crane"
    assert all(l.state is LetterState.UNKNOWN for l in w)
    assert len(w) == 5


def test_letter_states():
    word = Word("hello")
    word.set_state(0, LetterState.CORRECT)
    word.letter_at(1).set_state(LetterState.MISPLACED)
    word.set_state(2, LetterState.ABSENT)

    assert word.letter_at(0).state is LetterState.CORRECT
    assert word.letter_at(1).state is LetterState.MISPLACED
    assert word.letter_at(2).state is LetterState.ABSENT
    assert word.states()[3:] == (LetterState.UNKNOWN, LetterState.UNKNOWN)
    # state changes never touch the characters
    assert word.to_text() == "hello"


@pytest.mark.parametrize("pos", [-1, 5, 99])
def test_letter_at_out_of_range(pos):
    with pytest.raises(IndexError):
        Word("hello").letter_at(pos)


def test_letter_validation_and_read_only_character():
    assert Letter("Q").character == "q"
    assert Letter("a", LetterState.ABSENT).state is LetterState.ABSENT
    for bad in ("", "ab", "1", " ", "ß"):
        with pytest.raises(InvalidCharacter):
            Letter(bad)
    with pytest.raises(AttributeError):
        Letter("a").character = "b"


def test_equality_includes_state():
    a, b = Word("crane"), Word("CRANE")
    assert a == b
    b.set_state(0, LetterState.CORRECT)
    assert a != b
    assert a != "crane"
    with pytest.raises(TypeError):
        hash(a)


def test_ordering_by_letters_then_states():
    assert Word("apple") < Word("berry")
    plain, marked = Word("crane"), Word("crane")
    marked.set_state(4, LetterState.CORRECT)
    assert plain < marked
    assert sorted([Word("zebra"), Word("apple")])[0].to_text() == "apple"


def test_copy_is_independent():
    w = Word("stamp")
    c = w.copy()
    c.set_state(0, LetterState.CORRECT)
    assert w.letter_at(0).state is LetterState.UNKNOWN
    assert Word.from_letters(list(c)) == c


def test_pickle_keeps_states():
    w = Word("steam")
    w.set_state(2, LetterState.MISPLACED)
    assert pickle.loads(pickle.dumps(w)) == w
