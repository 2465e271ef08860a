"""
Word model shared by candidates and feedback patterns.

A Word is a fixed tuple of five Letters. Each Letter pairs a lowercase ASCII
character with a LetterState:

  - UNKNOWN   : no feedback for this slot (the default)
  - CORRECT   : green  = right letter, right position
  - MISPLACED : yellow = letter present, wrong position
  - ABSENT    : gray   = letter not present (or present fewer times)

The same type plays two roles. As a candidate only the characters matter;
as a pattern the states encode one round of guess feedback.

Only states can change after construction; characters are fixed.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import Iterator, Sequence, Tuple

# Single source of truth for word length.
WORD_LENGTH = 5

_ASCII_LETTERS = frozenset(string.ascii_letters)


class WordError(ValueError):
    """Base class for word-model construction failures."""


class InvalidLength(WordError):
    def __init__(self, message: str = f"Word must be exactly {WORD_LENGTH} letters"):
        super().__init__(message)


class InvalidCharacter(WordError):
    def __init__(self, message: str = "Character must be an ASCII letter"):
        super().__init__(message)


class LetterState(Enum):
    # Values double as the textual labels used on the wire.
    UNKNOWN = "unknown"
    CORRECT = "correct"
    MISPLACED = "misplaced"
    ABSENT = "absent"


_STATE_ORDER = {s: i for i, s in enumerate(LetterState)}


class Letter:
    """One character plus its feedback state."""

    __slots__ = ("_character", "state")

    def __init__(self, character: str, state: LetterState = LetterState.UNKNOWN):
        if not isinstance(character, str) or len(character) != 1 or character not in _ASCII_LETTERS:
            raise InvalidCharacter()
        self._character = character.lower()
        self.state = state

    @property
    def character(self) -> str:
        return self._character

    def set_state(self, state: LetterState) -> None:
        self.state = state

    def __eq__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented
        return self._character == other._character and self.state is other.state

    __hash__ = None  # state is mutable

    def __getstate__(self):
        return self._character, self.state

    def __setstate__(self, st):
        self._character, self.state = st

    def __repr__(self) -> str:
        return f"Letter({self._character!r}, {self.state.name})"


class Word:
    """
    Exactly five Letters, held in a tuple so the length is structural.

    Examples:
      w = Word("Crane")      -> str(w) == "crane", all states UNKNOWN
      w.set_state(0, LetterState.CORRECT)
      w.letter_at(0).state   -> LetterState.CORRECT
    """

    __slots__ = ("_letters",)

    def __init__(self, text: str):
        if not isinstance(text, str) or len(text) != WORD_LENGTH:
            raise InvalidLength()
        self._letters: Tuple[Letter, ...] = tuple(Letter(c) for c in text)

    @classmethod
    def from_letters(cls, letters: Sequence[Letter]) -> "Word":
        """Build a Word from prepared Letters (copied, states included)."""
        if len(letters) != WORD_LENGTH:
            raise InvalidLength()
        word = cls.__new__(cls)
        word._letters = tuple(Letter(l.character, l.state) for l in letters)
        return word

    def letter_at(self, pos: int) -> Letter:
        if not 0 <= pos < WORD_LENGTH:
            raise IndexError(f"position {pos} out of range 0..{WORD_LENGTH - 1}")
        return self._letters[pos]

    def set_state(self, pos: int, state: LetterState) -> None:
        self.letter_at(pos).set_state(state)

    def states(self) -> Tuple[LetterState, ...]:
        return tuple(l.state for l in self._letters)

    def to_text(self) -> str:
        return "".join(l.character for l in self._letters)

    def copy(self) -> "Word":
        return Word.from_letters(self._letters)

    def _key(self):
        return tuple((l.character, _STATE_ORDER[l.state]) for l in self._letters)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __iter__(self) -> Iterator[Letter]:
        return iter(self._letters)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        states = "".join(l.state.name[0] for l in self._letters)
        return f"Word({self.to_text()!r}, states={states!r})"

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._letters == other._letters

    def __lt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._key() >= other._key()

    __hash__ = None  # letters carry mutable state

    def __getstate__(self):
        return self._letters

    def __setstate__(self, letters):
        self._letters = letters
