"""
Wire records for patterns coming from a front end.

A pattern arrives as five letter records:

    [{"character": "s", "state": "correct"},
     {"character": "t", "state": "unknown"}, ...]

or wrapped as {"letters": [...]}. State labels are "unknown", "correct",
"misplaced" and "absent"; anything else is treated as "unknown".

Conversion is strict: a pattern that is not exactly five valid letters is
an error, unlike candidate words, which the filter skips quietly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from packages.engine.word import WORD_LENGTH, Letter, LetterState, Word, WordError


class PatternDataError(ValueError):
    """A pattern record set could not be turned into a Word."""


@dataclass
class LetterData:
    character: str
    state: str = "unknown"


WordData = List[LetterData]

_LABELS = {
    "correct": LetterState.CORRECT,
    "misplaced": LetterState.MISPLACED,
    "absent": LetterState.ABSENT,
}


def convert_letter_state(label: str) -> LetterState:
    return _LABELS.get(label, LetterState.UNKNOWN)


def convert_word_data(word_data: Sequence[LetterData]) -> Word:
    """
    Build a pattern Word from letter records.

    Raises:
      PatternDataError: wrong record count, or a record whose character is
      not a single ASCII letter (message carried over).
    """
    if len(word_data) != WORD_LENGTH:
        raise PatternDataError(f"Word must have exactly {WORD_LENGTH} letters")

    # one record, one letter: states stay on the letter they were given with
    try:
        letters = [Letter(ld.character, convert_letter_state(ld.state)) for ld in word_data]
    except WordError as e:
        raise PatternDataError(str(e)) from e
    return Word.from_letters(letters)


def parse_word_data(obj: Any) -> WordData:
    """Decode one JSON pattern (list of letters or {"letters": [...]})."""
    if isinstance(obj, dict):
        obj = obj.get("letters")
    if not isinstance(obj, list):
        raise PatternDataError("Pattern must be a list of letters")

    out: WordData = []
    for item in obj:
        if not isinstance(item, dict) or not isinstance(item.get("character"), str):
            raise PatternDataError("Each letter needs a string 'character'")
        state = item.get("state", "unknown")
        out.append(LetterData(item["character"], state if isinstance(state, str) else "unknown"))
    return out


def parse_patterns(obj: Any) -> List[WordData]:
    """Decode a JSON array of patterns."""
    if not isinstance(obj, list):
        raise PatternDataError("Patterns must be a JSON array")
    return [parse_word_data(item) for item in obj]
