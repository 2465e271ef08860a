"""
Helpers that build feedback patterns.

Compact feedback strings follow the scoring convention:
  'G' -> CORRECT, 'Y' -> MISPLACED, '-' -> ABSENT, '?' or '.' -> UNKNOWN

    pattern_from_feedback("crane", "GY--G")
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .word import WORD_LENGTH, InvalidLength, LetterState, Word

FEEDBACK_SYMBOLS = {
    "G": LetterState.CORRECT,
    "Y": LetterState.MISPLACED,
    "-": LetterState.ABSENT,
    "?": LetterState.UNKNOWN,
    ".": LetterState.UNKNOWN,
}

_STATE_SYMBOLS = {
    LetterState.CORRECT: "G",
    LetterState.MISPLACED: "Y",
    LetterState.ABSENT: "-",
    LetterState.UNKNOWN: "?",
}


def create_pattern(text: str, states: Iterable[Tuple[int, LetterState]] = ()) -> Word:
    """
    Build a Word from `text` and apply (position, state) overrides.
    Positions not listed stay UNKNOWN.
    """
    pattern = Word(text)
    for pos, state in states:
        pattern.set_state(pos, state)
    return pattern


def pattern_from_feedback(guess: str, feedback: str) -> Word:
    if len(feedback) != WORD_LENGTH:
        raise InvalidLength(f"Feedback must be exactly {WORD_LENGTH} symbols")
    overrides = []
    for pos, sym in enumerate(feedback.upper()):
        try:
            overrides.append((pos, FEEDBACK_SYMBOLS[sym]))
        except KeyError:
            raise ValueError(
                f"Unknown feedback symbol {sym!r} at position {pos}; "
                f"expected one of {''.join(FEEDBACK_SYMBOLS)}") from None
    return create_pattern(guess, overrides)


def pattern_to_feedback(pattern: Word) -> str:
    return "".join(_STATE_SYMBOLS[s] for s in pattern.states())
