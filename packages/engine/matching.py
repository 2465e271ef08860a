"""
Pattern matching: is a candidate word consistent with one feedback pattern?

Algorithm (per-character count reconciliation):
  1) Positional pass.
       CORRECT   -> candidate has the pattern letter at this slot
       MISPLACED -> candidate does NOT have the pattern letter at this slot
       ABSENT    -> candidate does NOT have the pattern letter at this slot
       UNKNOWN   -> no constraint
  2) Count pass, per distinct pattern letter `ch`:
       floor = #slots with `ch` marked CORRECT or MISPLACED
       candidate must hold at least `floor` copies of `ch`;
       if any slot with `ch` is ABSENT, it may hold at most `floor` copies.

Both the "all letters misplaced" and "all letters absent" patterns fall out
of these two passes:
  - all MISPLACED: the floors add up to 5, so the candidate must be an
    anagram of the pattern, and pass 1 forbids any shared position.
  - all ABSENT: every floor and cap is 0, so no pattern letter may appear.

Duplicate letters example ("happy" guessed against "paper"):
  h a p p y  ->  - G G Y -     matches "paper"
  h a p p y  ->  - G G - -     does not: the gray 'p' caps 'p' at one copy
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Tuple, Union

from .word import LetterState, Word

# Per-letter bounds: (min copies, max copies or None when unbounded)
Bounds = Dict[str, Tuple[int, Optional[int]]]


def letter_bounds(pattern: Word) -> Bounds:
    """
    Summarize a pattern's count constraints per letter.

    Returns:
      {letter: (floor, cap)} for every letter in the pattern that carries a
      CORRECT, MISPLACED or ABSENT mark. `cap` is None unless the letter has
      at least one ABSENT mark, in which case cap == floor.
    """
    floors: Counter = Counter()
    capped = set()
    for letter in pattern:
        if letter.state in (LetterState.CORRECT, LetterState.MISPLACED):
            floors[letter.character] += 1
        elif letter.state is LetterState.ABSENT:
            capped.add(letter.character)

    bounds: Bounds = {}
    for ch in set(floors) | capped:
        floor = floors[ch]
        bounds[ch] = (floor, floor if ch in capped else None)
    return bounds


def matches(candidate: Union[Word, str], pattern: Word) -> bool:
    """
    Return True if `candidate` could be the answer given `pattern`'s feedback.

    `candidate` may be a Word (its states are ignored) or a plain string,
    which is parsed strictly.
    """
    if isinstance(candidate, str):
        candidate = Word(candidate)

    text = candidate.to_text()

    # Pass 1: slot constraints
    for i, letter in enumerate(pattern):
        state = letter.state
        if state is LetterState.UNKNOWN:
            continue
        same = text[i] == letter.character
        if state is LetterState.CORRECT:
            if not same:
                return False
        elif same:
            # MISPLACED and ABSENT both rule out this slot
            return False

    # Pass 2: letter counts
    counts = Counter(text)
    for ch, (floor, cap) in letter_bounds(pattern).items():
        have = counts[ch]
        if have < floor:
            return False
        if cap is not None and have > cap:
            return False

    return True
