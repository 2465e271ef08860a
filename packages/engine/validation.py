"""
Lightweight input validation.

Two parse policies live side by side on purpose:
  - parse_candidate: lenient, for bulk word lists. Bad entries become None
    and the caller skips them.
  - Word(...) / service.records.convert_word_data: strict, for
    user-authored patterns. Bad entries raise.

validate_guess answers "is this a real word from the list?", which the CLI
uses to warn about typos in pattern words.
"""

from typing import Iterable, Optional, Set

from .word import Word, WordError


def parse_candidate(text) -> Optional[Word]:
    """Return a Word for `text`, or None if it is not a clean 5-letter word."""
    if not isinstance(text, str):
        return None
    try:
        return Word(text)
    except WordError:
        return None


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` parses as a Word and appears in `allowed`
    (case-insensitive).

    Notes:
      - `allowed` may be a large list; a local set is built per call. Build
        it once upstream if you call this in a loop.
    """
    parsed = parse_candidate(word.strip() if isinstance(word, str) else word)
    if parsed is None:
        return False

    allowed_set: Set[str] = {a.strip().lower() for a in allowed if isinstance(a, str)}
    return parsed.to_text() in allowed_set
