"""
Invocation boundary: pattern records in, filtered word list out.

filter_word_list is the one operation a caller outside the engine needs
(a UI process, a CLI, an HTTP handler). It never raises for bad pattern
input; it reports it:

    {"ok": True,  "words": ["paint", "place", ...]}
    {"ok": False, "error": "Word must have exactly 5 letters"}

Word-list I/O failures (missing file, bad JSON) are not pattern problems
and propagate as exceptions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from packages.datasets.io import WORDS_FILE, load_words
from packages.engine import Word, filter_words
from .records import LetterData, PatternDataError, convert_word_data

log = logging.getLogger(__name__)


def convert_patterns(patterns: Iterable[Sequence[LetterData]]) -> List[Word]:
    """Strictly convert every pattern; the first bad one aborts."""
    return [convert_word_data(p) for p in patterns]


def filter_word_list(
        patterns: Iterable[Sequence[LetterData]],
        *,
        words: Optional[Iterable[str]] = None,
        words_file: Path | str = WORDS_FILE,
) -> Dict:
    """
    Convert `patterns`, then filter `words` (or the list at `words_file`).

    Returns:
      dict with "ok" and either "words" (order preserved) or "error".
    """
    try:
        converted = convert_patterns(patterns)
    except PatternDataError as e:
        log.warning("rejected pattern input: %s", e)
        return {"ok": False, "error": str(e)}

    all_words = list(words) if words is not None else load_words(words_file)
    return {"ok": True, "words": filter_words(all_words, converted)}
