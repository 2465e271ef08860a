"""
Candidate filtering given accumulated feedback patterns.

Given:
  - a word list (plain strings, any iterable)
  - a list of pattern Words

Return:
  - the words consistent with ALL patterns, in input order.

Malformed entries in the word list are skipped silently (lenient parse);
duplicates are kept. With no patterns every parseable word is returned.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .matching import matches
from .validation import parse_candidate
from .word import Word

log = logging.getLogger(__name__)


def filter_words(all_words: Iterable[str], patterns: Sequence[Word]) -> List[str]:
    """
    Keep only words that match every pattern.

    Args:
      all_words : iterable of candidate strings (may be a progress-bar wrapper)
      patterns  : pattern Words; their order does not affect the result

    Returns:
      List[str] of surviving words, exactly as given in `all_words`.
    """
    patterns = list(patterns)
    out: List[str] = []
    skipped = 0

    for w in all_words:
        candidate = parse_candidate(w)
        if candidate is None:
            skipped += 1
            continue

        if all(matches(candidate, p) for p in patterns):
            out.append(w)

    if skipped:
        log.debug("skipped %d malformed word(s)", skipped)
    return out


def _filter_chunk(words: List[str], patterns: List[Word]) -> List[str]:
    return filter_words(words, patterns)


def filter_words_parallel(
        all_words: Sequence[str],
        patterns: Sequence[Word],
        max_workers: Optional[int] = None,
) -> List[str]:
    """
    Same result as filter_words, computed over contiguous chunks in worker
    processes. Chunks are concatenated in their original order.

    max_workers <= 1 runs in-process. None lets the executor pick.
    """
    words = list(all_words)
    patterns = list(patterns)
    if (max_workers is not None and max_workers <= 1) or len(words) < 2:
        return filter_words(words, patterns)

    n_chunks = max_workers or os.cpu_count() or 1
    bounds = np.array_split(np.arange(len(words)), min(n_chunks, len(words)))
    chunks = [words[int(idx[0]):int(idx[-1]) + 1] for idx in bounds if len(idx)]
    log.debug("filtering %d words in %d chunk(s)", len(words), len(chunks))

    out: List[str] = []
    with ProcessPoolExecutor(max_workers=max_workers) as pool:
        for part in pool.map(_filter_chunk, chunks, repeat(patterns)):
            out.extend(part)
    return out
