from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

log = logging.getLogger(__name__)

# Bundled default word list (JSON array of lowercase 5-letter words).
WORDS_FILE = Path(__file__).resolve().parent / "data" / "all_words.json"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str = WORDS_FILE) -> List[str]:
    """
    Load a word list.

    - `.json`: must hold a JSON array; entries are returned as-is, including
      non-strings (malformed ones are left for the filter to skip).
    - anything else: one word per line, stripped, lowercased, blanks dropped.
    """
    p = Path(p)
    if p.suffix.lower() == ".json":
        if not p.exists():
            raise FileNotFoundError(p)
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{p}: expected a JSON array")
        words = data
    else:
        words = [w.strip().lower() for w in read_lines(p) if w.strip()]

    log.info("loaded %d words from %s", len(words), p)
    return words


def write_words_json(words: Iterable[str], p: Path | str) -> str:
    """Write a word list as a JSON array (one word per line for diffs)."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(list(words), f, indent=0)
        f.write("\n")
    return str(p)
