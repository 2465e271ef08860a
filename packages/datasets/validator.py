"""
Word-list validator.

What this module does:
- Validate a candidate word list (JSON array or one word per line).
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters).
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Invalid entries are not fatal for filtering (the engine skips them), but a
clean list is what `passed` asks for.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/all_words.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import json

from packages.engine.word import WORD_LENGTH


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_entries: int # entries that are not clean 5-letter lowercase words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_clean(w) -> bool:
    return (
        isinstance(w, str)
        and len(w) == WORD_LENGTH
        and w.isascii()
        and w.isalpha()
        and w.islower()
    )


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load entries and split them into valid words and an invalid count.

    Rules:
      - JSON files: every array item is one entry
      - text files: one entry per line, surrounding whitespace ignored
      - empty/whitespace-only lines are INVALID
    """
    if path.suffix.lower() == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        entries = data if isinstance(data, list) else []
    else:
        with path.open("r", encoding="utf-8") as f:
            entries = [raw.strip() for raw in f]

    valid = [w for w in entries if _is_clean(w)]
    return valid, len(entries) - len(valid)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str | Path) -> Dict:
    """
    Validate a word list for the 5-letter engine.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) with counts,
        SHA-256, `passed` (non-empty, no invalid entries, no duplicates)
        and `issues`.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordListReport(str(path), False, 0, 0, 0, "", False, issues))

    try:
        words, invalid = _load_and_check(p)
    except json.JSONDecodeError as e:
        issues.append(f"word list is not valid JSON: {e}")
        return asdict(WordListReport(str(p), True, 0, 0, 0, _sha256_file(p), False, issues))

    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate(s)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_entries=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_entries']}, sha={sha}) | {status}"
    )
