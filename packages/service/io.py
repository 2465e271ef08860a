"""
Output helpers for filter runs.

Responsibilities:
- write_patterns_csv: one row per pattern (guess + compact feedback).
- write_manifest:     JSON manifest with config, word-list report and counts.
- timestamp_id:       stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Feedback strings are prefixed with an apostrophe to keep Excel from
  interpreting strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence
import csv
import json
import subprocess
import datetime as dt

from packages.engine import Word, pattern_to_feedback


def _excel_safe_feedback(fb: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + fb if fb else fb


def write_patterns_csv(patterns: Sequence[Word], path: str | Path) -> str:
    """
    Serialize the patterns of a run to CSV.

    Columns: index, guess, feedback
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["index", "guess", "feedback"])
        w.writeheader()
        for i, pattern in enumerate(patterns, start=1):
            w.writerow({
                "index": i,
                "guess": pattern.to_text(),
                "feedback": _excel_safe_feedback(pattern_to_feedback(pattern)),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str | Path) -> str:
    """
    Write a JSON manifest for a filter run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlist: output of datasets.validate_wordlist(...)
      - num_patterns, num_results
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
