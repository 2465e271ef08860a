# apps/cli/run.py
"""
CLI entry point: filter a word list by guess feedback.

This script:
  1) Validates the word list (prints counts + SHA, flags invalid/duplicate entries).
  2) Builds patterns from a JSON records file and/or --guess arguments.
  3) Filters the list (optionally in parallel, with a progress bar) and prints
     the survivors; optionally writes them plus a CSV of patterns and a JSON
     manifest.

Examples:
  python -m apps.cli.run --guess crane:-Y--G --guess sport:--G--
  python -m apps.cli.run --answer paper --guess happy --guess crane
  python -m apps.cli.run --patterns patterns.json --out reports/words.txt --manifest
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from packages.datasets import WORDS_FILE, load_words, pretty_summary, validate_wordlist, write_lines
from packages.engine import (
    Word, WordError, filter_words, filter_words_parallel, pattern_from_feedback,
    pattern_to_feedback, score, validate_guess,
)
from packages.service import PatternDataError, convert_patterns, parse_patterns
from packages.service.io import git_commit_or_unknown, timestamp_id, write_manifest, write_patterns_csv

log = logging.getLogger("apps.cli.run")


def _patterns_from_args(args) -> List[Word]:
    """
    Collect patterns from --patterns (JSON records) then --guess values.
    Raises PatternDataError / WordError / ValueError on bad input.
    """
    patterns: List[Word] = []

    if args.patterns:
        p = Path(args.patterns)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PatternDataError(f"{p}: invalid JSON ({e})") from e
        patterns.extend(convert_patterns(parse_patterns(data)))

    for g in args.guess or []:
        if args.answer:
            # Feedback is computed, so a bare guess is expected
            patterns.append(score(g.split(":", 1)[0], args.answer))
        else:
            guess, sep, feedback = g.partition(":")
            if not sep:
                raise ValueError(f"--guess {g!r}: expected WORD:FEEDBACK (e.g. crane:GY--G)")
            patterns.append(pattern_from_feedback(guess, feedback))

    return patterns


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, filter with optional progress,
    and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-pattern-filter: narrow a word list by feedback")
    ap.add_argument("--words", default=str(WORDS_FILE),
                    help="word list (JSON array or one word per line)")
    ap.add_argument("--patterns", help="JSON file with a list of patterns (letter records)")
    ap.add_argument("--guess", action="append", metavar="WORD:FEEDBACK",
                    help="pattern as guess:feedback with G=correct Y=misplaced -=absent ?=unknown "
                         "(repeatable)")
    ap.add_argument("--answer",
                    help="score each --guess WORD against this answer instead of reading feedback")
    ap.add_argument("--workers", type=int, default=1,
                    help="worker processes for filtering (1 = in-process)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar over the word list (auto=bar if stderr is a terminal)."
    )
    ap.add_argument("--out", help="write the filtered words here (one per line)")
    ap.add_argument("--manifest", action="store_true",
                    help="with --out, also write <out>.patterns.csv and <out>.manifest.json")
    ap.add_argument("--limit", type=int, default=50,
                    help="max words to print (0 = all)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.manifest and not args.out:
        ap.error("--manifest requires --out")

    # 1) Validate word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        ap.error(f"word list not found: {args.words}")

    # 2) Patterns (strict: any bad pattern stops the run)
    try:
        patterns = _patterns_from_args(args)
    except (PatternDataError, WordError, ValueError) as e:
        ap.error(str(e))

    try:
        words = load_words(args.words)
    except ValueError as e:
        ap.error(str(e))
    for pattern in patterns:
        if not validate_guess(pattern.to_text(), words):
            log.warning("guess %r is not in the word list", pattern.to_text())
        log.debug("pattern %s %s", pattern.to_text(), pattern_to_feedback(pattern))

    # 3) Filter
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    if args.workers > 1:
        result = filter_words_parallel(words, patterns, max_workers=args.workers)
    elif mode == "bar":
        result = filter_words(tqdm(words, ncols=80, desc="Filtering", unit="word"), patterns)
    else:
        result = filter_words(words, patterns)

    print(f"{len(result)} of {len(words)} words match {len(patterns)} pattern(s)")
    shown = result if args.limit <= 0 else result[: args.limit]
    for w in shown:
        print(w)
    if len(shown) < len(result):
        print(f"... ({len(result) - len(shown)} more)")

    # 4) Outputs
    if args.out:
        out_path = Path(args.out)
        print(f"Wrote: {write_lines(result, out_path)}")
        if args.manifest:
            csv_path = out_path.with_name(out_path.name + ".patterns.csv")
            manifest_path = out_path.with_name(out_path.name + ".manifest.json")
            write_patterns_csv(patterns, csv_path)
            manifest = {
                "run_id": timestamp_id(),
                "git_commit": git_commit_or_unknown(),
                "config": vars(args),
                "wordlist": rep,
                "num_patterns": len(patterns),
                "num_results": len(result),
            }
            write_manifest(manifest, manifest_path)
            print(f"Wrote: {csv_path}")
            print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
