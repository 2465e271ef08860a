"""
Fetch past Wordle answers and write them as the candidate word list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order, and writes a
  JSON array (the format packages.datasets.load_words reads).

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/all_words.json
    # keep words already in the list, append new ones:
    python -m script.fetch_wordlist --merge --out packages/datasets/data/all_words.json
"""

import argparse
import logging
import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import WORDS_FILE, load_words, write_words_json

log = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str) -> list[str]:
    """Pull answer words out of the page HTML (lowercase, first-seen order)."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch a 5-letter word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(WORDS_FILE))
    ap.add_argument("--merge", action="store_true",
                    help="keep words already in --out and append new ones")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    words = fetch_words(args.url)
    if args.merge and Path(args.out).exists():
        words = unique_preserve_order(load_words(args.out) + words)
    if args.sort:
        words = sorted(set(words))

    write_words_json(words, args.out)
    log.info("wrote %d unique words -> %s", len(words), args.out)


if __name__ == "__main__":
    main()
