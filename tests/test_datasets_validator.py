import json
from pathlib import Path
from packages.datasets import WORDS_FILE, validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path_txt(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_wordlist_happy_path_json(tmp_path: Path):
    words = tmp_path / "words.json"
    words.write_text(json.dumps(["crane", "raise"]), encoding="utf-8")

    rep = validate_wordlist(words)
    assert rep["passed"] is True
    assert rep["count"] == 2


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # wrong case, wrong length, a blank line and a duplicate
    words = tmp_path / "words.txt"
    words.write_text("crane\nCRANE\nshor\n\nraise\ncrane\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert rep["invalid_entries"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_missing_and_bad_json(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.json"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])

    bad = tmp_path / "bad.json"
    bad.write_text("[\"crane\",", encoding="utf-8")
    rep = validate_wordlist(bad)
    assert rep["exists"] is True and rep["passed"] is False
    assert any("JSON" in msg for msg in rep["issues"])


def test_bundled_wordlist_is_clean():
    rep = validate_wordlist(WORDS_FILE)
    assert rep["passed"] is True, rep["issues"]
    assert rep["count"] > 100
