from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary, load_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3/3" in s and s.endswith("OK")


def test_validate_wordlist_flags_oddities(tmp_path: Path):
    p = tmp_path / "words.txt"
    # other lengths are ignored; duplicates, uppercase, digits and blanks are reported
    p.write_text("crane\ncrane\nCrane\ncr4ne\n\nraiser\n", encoding="utf-8")

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["lines"] == 6 and rep["count"] == 4
    assert rep["unique_count"] == 3
    assert rep["uppercase"] == 1 and rep["non_alpha"] == 1 and rep["blank_lines"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_no_usable_entries(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["raiser", "ox"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert any("0 entries" in msg for msg in rep["issues"])


def test_load_words_keeps_order_and_case(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Tonic", "ox", "crane", "raiser"])
    assert load_words(p, 5) == ["Tonic", "crane"]
