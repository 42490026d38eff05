import io
import sys
from pathlib import Path
import pytest

from apps.cli import play, replay
from script.fetch_wordlist import parse_answers

WORDS = ["crane", "print", "cones", "scion", "tonic", "ionic", "conic", "onion"]


@pytest.fixture
def wordlist(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_play_reprompts_on_bad_line(wordlist, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("cr4ne\nc!r!an!e\n!p!lo!y!s\n"))
    play.main(["--wordlist", str(wordlist), "--rounds", "2"])
    out, err = capsys.readouterr()
    assert "(1): 8 words" in out
    assert "(2): 3 words" in out
    assert "Final: 2 words" in out
    assert "tonic" in out and "ionic" in out
    assert "invalid token" in err


def test_play_stops_on_eof(wordlist, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("c!r!an!e\n"))
    play.main(["--wordlist", str(wordlist), "--show-below", "1"])
    out, _ = capsys.readouterr()
    assert "Final: 3 words" in out
    assert "scion" not in out.splitlines()


def test_play_missing_wordlist_is_fatal(tmp_path):
    with pytest.raises(SystemExit) as exc:
        play.main(["--wordlist", str(tmp_path / "nope.txt")])
    assert "Failed to open wordlist" in str(exc.value)


def test_replay_single_answer(wordlist, capsys):
    replay.main(["--wordlist", str(wordlist), "--guess", "crane", "--guess", "ploys",
                 "--answer", "tonic"])
    out, _ = capsys.readouterr()
    assert "c!r!an!e" in out and "answer retained" in out


def test_replay_batch_writes_reports(wordlist, tmp_path, capsys):
    outdir = tmp_path / "reports"
    replay.main(["--wordlist", str(wordlist), "--guess", "crane", "--outdir", str(outdir)])
    out, _ = capsys.readouterr()
    assert "answers=8" in out
    assert len(list(outdir.glob("replay_*.csv"))) == 1
    assert len(list(outdir.glob("replay_*_manifest.json"))) == 1


def test_parse_answers_dedupes_in_order():
    html = (
        "<ul><li>2024-01-01 (Mon) 926 TONIC</li>"
        "<li>2024-01-02 (Tue) 927 CRANE</li>"
        "<li>2024-01-03 (Wed) 928 TONIC</li></ul>"
    )
    assert parse_answers(html) == ["tonic", "crane"]
