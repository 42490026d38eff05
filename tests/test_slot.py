import string
from packages.engine import Slot


def test_default_slot_allows_whole_alphabet():
    s = Slot()
    assert all(s.contains(c) for c in string.ascii_lowercase)
    assert not s.contains("A")
    assert len(s) == 26


def test_remove_is_idempotent():
    s = Slot()
    s.remove("e")
    before = s.allowed
    s.remove("e")
    assert s.allowed == before
    assert "e" not in s and len(s) == 25


def test_remove_unknown_char_is_noop():
    s = Slot("abc")
    s.remove(" ")
    s.remove("z")
    assert s.allowed == frozenset("abc")


def test_restrict_keeps_only_one_letter():
    s = Slot()
    s.restrict("t")
    assert s.allowed == frozenset("t")
    # removing other letters can't widen it again
    s.remove("a")
    s.remove("z")
    assert s.contains("t") and not s.contains("a")
    s.remove("t")
    assert len(s) == 0


def test_slot_from_iterable():
    s = Slot(string.ascii_lowercase[:4])
    assert repr(s) == "Slot('abcd')"
    assert s.contains("d") and not s.contains("e")
