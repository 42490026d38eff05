import pytest
from packages.engine import (
    parse_line, Exact, Present, Absent, NO_LETTER,
    InvalidToken, InvalidLength, FeedbackParseError,
)


def test_parse_mixed_yellow_grey():
    assert parse_line("c!r!an!e") == [
        Present("c"), Absent("r"), Absent("a"), Present("n"), Absent("e"),
    ]


def test_parse_grey_prefix_first():
    assert parse_line("!p!lo!y!s") == [
        Absent("p"), Absent("l"), Present("o"), Absent("y"), Absent("s"),
    ]


def test_parse_green_is_lowercased():
    assert parse_line("CRaNe") == [
        Exact("c"), Exact("r"), Present("a"), Exact("n"), Present("e"),
    ]


def test_grey_ignores_case():
    assert parse_line("!C!r!A!n!E") == [Absent(c) for c in "crane"]


def test_question_mark_is_absent_without_letter():
    assert parse_line("??a??") == [
        Absent(NO_LETTER), Absent(NO_LETTER), Present("a"),
        Absent(NO_LETTER), Absent(NO_LETTER),
    ]


def test_repeated_modifier_still_one_signal():
    assert parse_line("!!crane")[0] == Absent("c")
    assert len(parse_line("!!crane")) == 5


def test_trailing_modifier_adds_nothing():
    assert parse_line("crane!") == [Present(c) for c in "crane"]
    with pytest.raises(InvalidLength) as exc:
        parse_line("cran!")
    assert exc.value.count == 4


@pytest.mark.parametrize("line,bad", [
    ("cr4ne", "4"),
    ("c ane", " "),
    ("cran-", "-"),
    ("é!r!an", "é"),
])
def test_invalid_token(line, bad):
    with pytest.raises(InvalidToken) as exc:
        parse_line(line)
    assert exc.value.char == bad


@pytest.mark.parametrize("line,count", [
    ("", 0),
    ("cran", 4),
    ("cranes", 6),
    ("!c!r!a!n!e!s", 6),
    ("!!!!", 0),
])
def test_invalid_length(line, count):
    with pytest.raises(InvalidLength) as exc:
        parse_line(line)
    assert exc.value.count == count


def test_token_error_wins_over_length():
    with pytest.raises(InvalidToken):
        parse_line("c#")


def test_parse_errors_are_value_errors():
    assert issubclass(InvalidToken, FeedbackParseError)
    assert issubclass(InvalidLength, ValueError)


def test_parse_other_lengths():
    assert parse_line("abcdef", N=6) == [Present(c) for c in "abcdef"]
