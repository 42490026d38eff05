"""
Feedback line grammar.

One round of feedback is typed as a single line, one token per letter of
the guess:

  - 'c'   : lowercase letter -> Present (yellow): in the word, not here
  - 'C'   : uppercase letter -> Exact (green): this letter at this position
  - '!c'  : '!' prefix       -> Absent (grey): letter not in the word
  - '?'   : bare question    -> Absent with no letter attached

Example:
  parse_line("c!r!an!e") ->
    [Present('c'), Absent('r'), Absent('a'), Present('n'), Absent('e')]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

WORD_LENGTH = 5

# Placeholder carried by the Absent signal a bare '?' produces. It is never
# in a slot, so applying it removes nothing.
NO_LETTER = " "

MODIFIER = "!"
UNKNOWN = "?"


@dataclass(frozen=True)
class Exact:
    """Green: letter confirmed at this exact position."""
    char: str


@dataclass(frozen=True)
class Present:
    """Yellow: letter is in the word but not at this position."""
    char: str


@dataclass(frozen=True)
class Absent:
    """Grey: letter is not in the word."""
    char: str


Signal = Union[Exact, Present, Absent]


class FeedbackParseError(ValueError):
    """Base class for a feedback line that cannot be turned into signals."""


class InvalidToken(FeedbackParseError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid token in feedback line: {char!r}")


class InvalidLength(FeedbackParseError):
    def __init__(self, count: int, expected: int = WORD_LENGTH):
        self.count = count
        self.expected = expected
        super().__init__(f"feedback line gave {count} letter(s); expected {expected}")


def parse_line(line: str, N: int = WORD_LENGTH) -> List[Signal]:
    """
    Parse one feedback line into exactly N signals.

    Raises:
      InvalidToken  : a character outside [a-zA-Z!?] appeared unprefixed
      InvalidLength : the line resolved to a number of signals other than N
    """
    signals: List[Signal] = []
    blocked = False

    for ch in line:
        if ch == MODIFIER:
            blocked = True
            continue

        if blocked:
            # Whatever follows '!' is grey, whatever its case.
            signals.append(Absent(ch.lower()))
            blocked = False
        elif ch == UNKNOWN:
            signals.append(Absent(NO_LETTER))
        elif "a" <= ch <= "z":
            signals.append(Present(ch))
        elif "A" <= ch <= "Z":
            signals.append(Exact(ch.lower()))
        else:
            raise InvalidToken(ch)

    if len(signals) != N:
        raise InvalidLength(len(signals), N)
    return signals
