"""
Wordle-style scoring, and conversion of a scored guess into a feedback line.

Pattern conventions (same as the on-screen tiles):
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

A (guess, pattern) pair maps onto the filter's line grammar letter by letter:
  'G' -> uppercase letter, 'Y' -> lowercase letter, '-' -> '!' + letter

  to_line("crane", "Y--Y-") -> "c!r!an!e"
"""

from collections import Counter
from typing import Literal

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Two passes: greens first (counting the answer's unmatched letters),
    then yellows capped by those remaining counts, so duplicates in the
    guess are never over-reported.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("crane", "tonic") -> "Y--Y-"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} and answer {answer!r} differ in length")

    pattern = ["-"] * len(guess)
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def to_line(guess: str, pattern: str) -> str:
    """Render a guess and its G/Y/- pattern as a feedback line."""
    guess = guess.strip().lower()
    pattern = pattern.strip().upper()
    if len(guess) != len(pattern):
        raise ValueError(f"guess {guess!r} and pattern {pattern!r} differ in length")

    out = []
    for g, p in zip(guess, pattern):
        if p == "G":
            out.append(g.upper())
        elif p == "Y":
            out.append(g)
        elif p == "-":
            out.append("!" + g)
        else:
            raise ValueError(f"unknown pattern character {p!r} in {pattern!r}")
    return "".join(out)


def feedback_line(guess: str, answer: str) -> str:
    """The line a player would type after guessing `guess` against `answer`."""
    return to_line(guess, score(guess, answer))
