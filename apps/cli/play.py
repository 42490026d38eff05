# apps/cli/play.py
"""
Interactive round loop for the candidate filter.

This script:
  1) Validates the wordlist and prints a one-line summary.
  2) Builds a CandidateFilter from the entries of length N.
  3) For each round: prints the candidate count, reads one feedback line,
     applies it, and lists every candidate once the count drops below
     --show-below.

Feedback line grammar (one token per letter of your guess):
  c   lowercase letter  -> yellow
  C   uppercase letter  -> green
  !c  '!' + letter      -> grey
  ?   unknown / skip    -> grey with no letter

Usage:
    python -m apps.cli.play --wordlist ~/.local/share/wordle_words
"""

from __future__ import annotations

import argparse
import sys

from packages.datasets import validate_wordlist, pretty_summary
from packages.engine import CandidateFilter, FeedbackParseError, WORD_LENGTH

MAX_ROUNDS = 6  # Wordle hard limit
SHOW_BELOW = 400  # list candidates only when fewer than this remain


def _read_line(prompt: str) -> str | None:
    """Read one line from stdin; None on EOF."""
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        return None
    return line.strip()


def play(f: CandidateFilter, *, rounds: int, show_below: int) -> int:
    """
    Drive the round loop on an existing filter. Returns the number of
    rounds that were applied.
    """
    for guess in range(1, rounds + 1):
        while True:
            line = _read_line(f"({guess}): {len(f)} words\n")
            if line is None:
                return guess - 1
            try:
                f.update(line)
                break
            except FeedbackParseError as e:
                sys.stderr.write(f"{e}; try again\n")
                sys.stderr.flush()

        if len(f) < show_below:
            for word in f.words():
                print(word)

    return rounds


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="wordle-filter — narrow a wordlist from typed feedback")
    ap.add_argument("--wordlist", default="packages/datasets/data/words_5.txt",
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--rounds", type=int, default=MAX_ROUNDS, help="number of feedback rounds")
    ap.add_argument("--show-below", type=int, default=SHOW_BELOW,
                    help="print the candidates once fewer than this many remain")
    args = ap.parse_args(argv)

    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))

    # A dictionary we cannot read is a precondition failure, not a round error.
    try:
        f = CandidateFilter.from_path(args.wordlist, N=args.N)
    except OSError as e:
        sys.exit(f"Failed to open wordlist: {e}")

    play(f, rounds=args.rounds, show_below=args.show_below)
    print(f"Final: {len(f)} words")


if __name__ == "__main__":
    main()
