"""
Candidate filtering from typed feedback.

Given:
  - a dictionary of words
  - one feedback line per round (see packages.engine.feedback)

Keep:
  - N per-position Slots (which letters may still appear where)
  - a Required set (letters seen green or yellow so far)
  - the candidate list, re-filtered after every round

This is the core step that turns feedback into a shrinking candidate set.
Slots and the required set only ever shrink and grow respectively, so the
candidate list never regrows.
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, List, Sequence, Set, Tuple

from packages.datasets.io import load_words
from .feedback import WORD_LENGTH, Absent, Exact, Present, parse_line
from .slot import Slot


def matches(word: str, slots: Sequence[Slot], required: Iterable[str]) -> bool:
    """
    True iff every letter of `word` is permitted by its slot and every
    required letter occurs somewhere in `word`.

    The required check is a plain containment test: it ignores position and
    multiplicity, so one 'e' satisfies a required 'e' seen twice.
    """
    if not all(slots[i].contains(c) for i, c in enumerate(word)):
        return False
    return all(c in word for c in required)


def filter_candidates(words: Iterable[str], slots: Sequence[Slot],
                      required: Iterable[str]) -> List[str]:
    """
    Keep only words consistent with the current slots and required letters.

    Returns:
      List[str] of surviving words (order preserved as in `words`).
    """
    required = tuple(required)
    return [w for w in words if matches(w, slots, required)]


class CandidateFilter:
    """
    Owns the per-round state of one Wordle session.

    Typical use:
        f = CandidateFilter.from_path("words.txt")
        f.update("c!r!an!e")
        print(len(f), f.words())
    """

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH):
        self.N = int(N)
        self._words: List[str] = [w for w in words if len(w) == self.N]
        self._slots: Tuple[Slot, ...] = tuple(Slot() for _ in range(self.N))
        self._required: Set[str] = set()
        self.round = 0

    @classmethod
    def from_path(cls, path: Path | str, N: int = WORD_LENGTH) -> "CandidateFilter":
        """Build a filter from a newline-separated dictionary file."""
        return cls(load_words(path, N), N=N)

    def update(self, line: str) -> None:
        """
        Apply one feedback line and re-filter the candidates.

        The line is parsed before anything is touched, so a
        FeedbackParseError leaves the filter exactly as it was.
        """
        signals = parse_line(line, self.N)

        for idx, sig in enumerate(signals):
            if isinstance(sig, Exact):
                self._slots[idx].restrict(sig.char)
                self._required.add(sig.char)
            elif isinstance(sig, Present):
                self._slots[idx].remove(sig.char)
                self._required.add(sig.char)
            elif isinstance(sig, Absent):
                # Global exclusion, applied even if the letter is already
                # required through another position.
                for slot in self._slots:
                    slot.remove(sig.char)

        self._words = filter_candidates(self._words, self._slots, self._required)
        self.round += 1

    def words(self) -> Tuple[str, ...]:
        """Snapshot of the current candidates."""
        return tuple(self._words)

    @property
    def slots(self) -> Tuple[Slot, ...]:
        return self._slots

    @property
    def required(self) -> FrozenSet[str]:
        return frozenset(self._required)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"CandidateFilter(N={self.N}, round={self.round}, candidates={len(self)})"
