"""
Per-position letter constraint.

A Slot holds the characters still permitted at one index of the word.
It starts as the full lowercase alphabet and can only shrink: letters are
removed one at a time (yellow/grey feedback) or the whole set is replaced
by a single letter (green feedback).
"""

from __future__ import annotations

import string
from typing import FrozenSet, Iterable

# Working alphabet for a fresh, unconstrained slot.
ALPHABET = string.ascii_lowercase


class Slot:
    def __init__(self, chars: Iterable[str] = ALPHABET):
        self._valid = set(chars)

    def remove(self, c: str) -> None:
        """Drop `c` from the permitted set (no-op if already gone)."""
        self._valid.discard(c)

    def restrict(self, c: str) -> None:
        """Allow only `c` at this position from now on."""
        self._valid.clear()
        self._valid.add(c)

    def contains(self, c: str) -> bool:
        return c in self._valid

    __contains__ = contains

    @property
    def allowed(self) -> FrozenSet[str]:
        return frozenset(self._valid)

    def __len__(self) -> int:
        return len(self._valid)

    def __repr__(self) -> str:
        return f"Slot({''.join(sorted(self._valid))!r})"
