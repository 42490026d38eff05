"""
Replay harness.

- run_case:  feed a fixed guess sequence to a fresh CandidateFilter, scoring
             each guess against a known answer, and record how the
             candidate count evolves.
- run_batch: run_case for every dictionary word as the answer.

No guesses are chosen here; the sequence is supplied by the caller. These
functions are UI-agnostic so the CLI and tests can share them.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Sequence

from tqdm import tqdm

from packages.engine import CandidateFilter, feedback_line, WORD_LENGTH


def _check_guesses(guesses: Sequence[str], N: int) -> List[str]:
    out = [g.strip().lower() for g in guesses]
    if not out:
        raise ValueError("at least one guess is required")
    for g in out:
        if len(g) != N or not g.isalpha():
            raise ValueError(f"guess {g!r} is not a {N}-letter word")
    return out


def run_case(
        words: Iterable[str],
        answer: str,
        guesses: Sequence[str],
        *,
        N: int = WORD_LENGTH,
) -> Dict:
    """
    Replay `guesses` against `answer` on a fresh filter built from `words`.

    Returns:
        dict with keys:
            answer (str), lines (list[str]), counts (list[int], one per
            round, starting with the unfiltered size), retained (bool: the
            answer is still a candidate), solved (bool: exactly one
            candidate left and it is the answer), time_ms (float)
    """
    guesses = _check_guesses(guesses, N)
    answer = answer.strip().lower()
    if len(answer) != N:
        raise ValueError(f"answer {answer!r} is not {N} letters long")

    f = CandidateFilter(words, N=N)
    counts = [len(f)]
    lines: List[str] = []

    t0 = time.perf_counter_ns()
    for g in guesses:
        line = feedback_line(g, answer)
        f.update(line)
        lines.append(line)
        counts.append(len(f))
    dt_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    remaining = f.words()
    return {
        "answer": answer,
        "lines": lines,
        "counts": counts,
        "retained": answer in remaining,
        "solved": remaining == (answer,),
        "time_ms": dt_ms,
    }


def run_batch(
        words: List[str],
        guesses: Sequence[str],
        *,
        N: int = WORD_LENGTH,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run run_case once per dictionary word (length N) used as the answer.
    If `sample` is given, only the first K answers are replayed.
    """
    pool = [w for w in words if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Replaying", unit="answer") if progress else pool
    return [run_case(words, ans, guesses, N=N) for ans in iterator]
