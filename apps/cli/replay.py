# apps/cli/replay.py
"""
Replay a fixed guess sequence through the candidate filter.

This script:
  1) Validates the wordlist and prints a one-line summary.
  2) With --answer: replays the guesses against that one word and prints
     the feedback line and candidate count for each round.
  3) Without --answer: replays against every dictionary word (or the first
     --sample of them), prints aggregate numbers and writes:
       - CSV:  per-answer lines and counts
       - JSON: manifest with config, wordlist report, git commit, etc.

Usage:
    python -m apps.cli.replay --wordlist words.txt --guess crane --guess ploys
    python -m apps.cli.replay --wordlist words.txt --guess crane --answer tonic
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from packages.datasets import validate_wordlist, pretty_summary, load_words
from packages.engine import WORD_LENGTH
from packages.harness import run_case, run_batch
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _print_case(r: dict) -> None:
    print(f"answer={r['answer']} start={r['counts'][0]}")
    for i, (line, count) in enumerate(zip(r["lines"], r["counts"][1:]), 1):
        print(f"({i}) {line:<12} {count} words")
    status = "solved" if r["solved"] else ("retained" if r["retained"] else "LOST")
    print(f"answer {status}")


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="wordle-filter — replay guesses against known answers")
    ap.add_argument("--wordlist", default="packages/datasets/data/words_5.txt",
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--guess", action="append", required=True,
                    help="guess to replay (repeat for each round, in order)")
    ap.add_argument("--answer", help="replay against this word only")
    ap.add_argument("--sample", type=int, help="replay only the first K dictionary words")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", action="store_true", help="show a progress bar")
    args = ap.parse_args(argv)

    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))

    try:
        words = load_words(args.wordlist, args.N)
    except OSError as e:
        sys.exit(f"Failed to open wordlist: {e}")

    try:
        if args.answer:
            _print_case(run_case(words, args.answer, args.guess, N=args.N))
            return
        results = run_batch(words, args.guess, N=args.N, sample=args.sample,
                            progress=args.progress)
    except ValueError as e:
        sys.exit(str(e))

    total = len(results)
    lost = sum(1 for r in results if not r["retained"])
    solved = sum(1 for r in results if r["solved"])
    mean_left = sum(r["counts"][-1] for r in results) / max(1, total)
    print(f"answers={total} | mean left={mean_left:.2f} | solved={solved} | lost={lost}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=len(args.guess))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": total,
        "solved": solved,
        "lost": lost,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
