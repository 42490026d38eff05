"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      flatten per-answer replay results into a tidy CSV (one row per answer).
- write_manifest: dump a JSON manifest with config, wordlist report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Feedback lines starting with '!' are written as-is; lines are prefixed with an
  apostrophe only when a spreadsheet would read them as a formula ('=', '+', '-', '@').
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe(text: str) -> str:
    return "'" + text if text[:1] in ("=", "+", "-", "@") else text


def write_csv(results: List[Dict], path: str, max_rounds: int) -> str:
    """
    Serialize a batch of replay results to CSV.

    Schema (columns):
      answer, retained, solved, final_count, time_ms, count_0,
      line_1, count_1, ..., line_max_rounds, count_max_rounds

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "retained", "solved", "final_count", "time_ms", "count_0"]
    for i in range(1, max_rounds + 1):
        fields += [f"line_{i}", f"count_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            counts = r["counts"]
            lines = r["lines"]
            row = {
                "answer": r["answer"],
                "retained": r["retained"],
                "solved": r["solved"],
                "final_count": counts[-1],
                "time_ms": round(float(r["time_ms"]), 3),
                "count_0": counts[0],
            }
            for i in range(1, max_rounds + 1):
                if i <= len(lines):
                    row[f"line_{i}"] = _excel_safe(lines[i - 1])
                    row[f"count_{i}"] = counts[i]
                else:
                    row[f"line_{i}"] = ""
                    row[f"count_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and wordlist validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (wordlist, N, guesses, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, retained, solved
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
