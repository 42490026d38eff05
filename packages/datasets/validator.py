"""
Dictionary validator for the candidate filter.

What this module does:
- Inspect one wordlist file (one entry per line).
- Count how many entries the filter will actually use (exact length N),
  how many are unique, and how many look suspicious (non a-z letters,
  uppercase, blank lines).
- Compute SHA-256 of the raw file so a session can be tied to its data.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Only entries of length N are ever used; the others are reported, not fixed.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # total lines read
    count: int           # entries of exactly length N (what the filter keeps)
    unique_count: int    # distinct entries among `count`
    non_alpha: int       # usable entries containing something other than a-z/A-Z
    uppercase: int       # usable entries with at least one uppercase letter
    blank_lines: int     # empty/whitespace-only lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_ascii_alpha(w: str) -> bool:
    return w.isascii() and w.isalpha()


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport). `passed` requires
        the file to exist and hold at least one usable entry; duplicates,
        odd characters and uppercase entries are reported as issues but do
        not fail the check, since the filter copes with them.
    """
    p = Path(path).expanduser()
    issues: List[str] = []

    if not p.exists():
        issues.append(f"wordlist not found: {path}")
        rep = WordlistReport(N, str(path), False, 0, 0, 0, 0, 0, 0, "", False, issues)
        return asdict(rep)

    raw = [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]
    usable = [w for w in raw if len(w) == N]
    blank = sum(1 for w in raw if not w.strip())
    non_alpha = sum(1 for w in usable if not _is_ascii_alpha(w))
    upper = sum(1 for w in usable if any(c.isupper() for c in w))
    unique = len(set(usable))

    if not usable:
        issues.append(f"wordlist contains 0 entries of length {N}")
    if unique != len(usable):
        issues.append(f"wordlist has {len(usable) - unique} duplicate entr(y/ies)")
    if non_alpha:
        issues.append(f"{non_alpha} entr(y/ies) contain non a-z characters and drop out after the first round")
    if upper:
        issues.append(f"{upper} entr(y/ies) contain uppercase letters and drop out after the first round")
    if blank:
        issues.append(f"wordlist has {blank} blank line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        lines=len(raw),
        count=len(usable),
        unique_count=unique,
        non_alpha=non_alpha,
        uppercase=upper,
        blank_lines=blank,
        sha256=_sha256_file(p),
        passed=bool(usable),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=2315/2315 lines (uniq=2315, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"N={report['N']} | words={report['count']}/{report['lines']} lines "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
