"""
Build a dictionary for the candidate filter from past Wordle answers.

What it does:
- Downloads the page with historical answers from wordlehints.co.uk.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Lowercases, de-duplicates while preserving calendar order, optionally
  merges an existing wordlist, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/words_5.txt
    python -m script.fetch_wordlist --merge ~/.local/share/wordle_words --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.io import read_lines, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> list[str]:
    """Pull the answer column out of the page's visible text."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch past Wordle answers into a wordlist")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/words_5.txt")
    ap.add_argument("--merge", help="existing wordlist to merge in (kept first)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    words = fetch_answers(args.url)
    if args.merge:
        words = unique_preserve_order(
            [w.strip().lower() for w in read_lines(args.merge) if w.strip()] + words)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
