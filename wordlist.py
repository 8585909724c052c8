"""
---
version: 0.2.0
created: 2026-10-18
updated: 2026-10-18
---

wordlist.py — Word-list loading for the cryptogram dictionary.

Each line of a word list holds a word, its rank and its usage count,
whitespace-separated:

    the 1 53097401461
    of 2 49380583358

Only (word, count) pairs reach the dictionary. Entries that are not pure A-Z
words (hyphenated, accented, with digits) are skipped; structurally broken
lines raise ValueError.
"""

from __future__ import annotations

from pathlib import Path

from cryptogram import ALLOWED_WORD_MINPOPULARITY, Dictionary, to_ascii_upper
from sample_wordlist import SAMPLE_WORDLIST


def _clean_word(raw: str) -> str | None:
    w = to_ascii_upper(raw.strip())
    if not w:
        return None
    # Only accept pure A-Z words
    for c in w:
        if not (65 <= ord(c) <= 90):
            return None
    return w


def parse_wordlist_line(line: str, lineno: int | None = None) -> tuple[str, int, int] | None:
    """
    Parse one "word rank count" line.

    Returns:
        (WORD, rank, count), or None for blank lines, comments and words that
        are not pure A-Z.

    Raises:
        ValueError: If the line has fewer than three fields or a non-integer
            rank or count.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    where = f" (line {lineno})" if lineno is not None else ""
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"Expected 'word rank count'{where}, got {line!r}")
    try:
        rank = int(fields[1])
        count = int(fields[2])
    except ValueError:
        raise ValueError(f"Non-integer rank or count{where}: {line!r}") from None
    word = _clean_word(fields[0])
    if word is None:
        return None
    return word, rank, count


def parse_wordlist(text: str | bytes) -> list[tuple[str, int]]:
    """Parse a whole word-list buffer into (word, count) pairs."""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    pairs: list[tuple[str, int]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        entry = parse_wordlist_line(line, lineno)
        if entry is not None:
            word, _, count = entry
            pairs.append((word, count))
    return pairs


def load_wordlist(path: str | Path) -> list[tuple[str, int]]:
    """Read a word-list file into (word, count) pairs."""
    return parse_wordlist(Path(path).read_text(encoding="utf-8", errors="replace"))


def load_dictionary(
    path: str | Path | None = None,
    min_popularity: int = ALLOWED_WORD_MINPOPULARITY,
) -> Dictionary:
    """
    Build a Dictionary from a word-list file, or from the bundled sample list
    when no path is given.
    """
    if path is None:
        pairs = parse_wordlist(SAMPLE_WORDLIST)
    else:
        pairs = load_wordlist(path)
    return Dictionary.build(pairs, min_popularity)
