"""
---
version: 0.2.0
created: 2026-10-18
updated: 2026-10-18
---

solve_puzzle.py — Solve a cryptogram from the command line.

Builds the signature dictionary from a word list (the bundled sample list by
default), narrows the key until it converges, then prints the key, the
candidate words for every cipherword and the translation. Letters still
ambiguous after convergence print as '*'.

Usage:
    python3 solve_puzzle.py "WQELQXNKW FE AFELUXW ..."
    python3 solve_puzzle.py PUZZLE --wordlist words.txt [--min-popularity N]
    python3 solve_puzzle.py PUZZLE --max-passes 5 --limit 10
"""

from __future__ import annotations

import argparse
import sys
import time

from cryptogram import (
    ALLOWED_WORD_MINPOPULARITY, CryptogramError,
    format_solution, solve_puzzle,
)
from wordlist import load_dictionary


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a monoalphabetic substitution cryptogram")
    parser.add_argument("puzzle", type=str, help="Ciphertext to solve (quote it)")
    parser.add_argument("--wordlist", type=str, default=None,
                        help="Word list file with 'word rank count' lines (default: bundled sample)")
    parser.add_argument("--min-popularity", type=int, default=ALLOWED_WORD_MINPOPULARITY,
                        help="Drop words with a usage count below this")
    parser.add_argument("--max-passes", type=int, default=None,
                        help="Stop refining after this many passes")
    parser.add_argument("--limit", type=int, default=None,
                        help="Show at most this many candidates per word")
    args = parser.parse_args(argv)

    print("Loading dictionary...")
    t0 = time.time()
    try:
        dictionary = load_dictionary(args.wordlist, args.min_popularity)
    except (OSError, ValueError) as e:
        print(f"Error loading word list: {e}")
        return 1
    print(f"  {len(dictionary)} words, {dictionary.signature_count} signatures "
          f"({time.time() - t0:.2f}s)\n")

    try:
        result = solve_puzzle(dictionary, args.puzzle, max_passes=args.max_passes)
    except CryptogramError as e:
        print(f"Error: {type(e).__name__}: {e}")
        return 1

    print(format_solution(result, limit=args.limit))
    print(f"\nSolved in {result['elapsed']:.2f}s")
    if result["error"] is not None:
        print("Error: NoSolution: constraints eliminated every candidate for a letter")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
