"""
---
version: 0.1.0
created: 2026-10-18
updated: 2026-10-18
---

verify_key.py — Validate a known key against a ciphertext.

Checks:
  1. Fixed-key translation of the ciphertext (26-letter key notation)
  2. Optional comparison against the expected plaintext
  3. Optional solve: every letter the solver fixed must agree with the key

Usage:
    python3 verify_key.py CIPHERTEXT --key KJBNQCZAFYSOIDUVRXELHPMGWT
    python3 verify_key.py CIPHERTEXT --key KEY --expected "PLAINTEXT"
    python3 verify_key.py CIPHERTEXT --key KEY --solve [--wordlist FILE]
    python3 verify_key.py --sample       # run all checks on the bundled puzzle
"""

from __future__ import annotations

import argparse
import sys

from cryptogram import (
    ALLOWED_WORD_MINPOPULARITY, PotentialKey,
    list_words, solve,
)
from sample_wordlist import SAMPLE_KEY, SAMPLE_PLAINTEXT, SAMPLE_PUZZLE
from wordlist import load_dictionary


def check_translation(key: PotentialKey, ciphertext: str, expected: str | None) -> bool:
    """Translate with the fixed key and compare to the expected plaintext."""
    print("=" * 70)
    print("1. FIXED-KEY TRANSLATION")
    print("=" * 70)

    translation = key.translate(ciphertext)
    print(f"\nCiphertext:  {ciphertext}")
    print(f"Translation: {translation}")
    if expected is None:
        return True

    expected = expected.upper()
    match = translation == expected
    print(f"Expected:    {expected}")
    print(f"  [{'PASS' if match else 'FAIL'}] translation matches expected plaintext")
    if not match:
        for i, (a, e) in enumerate(zip(translation, expected)):
            if a != e:
                print(f"    pos {i}: got '{a}' expected '{e}'")
        if len(translation) != len(expected):
            print(f"    length: got {len(translation)} expected {len(expected)}")
    return match


def check_solver_agreement(
    key: PotentialKey,
    ciphertext: str,
    wordlist: str | None,
    min_popularity: int,
) -> bool:
    """Solve the ciphertext and compare every solved letter with the fixed key."""
    print("\n" + "=" * 70)
    print("2. SOLVER AGREEMENT")
    print("=" * 70)

    dictionary = load_dictionary(wordlist, min_popularity)
    solved = solve(dictionary, ciphertext).solved_letters()
    expected = key.solved_letters()
    used = sorted({c for w in list_words(ciphertext) for c in w})

    all_pass = True
    for c in used:
        if c not in solved:
            print(f"  [OPEN] {c} => ? (fixed key: {expected.get(c, '?')})")
            continue
        ok = expected.get(c) == solved[c]
        all_pass = all_pass and ok
        print(f"  [{'PASS' if ok else 'FAIL'}] {c} => {solved[c]} (fixed key: {expected.get(c, '?')})")

    print(f"\nSolved {sum(1 for c in used if c in solved)} of {len(used)} ciphertext letters")
    return all_pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a known cryptogram key")
    parser.add_argument("ciphertext", nargs="?", default=None, help="Ciphertext to translate")
    parser.add_argument("--key", type=str, default=None, help="26-letter key notation")
    parser.add_argument("--expected", type=str, default=None, help="Expected plaintext")
    parser.add_argument("--solve", action="store_true", help="Also solve and compare with the key")
    parser.add_argument("--sample", action="store_true", help="Use the bundled sample puzzle and key")
    parser.add_argument("--wordlist", type=str, default=None, help="Word list file (default: bundled sample)")
    parser.add_argument("--min-popularity", type=int, default=ALLOWED_WORD_MINPOPULARITY,
                        help="Drop words with a usage count below this")
    args = parser.parse_args(argv)

    if args.sample:
        args.ciphertext = args.ciphertext or SAMPLE_PUZZLE
        args.key = args.key or SAMPLE_KEY
        args.expected = args.expected or SAMPLE_PLAINTEXT
        args.solve = True
    if args.ciphertext is None or args.key is None:
        parser.error("a ciphertext and --key are required (or use --sample)")

    try:
        key = PotentialKey.from_string(args.key)
        ok = check_translation(key, args.ciphertext, args.expected)
        if args.solve:
            ok = check_solver_agreement(key, args.ciphertext, args.wordlist, args.min_popularity) and ok
    except ValueError as e:
        print(f"Error: {type(e).__name__}: {e}")
        return 1
    except OSError as e:
        print(f"Error loading word list: {e}")
        return 1

    print(f"\nOverall: {'PASS' if ok else 'FAIL'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
