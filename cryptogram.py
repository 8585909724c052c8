"""
---
version: 0.3.0
created: 2026-10-18
updated: 2026-10-18
---

cryptogram.py — Shared module for solving monoalphabetic substitution puzzles.

Six sections:
  1. Constants and errors
  2. Parsing (word splitting, word signatures)
  3. Potential key (26x26 candidate matrix: merge, propagation, translation)
  4. Dictionary index (signature -> words, most frequent first)
  5. Solver (refine the key until it stops changing)
  6. Output utils (candidate tables, solution report)
"""

from __future__ import annotations

import re
import string
import time
import warnings
from typing import Iterable, Sequence

import numpy as np

# ============================================================================
# 1. CONSTANTS AND ERRORS
# ============================================================================

ALPHABET_SIZE: int = 26

# How often a word must be mentioned in the corpus counts. Excludes the
# really weird words from the dictionary.
ALLOWED_WORD_MINPOPULARITY: int = 100000

# Rendered for a ciphertext letter that still has several candidates.
AMBIGUOUS_CHAR: str = "*"

# No pass limit by default; convergence is structural.
DEFAULT_MAX_PASSES: int | None = None

# Leading digit of every signature, so that "00" and "0" stay distinct.
SIGNATURE_SENTINEL: int = 1

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_WORD_RE = re.compile(r"[A-Za-z]+")


class CryptogramError(ValueError):
    """Base class for all recoverable solver errors."""


class UnsupportedInput(CryptogramError):
    """A word contains something other than ASCII letters (or is empty)."""


class InvalidKey(CryptogramError):
    """A fixed-key string has the wrong length or a non-letter character."""


class NoSolution(CryptogramError):
    """A ciphertext letter has no plaintext candidate left."""


class LengthMismatch(CryptogramError):
    """A plaintext word and a cipherword differ in length."""


# ============================================================================
# 2. PARSING — Word splitting and signatures
# ============================================================================

def to_ascii_upper(text: str) -> str:
    """Uppercase ASCII letters only; everything else is left as is."""
    return text.translate(_ASCII_UPPER)


def lane_of(ch: str) -> int:
    """Return the 0-25 index of an ASCII letter (either case)."""
    o = ord(ch)
    if 65 <= o <= 90:
        return o - 65
    if 97 <= o <= 122:
        return o - 97
    raise UnsupportedInput(f"Unsupported char: {ch!r} (use A-Z)")


def letter_of(lane: int) -> str:
    return chr(lane + 65)


def list_words(puzzle: str) -> list[str]:
    """
    Split puzzle text into its words.

    Every non-alphabetic character is a separator, so "THEY'RE GOOD." gives
    THEY, RE and GOOD. Words are uppercased.
    """
    return [to_ascii_upper(w) for w in _WORD_RE.findall(puzzle)]


def signature(word: str) -> int:
    """
    Compute the repeated-letter signature of a word.

    Each distinct letter gets the next free number on first sight, so the
    pattern survives any letter substitution:

        EITHER      -> 0 1 2 3 0 4
        NONETHELESS -> 0 1 0 2 3 4 2 5 2 6 6

    The digits are packed into one base-26 integer behind a leading 1, which
    keeps words of different lengths apart (100 != 10).

    Raises:
        UnsupportedInput: If the word is empty or holds a non-letter.
    """
    if not word:
        raise UnsupportedInput("Cannot compute the signature of an empty word")
    seen: dict[int, int] = {}
    result = SIGNATURE_SENTINEL
    for ch in word:
        lane = lane_of(ch)
        if lane not in seen:
            seen[lane] = len(seen)
        result = result * ALPHABET_SIZE + seen[lane]
    return result


def letter_pairs(plainword: str, cipherword: str) -> list[tuple[int, int]]:
    """
    Pair up (cipher lane, plain lane) position by position.

    Raises:
        LengthMismatch: If the two words differ in length.
        UnsupportedInput: If either word holds a non-letter.
    """
    if len(plainword) != len(cipherword):
        raise LengthMismatch(
            f"{plainword!r} has {len(plainword)} letters, "
            f"{cipherword!r} has {len(cipherword)}"
        )
    return [(lane_of(c), lane_of(p)) for p, c in zip(plainword, cipherword)]


# ============================================================================
# 3. POTENTIAL KEY — Candidate matrix
# ============================================================================

class PotentialKey:
    """
    Mapping of each of the 26 ciphertext letters to the set of plaintext
    letters it might still decrypt to.

    Stored as a 26x26 boolean matrix: row = ciphertext letter, column =
    plaintext letter. E => [A,B,C] means row E has columns A, B and C set.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: np.ndarray | None = None):
        if grid is None:
            grid = np.zeros((ALPHABET_SIZE, ALPHABET_SIZE), dtype=bool)
        self._grid = grid

    # ------------- Construction -------------
    @classmethod
    def empty(cls) -> PotentialKey:
        """A key where every mapping is empty."""
        return cls()

    @classmethod
    def full(cls) -> PotentialKey:
        """
        A key where nothing is decided yet: each ciphertext letter maps to the
        25 other letters. A letter never maps to itself.
        """
        return cls(~np.eye(ALPHABET_SIZE, dtype=bool))

    @classmethod
    def from_string(cls, value: str) -> PotentialKey:
        """
        Build a fixed key from its 26-letter notation.

        Position i holds the ciphertext letter that plaintext letter i is
        enciphered as, so "KJB..." puts A in slot K, B in slot J, C in slot B.

        Raises:
            InvalidKey: On a wrong length or a non-letter character.
        """
        if len(value) != ALPHABET_SIZE:
            raise InvalidKey(
                f"Key must have {ALPHABET_SIZE} characters, got {len(value)}"
            )
        key = cls.empty()
        for plain, ch in enumerate(value):
            try:
                cipher = lane_of(ch)
            except UnsupportedInput:
                raise InvalidKey(f"Invalid character {ch!r} at position {plain}") from None
            key._grid[cipher, plain] = True
        return key

    @classmethod
    def from_possibilities(cls, cipherword: str, possible_words: Sequence[str]) -> PotentialKey:
        """
        Build a key from the candidate plaintext words of one cipherword.

        Each cipherword letter collects the letters found at its positions
        across all candidates. Letters that gain nothing (not in the word, or
        no candidates at all) get the full mapping.

            Cipherword | Candidate 1 | Candidate 2 | Resulting mapping
            X            C             T             X => [C,T]
            Y            A             R             Y => [A,R]
            Z            L             E             Z => [L,E]
            Z            L             E             Z => [L,E]
        """
        key = cls.empty()
        grid = key._grid
        for word in possible_words:
            for c, p in zip(cipherword, word):
                grid[lane_of(c), lane_of(p)] = True
        blank = ~grid.any(axis=1)
        grid[blank] = ~np.eye(ALPHABET_SIZE, dtype=bool)[blank]
        return key

    def copy(self) -> PotentialKey:
        return PotentialKey(self._grid.copy())

    # ------------- Queries -------------
    def candidates(self, letter: str) -> set[str]:
        """Plaintext letters the given ciphertext letter may decrypt to."""
        return {letter_of(int(i)) for i in np.flatnonzero(self._grid[lane_of(letter)])}

    def is_solved(self, letter: str) -> bool:
        return int(self._grid[lane_of(letter)].sum()) == 1

    def solved_letters(self) -> dict[str, str]:
        """Return {ciphertext letter: plaintext letter} for every solved slot."""
        counts = self._grid.sum(axis=1)
        return {
            letter_of(int(row)): letter_of(int(self._grid[row].argmax()))
            for row in np.flatnonzero(counts == 1)
        }

    def matches(self, plainword: str, cipherword: str) -> bool:
        """
        Check if a cipherword can decode to a plaintext word under this key.

        Words of different length never match.
        """
        try:
            pairs = letter_pairs(plainword, cipherword)
        except LengthMismatch:
            return False
        return all(self._grid[c, p] for c, p in pairs)

    # ------------- Refinement -------------
    def merge(self, other: PotentialKey) -> PotentialKey:
        """
        Intersect the mappings of two keys.

        If one word says E => [A,B,C,D] and another says E => [C,D,F,G], then
        both together say E => [C,D].
        """
        return PotentialKey(self._grid & other._grid)

    def remove_fixed_characters_from_other_mappings(self) -> None:
        """
        Remove already decoded letters from all other mappings, in place.

        A mapping like A => [B] means no other letter can decrypt to B. The
        singletons of a round are collected before anything is removed, so two
        letters fixed to the same plaintext letter wipe each other out. Rounds
        repeat while removals leave new singletons behind.
        """
        grid = self._grid
        done = np.zeros(ALPHABET_SIZE, dtype=bool)
        while True:
            fixed = np.flatnonzero((grid.sum(axis=1) == 1) & ~done)
            if fixed.size == 0:
                break
            plains = grid[fixed].argmax(axis=1)
            for row, col in zip(fixed, plains):
                others = np.arange(ALPHABET_SIZE) != row
                grid[others, col] = False
            done[fixed] = True

    # ------------- Decryption -------------
    def translate(self, text: str) -> str:
        """
        Decrypt text with the current key.

        Letters with several candidates left come out as AMBIGUOUS_CHAR;
        anything that is not a letter passes through unchanged.

        Raises:
            NoSolution: If a letter of the text has no candidate left.
        """
        result: list[str] = []
        for ch in to_ascii_upper(text):
            if ch not in string.ascii_uppercase:
                result.append(ch)
                continue
            row = self._grid[lane_of(ch)]
            n = int(row.sum())
            if n == 0:
                raise NoSolution(f"Key contains no solutions for {ch!r}")
            if n > 1:
                result.append(AMBIGUOUS_CHAR)
            else:
                result.append(letter_of(int(row.argmax())))
        return "".join(result)

    # ------------- Dunder -------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PotentialKey):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        solved = len(self.solved_letters())
        return f"PotentialKey(solved={solved}/{ALPHABET_SIZE})"

    def __str__(self) -> str:
        lines: list[str] = []
        for row in range(ALPHABET_SIZE):
            chars = "".join(f"{letter_of(int(i))}," for i in np.flatnonzero(self._grid[row]))
            lines.append(f"{letter_of(row)} => [{chars}] ")
        return "\n".join(lines)


# ============================================================================
# 4. DICTIONARY INDEX — Signature -> words
# ============================================================================

class Dictionary:
    """
    Word list indexed by signature.

    Each bucket holds the words sharing one signature, most frequent first.
    Built once; read-only afterwards, so one instance can serve any number
    of solves.
    """

    def __init__(self, buckets: dict[int, tuple[str, ...]]):
        self._buckets = buckets
        self._size = sum(len(v) for v in buckets.values())

    @classmethod
    def build(
        cls,
        wordlist: Iterable[tuple[str, int]],
        min_popularity: int = ALLOWED_WORD_MINPOPULARITY,
    ) -> Dictionary:
        """
        Build the signature index from (word, usage count) pairs.

        Args:
            wordlist: Pairs of word and corpus frequency.
            min_popularity: Words counted fewer times than this are dropped.

        Raises:
            UnsupportedInput: If a kept word holds a non-letter.
        """
        words_and_usage = [
            (count, to_ascii_upper(word))
            for word, count in wordlist
            if count >= min_popularity
        ]
        # Most important words first
        words_and_usage.sort(reverse=True)

        buckets: dict[int, list[str]] = {}
        seen: set[str] = set()
        for _, word in words_and_usage:
            if word in seen:
                continue
            seen.add(word)
            buckets.setdefault(signature(word), []).append(word)
        return cls({sig: tuple(words) for sig, words in buckets.items()})

    def bucket(self, cipherword: str) -> tuple[str, ...]:
        """All words sharing the cipherword's signature, unfiltered."""
        return self._buckets.get(signature(cipherword), ())

    def lookup(self, cipherword: str, key: PotentialKey) -> list[str]:
        """
        Words that have the cipherword's signature and still fit the key.

        An unknown signature gives an empty list.
        """
        return [w for w in self.bucket(cipherword) if key.matches(w, cipherword)]

    @property
    def signature_count(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        try:
            return to_ascii_upper(word) in self.bucket(word)
        except UnsupportedInput:
            return False


# ============================================================================
# 5. SOLVER — Iterate to a fixpoint
# ============================================================================

def refine(
    dictionary: Dictionary,
    puzzle: str,
    max_passes: int | None = DEFAULT_MAX_PASSES,
) -> tuple[PotentialKey, int]:
    """
    Narrow a full key against the puzzle until it stops changing.

    Each pass looks up every word under the current key, intersects the key
    with what the candidates allow, then propagates solved letters. Later
    words can narrow letters of earlier ones, hence the repeated passes.

    Args:
        dictionary: Signature index to draw candidates from.
        puzzle: Ciphertext (any case, any punctuation).
        max_passes: Optional cap on the number of passes.

    Returns:
        (key, passes) where passes counts the passes actually run.
    """
    words = list_words(puzzle)
    potential_key = PotentialKey.full()
    previous_key = PotentialKey.empty()
    passes = 0

    while potential_key != previous_key:
        if max_passes is not None and passes >= max_passes:
            warnings.warn(f"Stopped after {passes} passes without converging")
            break
        previous_key = potential_key.copy()
        for word in words:
            possible_words = dictionary.lookup(word, potential_key)
            key = PotentialKey.from_possibilities(word, possible_words)
            potential_key = potential_key.merge(key)
        potential_key.remove_fixed_characters_from_other_mappings()
        passes += 1

    return potential_key, passes


def solve(
    dictionary: Dictionary,
    puzzle: str,
    max_passes: int | None = DEFAULT_MAX_PASSES,
) -> PotentialKey:
    """Construct the key mapping ciphertext letters to possible plaintext letters."""
    key, _ = refine(dictionary, puzzle, max_passes)
    return key


def word_candidates(
    dictionary: Dictionary,
    puzzle: str,
    key: PotentialKey,
) -> list[tuple[str, list[str]]]:
    """List every puzzle word with the dictionary words still fitting the key."""
    return [(word, dictionary.lookup(word, key)) for word in list_words(puzzle)]


def solve_puzzle(
    dictionary: Dictionary,
    puzzle: str,
    max_passes: int | None = DEFAULT_MAX_PASSES,
) -> dict:
    """
    Solve a puzzle and collect everything worth reporting.

    Returns dict with:
        puzzle: the puzzle, uppercased
        key: the converged PotentialKey
        passes: number of refinement passes
        words: [(cipherword, candidates)] under the final key
        solved: {ciphertext letter: plaintext letter}
        translation: decrypted text, or None on contradiction
        error: NoSolution message, or None
        elapsed: seconds spent
    """
    t0 = time.time()
    puzzle = to_ascii_upper(puzzle)
    key, passes = refine(dictionary, puzzle, max_passes)
    try:
        translation: str | None = key.translate(puzzle)
        error: str | None = None
    except NoSolution as e:
        translation = None
        error = str(e)
    return {
        "puzzle": puzzle,
        "key": key,
        "passes": passes,
        "words": word_candidates(dictionary, puzzle, key),
        "solved": key.solved_letters(),
        "translation": translation,
        "error": error,
        "elapsed": time.time() - t0,
    }


# ============================================================================
# 6. OUTPUT UTILS — Formatting
# ============================================================================

def format_word_candidates(
    rows: Sequence[tuple[str, Sequence[str]]],
    limit: int | None = None,
) -> str:
    """
    Format one line per cipherword: the word right-aligned, then its
    candidates. With a limit, long candidate lists are cut and counted.
    """
    lines: list[str] = []
    for word, words in rows:
        shown = list(words) if limit is None else list(words[:limit])
        extra = len(words) - len(shown)
        tail = f" (+{extra} more)" if extra > 0 else ""
        lines.append(f"{word:>20} | {shown}{tail}")
    return "\n".join(lines)


def format_solution(result: dict, limit: int | None = None) -> str:
    """Format a solve_puzzle() result as a console report."""
    lines = [
        "=" * 70,
        "CRYPTOGRAM SOLUTION",
        "=" * 70,
        "",
        f"Constructed key ({len(result['solved'])}/{ALPHABET_SIZE} letters solved, "
        f"{result['passes']} passes):",
        str(result["key"]),
        "",
        "Words found in ciphertext:",
        format_word_candidates(result["words"], limit=limit),
        "",
        f"Ciphertext:  {result['puzzle']}",
    ]
    if result["error"] is None:
        lines.append(f"Translation: {result['translation']}")
    else:
        lines.append(f"Translation: FAILED ({result['error']})")
    return "\n".join(lines)


# ============================================================================
# SELF-TEST — Run when executed directly
# ============================================================================

def _self_test() -> None:
    """Check signatures, the fixed-key path and an end-to-end solve."""
    from sample_wordlist import SAMPLE_PUZZLE, SAMPLE_KEY, SAMPLE_PLAINTEXT
    from wordlist import load_dictionary

    print("=== cryptogram.py self-test ===\n")

    # 1. Signatures
    pairs = [("WQELQXNKW", "YESTERDAY"), ("ABACDECFCGG", "NONETHELESS"), ("ABCDAE", "EITHER")]
    for a, b in pairs:
        assert signature(a) == signature(b), f"signature({a}) != signature({b})"
    assert signature("AB") != signature("AAB")
    print("Signature checks: PASS")

    # 2. Fixed key
    fixed = PotentialKey.from_string(SAMPLE_KEY)
    assert fixed.translate(SAMPLE_PUZZLE) == SAMPLE_PLAINTEXT
    print("Fixed-key translation: PASS")

    # 3. Solve
    dictionary = load_dictionary()
    print(f"\nSample dictionary: {len(dictionary)} words, "
          f"{dictionary.signature_count} signatures")
    result = solve_puzzle(dictionary, SAMPLE_PUZZLE)
    print(format_solution(result))
    assert result["translation"] == SAMPLE_PLAINTEXT, "Solve FAILED"
    print("\nEnd-to-end solve: PASS")

    print("\n=== Self-test complete ===")


if __name__ == "__main__":
    _self_test()
