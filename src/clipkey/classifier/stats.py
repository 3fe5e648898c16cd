"""Shannon entropy and character-class statistics."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = -Σ p(c) · log₂(p(c))  over unique characters c (code points).
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    return -sum((c / total) * math.log2(c / total) for c in counts.values())


@dataclass(frozen=True, slots=True)
class CharStats:
    """Counts of ASCII digits, ASCII upper/lowercase letters and everything else."""

    digits: int = 0
    upper: int = 0
    lower: int = 0
    symbols: int = 0

    @property
    def total(self) -> int:
        return self.digits + self.upper + self.lower + self.symbols

    @property
    def variety(self) -> float:
        """Fraction of the four classes that occur at least once."""
        present = sum(1 for c in (self.lower, self.upper, self.digits, self.symbols) if c)
        return present / 4.0


def char_stats(s: str) -> CharStats:
    """Classify each character of *s*; non-ASCII characters count as symbols."""
    digits = upper = lower = symbols = 0
    for ch in s:
        if "0" <= ch <= "9":
            digits += 1
        elif "A" <= ch <= "Z":
            upper += 1
        elif "a" <= ch <= "z":
            lower += 1
        else:
            symbols += 1
    return CharStats(digits=digits, upper=upper, lower=lower, symbols=symbols)


def longest_run(s: str) -> int:
    """Length of the longest run of one repeated character."""
    best = run = 0
    prev = None
    for ch in s:
        run = run + 1 if ch == prev else 1
        best = max(best, run)
        prev = ch
    return best
