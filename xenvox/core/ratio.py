# xenvox/core/ratio.py
"""
Exact rationals for the mediant tree.

Terms are never reduced. Comparison and equality go through
cross-multiplication so 2/4 == 1/2 without ever dividing.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from math import gcd, log2


@total_ordering
@dataclass(frozen=True, eq=False)
class Rational:
    """Pair of non-negative integers (numerator, denominator)."""
    num: int
    den: int

    def __post_init__(self):
        if self.num < 0 or self.den < 0:
            raise ValueError(f"Rational terms must be unsigned: {self.num}/{self.den}")
        if self.den == 0:
            raise ValueError(f"Zero denominator: {self.num}/{self.den}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num * other.den == other.num * self.den

    def __lt__(self, other: Rational) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num * other.den < other.num * self.den

    def __hash__(self) -> int:
        g = gcd(self.num, self.den)
        return hash((self.num // g, self.den // g))

    def __float__(self) -> float:
        return self.num / self.den

    def __repr__(self) -> str:
        return f"{self.num}/{self.den}"

    def same_terms(self, other: Rational) -> bool:
        """Term-by-term identity (stricter than ==)."""
        return self.num == other.num and self.den == other.den

    def log2(self) -> float:
        """Octave position of this ratio. Only for screen mapping."""
        return log2(self.num / self.den)


def mediant(left: Rational, right: Rational) -> Rational:
    """(a+c)/(b+d); lies strictly between left and right when left < right."""
    return Rational(left.num + right.num, left.den + right.den)
