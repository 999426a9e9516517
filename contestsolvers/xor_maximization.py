"""Largest XOR of any subset of 63-bit non-negative integers."""

from __future__ import annotations

import sys

BITS = 63


class XorBasis:
    """A linear basis over GF(2) for integers below ``2**BITS``."""

    def __init__(self) -> None:
        self._basis = [0] * BITS

    def add(self, x: int) -> bool:
        """Insert ``x``; return whether it enlarged the span."""
        if not 0 <= x < 1 << BITS:
            raise ValueError(f"value out of range: {x}")
        for bit in reversed(range(BITS)):
            if not x >> bit & 1:
                continue
            if not self._basis[bit]:
                self._basis[bit] = x
                return True
            x ^= self._basis[bit]
        return False

    def maximum(self) -> int:
        """Largest value in the span."""
        best = 0
        for bit in reversed(range(BITS)):
            if not best >> bit & 1:
                best ^= self._basis[bit]
        return best


def max_xor(values):
    """Largest XOR over subsets of ``values`` (0 for the empty subset)."""
    basis = XorBasis()
    for value in values:
        basis.add(value)
    return basis.maximum()


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    print(max_xor(int(next(tokens)) for _ in range(n)))