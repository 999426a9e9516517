"""Total inversions over all fillings of a 0/1/? pattern."""

from __future__ import annotations

import sys

MOD = 10**9 + 7
INV2 = pow(2, MOD - 2, MOD)


def inversion_sum(pattern):
    """Sum, modulo ``MOD``, of inversions over every way to fill the ``?`` marks."""
    ones = inversions = 0
    for ch in pattern:
        if ch == "1":
            ones = (ones + 1) % MOD
        elif ch == "0":
            inversions = (inversions + ones) % MOD
        elif ch == "?":
            inversions = (inversions + INV2 * ones) % MOD
            ones = (ones + INV2) % MOD
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return inversions * pow(2, pattern.count("?"), MOD) % MOD


def main(argv=None):
    print(inversion_sum(sys.stdin.read().split()[0]))