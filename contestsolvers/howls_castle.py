"""Smallest popcount of a non-negative signed subset sum."""

from __future__ import annotations

import sys

SIZE = 2_400_001
OFFSET = SIZE // 2
NO_ANSWER = 100
LIMIT = 25


def min_popcount(values):
    """Least number of set bits among reachable non-negative signed sums.

    With ``LIMIT`` or more values the answer is always 0.
    """
    values = list(values)
    if len(values) >= LIMIT:
        return 0
    mask = (1 << SIZE) - 1
    reach = 0
    for value in values:
        if not 0 <= value <= OFFSET:
            raise ValueError(f"value out of range: {value}")
        reach |= reach >> value
        reach = (reach | (reach << value)) & mask
        reach |= (1 << (OFFSET + value)) | (1 << (OFFSET - value))

    best = NO_ANSWER
    bits = bin(reach >> OFFSET)[:1:-1]
    position = bits.find("1")
    while position != -1:
        best = min(best, position.bit_count())
        if best == 0:
            break
        position = bits.find("1", position + 1)
    return best


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    if n >= LIMIT:
        print(0)
        return
    print(min_popcount(int(next(tokens)) for _ in range(n)))