"""Fewest removals leaving no three values that XOR to zero."""

from __future__ import annotations

import sys
from itertools import combinations


def min_removals(values):
    """Least number of values to drop so that no three of the rest XOR to zero."""
    values = list(values)
    n = len(values)
    triples = [
        (1 << i) | (1 << j) | (1 << k)
        for i, j, k in combinations(range(n), 3)
        if values[i] ^ values[j] ^ values[k] == 0
    ]
    if not triples:
        return 0
    containing = [[t for t in triples if t >> i & 1] for i in range(n)]
    best = 0

    def search(chosen: int, candidates: int) -> None:
        nonlocal best
        pool = chosen | candidates
        if pool.bit_count() <= best:
            return
        hit = next((t for t in triples if t & pool == t), None)
        if hit is None:
            best = pool.bit_count()
            return
        pick = hit & candidates
        pick &= -pick
        index = pick.bit_length() - 1
        forbidden = 0
        for triple in containing[index]:
            others = triple ^ pick
            if others & chosen:
                forbidden |= others & ~chosen
        search(chosen | pick, candidates & ~pick & ~forbidden)
        search(chosen, candidates & ~pick)

    search(0, (1 << n) - 1)
    return n - best


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    print(min_removals([int(next(tokens)) for _ in range(n)]))