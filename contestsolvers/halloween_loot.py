"""Split loot between two children as evenly as possible."""

from __future__ import annotations

import sys


def split_loot(a, b):
    """Choose 'A' (add ``a[i]``) or 'B' (subtract ``b[i]``) for every item.

    Minimises the absolute balance, breaking ties by the lexicographically
    smallest choice string.
    """
    if len(a) != len(b):
        raise ValueError("both value lists must have the same length")
    best: dict[int, str] = {0: ""}
    for gain, loss in zip(a, b):
        nxt: dict[int, str] = {}
        for value in sorted(best):
            choices = best[value]
            for key, word in ((value + gain, choices + "A"), (value - loss, choices + "B")):
                if key not in nxt or word < nxt[key]:
                    nxt[key] = word
        best = nxt
    return min(best.items(), key=lambda item: (abs(item[0]), item[1]))[1]


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    a = [int(next(tokens)) for _ in range(n)]
    b = [int(next(tokens)) for _ in range(n)]
    print(split_loot(a, b))