"""Smallest edge-index mask whose edges connect each queried pair of nodes."""

from __future__ import annotations

import sys


class RollbackDSU:
    """Union-find by size without path compression, so unions can be undone."""

    def __init__(self, n: int) -> None:
        self._parent = [0] * (n + 1)
        self._size = [1] * (n + 1)
        self._history: list[tuple[int, int]] = []

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        while self._parent[x]:
            x = self._parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were apart."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._history.append((a, b))
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def rollback(self) -> None:
        """Undo every union made since the last rollback."""
        while self._history:
            a, b = self._history.pop()
            self._parent[b] = 0
            self._size[a] -= self._size[b]


def min_connecting_masks(n, edges, queries):
    """For every query ``(a, b)`` find the least mask ``X`` such that the edges
    whose 1-based indices are submasks of ``X`` connect ``a`` and ``b``.

    A pair that cannot be connected at all gets the all-ones mask covering
    every edge index.
    """
    edges = list(edges)
    queries = list(queries)
    m = len(edges)
    top = m.bit_length() - 1 if m else 0
    dsu = RollbackDSU(n)
    answers = [0] * len(queries)

    def solve(prefix: int, alive: list[int], pending: list[int], bit: int) -> None:
        if not pending:
            return
        if bit < 0:
            for query in pending:
                answers[query] = prefix
            return
        trial = prefix ^ (1 << bit)
        usable = [index for index in alive if index | trial == trial]
        for index in usable:
            dsu.union(*edges[index - 1])
        joined: list[int] = []
        apart: list[int] = []
        for query in pending:
            a, b = queries[query]
            (joined if dsu.find(a) == dsu.find(b) else apart).append(query)
        dsu.rollback()
        solve(trial, usable, joined, bit - 1)
        solve(prefix, alive, apart, bit - 1)

    solve((1 << (top + 1)) - 1, list(range(1, m + 1)), list(range(len(queries))), top)
    return answers


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    edges = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    q = int(next(tokens))
    queries = [(int(next(tokens)), int(next(tokens))) for _ in range(q)]
    for answer in min_connecting_masks(n, edges, queries):
        print(answer)