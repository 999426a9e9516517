"""Connectivity queries over roads whose load limits change over time."""

from __future__ import annotations

import sys

from contestsolvers.interconnectivity import RollbackDSU


def answer_queries(n, edges, operations):
    """Answer road queries in order.

    ``edges`` holds ``(a, b, limit)`` roads numbered from 1. Each operation is
    ``("S", a, b, weight)`` — can a load of ``weight`` travel from ``a`` to
    ``b`` — or, under any other tag, ``(tag, road, limit)`` to change a road's
    limit. Returns one bool per query.
    """
    ends = [(a, b) for a, b, _ in edges]
    limits = [w for _, _, w in edges]
    results: dict[int, bool] = {}
    pending: list[tuple[int, int, int, int]] = []

    def flush() -> None:
        order = sorted(range(len(ends)), key=lambda road: limits[road], reverse=True)
        dsu = RollbackDSU(n)
        position = 0
        for weight, a, b, index in sorted(pending, key=lambda query: query[0], reverse=True):
            while position < len(order) and limits[order[position]] >= weight:
                dsu.union(*ends[order[position]])
                position += 1
            results[index] = dsu.find(a) == dsu.find(b)
        pending.clear()

    for index, operation in enumerate(operations):
        if operation[0] == "S":
            _, a, b, weight = operation
            pending.append((weight, a, b, index))
        else:
            flush()
            _, road, limit = operation
            limits[road - 1] = limit
    flush()
    return [results[index] for index in sorted(results)]


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    edges = [tuple(int(next(tokens)) for _ in range(3)) for _ in range(m)]
    q = int(next(tokens))
    operations = []
    for _ in range(q):
        tag = next(tokens)
        count = 3 if tag == "S" else 2
        operations.append((tag, *(int(next(tokens)) for _ in range(count))))
    for answer in answer_queries(n, edges, operations):
        print(int(answer))