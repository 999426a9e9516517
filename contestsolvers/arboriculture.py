"""Cheapest assignment of pattern trees to rooted target trees."""

from __future__ import annotations

import functools
import sys

from contestsolvers.mincostflow import MinCostFlow


def parse_tree(parents):
    """Turn parents of nodes ``1..len(parents)`` into children lists; node 0 is the root."""
    children: list[list[int]] = [[] for _ in range(len(parents) + 1)]
    for node, parent in enumerate(parents, start=1):
        children[parent].append(node)
    return children


def match_cost(a, b, tree_a, tree_b):
    """Cost of embedding subtree ``b`` of ``tree_b`` into subtree ``a`` of ``tree_a``.

    Returns ``None`` when no embedding exists.
    """

    @functools.cache
    def cost(x: int, y: int) -> int | None:
        kids_a, kids_b = tree_a[x], tree_b[y]
        if not kids_b:
            return len(kids_a)
        if len(kids_b) > len(kids_a):
            return None
        na, nb = len(kids_a), len(kids_b)
        source = na + nb
        sink = source + 1
        network = MinCostFlow(sink, source, sink)
        for i, child_a in enumerate(kids_a):
            for j, child_b in enumerate(kids_b):
                sub = cost(child_a, child_b)
                if sub is not None:
                    network.add_edge(i, na + j, 1, sub)
        for i in range(na):
            network.add_edge(source, i, 1, 0)
        for j in range(nb):
            network.add_edge(na + j, sink, 1, 0)
        matched, total = network.solve()
        if matched != nb:
            return None
        return total + na - nb

    return cost(a, b)


def min_total_cost(ordered, wanted):
    """Minimum total cost of matching wanted trees to ordered trees."""
    n, m = len(ordered), len(wanted)
    source, sink = n + m, n + m + 1
    network = MinCostFlow(n + m + 1, source, sink)
    for i, tree in enumerate(ordered):
        for j, pattern in enumerate(wanted):
            cost = match_cost(0, 0, tree, pattern)
            if cost is not None:
                network.add_edge(i, j + n, 1, cost)
    for i in range(n):
        network.add_edge(source, i, 1, 0)
    for j in range(m):
        network.add_edge(j + n, sink, 1, 0)
    return network.solve()[1]


def _read_trees(tokens, count):
    trees = []
    for _ in range(count):
        size = int(next(tokens))
        trees.append(parse_tree([int(next(tokens)) for _ in range(size)]))
    return trees


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    m, n = int(next(tokens)), int(next(tokens))
    wanted = _read_trees(tokens, m)
    ordered = _read_trees(tokens, n)
    print(min_total_cost(ordered, wanted))