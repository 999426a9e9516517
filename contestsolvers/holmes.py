"""Deduce which facts must hold from implications and observations."""

from __future__ import annotations

import sys
from collections import deque


def deduce(n, implications, observed):
    """Return, in ascending order, every fact among ``1..n`` that can be deduced.

    ``implications`` holds ``(a, b)`` pairs meaning "a implies b".
    """
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for a, b in implications:
        graph[a].append(b)
        indegree[b] += 1

    known = [False] * (n + 1)
    for fact in observed:
        stack = [fact]
        while stack:
            node = stack.pop()
            if known[node]:
                continue
            known[node] = True
            stack.extend(child for child in graph[node] if not known[child])

    remaining = indegree[:]
    queue = deque(node for node in range(1, n + 1) if remaining[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in graph[node]:
            remaining[child] -= 1
            if remaining[child] == 0:
                queue.append(child)

    causes = [frozenset()] * (n + 1)
    for node in order:
        if indegree[node] == 0:
            causes[node] = causes[node] | {node}
        for child in graph[node]:
            causes[child] = causes[child] | causes[node]

    for i in range(1, n + 1):
        if known[i]:
            continue
        if any(known[j] and causes[j] <= causes[i] for j in range(1, n + 1)):
            known[i] = True

    return [node for node in range(1, n + 1) if known[node]]


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n, m, t = (int(next(tokens)) for _ in range(3))
    implications = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
    observed = [int(next(tokens)) for _ in range(t)]
    print(" ".join(map(str, deduce(n, implications, observed))))