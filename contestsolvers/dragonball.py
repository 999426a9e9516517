"""Shortest walk from node 1 that gathers seven distinct dragon balls."""

from __future__ import annotations

import heapq
import sys

BALLS_NEEDED = 7


def shortest_collection(n, edges, balls):
    """Length of the shortest walk from node 1 collecting seven ball kinds.

    ``edges`` holds ``(a, b, length)`` undirected roads, ``balls`` holds
    ``(node, kind)`` pairs. Returns ``None`` when it cannot be done.
    """
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, length in edges:
        neighbours[a].append((b, length))
        neighbours[b].append((a, length))
    kinds = [0] * (n + 1)
    for node, kind in balls:
        kinds[node] |= 1 << kind

    start = (1, kinds[1])
    best = {start: 0}
    heap = [(0, start)]
    while heap:
        cost, state = heapq.heappop(heap)
        if best.get(state, cost) < cost:
            continue
        node, mask = state
        if mask.bit_count() >= BALLS_NEEDED:
            return cost
        for target, length in neighbours[node]:
            nxt = (target, mask | kinds[target])
            new_cost = cost + length
            if new_cost < best.get(nxt, new_cost + 1):
                best[nxt] = new_cost
                heapq.heappush(heap, (new_cost, nxt))
    return None


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n, m, k = (int(next(tokens)) for _ in range(3))
    edges = [tuple(int(next(tokens)) for _ in range(3)) for _ in range(m)]
    balls = [tuple(int(next(tokens)) for _ in range(2)) for _ in range(k)]
    result = shortest_collection(n, edges, balls)
    print(-1 if result is None else result)