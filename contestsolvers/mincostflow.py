"""Successive shortest paths min-cost max-flow with Johnson potentials."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class _Edge:
    to: int
    src: int
    capacity: int
    cost: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


class MinCostFlow:
    """A flow network on nodes ``0..n`` solved for maximum flow at minimum cost."""

    INF = 10**9

    def __init__(self, n: int, source: int, sink: int) -> None:
        self.source = source
        self.sink = sink
        self._adjacency: list[list[int]] = [[] for _ in range(n + 1)]
        self._edges: list[_Edge] = []

    def add_edge(self, u: int, v: int, capacity: int, cost: int) -> None:
        """Add a directed edge ``u -> v`` together with its residual twin."""
        self._adjacency[u].append(len(self._edges))
        self._edges.append(_Edge(v, u, capacity, cost))
        self._adjacency[v].append(len(self._edges))
        self._edges.append(_Edge(u, v, 0, -cost))

    def _initial_potentials(self) -> list[int]:
        potential = [self.INF] * len(self._adjacency)
        in_queue = [False] * len(self._adjacency)
        potential[self.source] = 0
        queue = deque([self.source])
        while queue:
            node = queue.popleft()
            in_queue[node] = False
            for index in self._adjacency[node]:
                edge = self._edges[index]
                if not edge.capacity:
                    continue
                candidate = potential[node] + edge.cost
                if candidate < potential[edge.to]:
                    potential[edge.to] = candidate
                    if not in_queue[edge.to]:
                        in_queue[edge.to] = True
                        queue.append(edge.to)
        return potential

    def _shortest_paths(
        self, potential: list[int]
    ) -> tuple[list[int | None], list[int]]:
        size = len(self._adjacency)
        dist = [self.INF] * size
        real = [0] * size
        parent: list[int | None] = [None] * size
        dist[self.source] = 0
        heap = [(0, self.source)]
        while heap:
            d, node = heapq.heappop(heap)
            if d != dist[node]:
                continue
            for index in self._adjacency[node]:
                edge = self._edges[index]
                if not edge.residual:
                    continue
                candidate = d + edge.cost + potential[node] - potential[edge.to]
                if dist[edge.to] > candidate:
                    dist[edge.to] = candidate
                    parent[edge.to] = index
                    real[edge.to] = real[node] + edge.cost
                    heapq.heappush(heap, (candidate, edge.to))
        return parent, real

    def _path(self, parent: list[int | None]) -> Iterator[int]:
        index = parent[self.sink]
        while index is not None:
            yield index
            index = parent[self._edges[index].src]

    def solve(self) -> tuple[int, int]:
        """Push as much flow as possible; return ``(flow, cost)``."""
        potential = self._initial_potentials()
        total_flow = total_cost = 0
        while True:
            parent, real = self._shortest_paths(potential)
            if parent[self.sink] is None:
                break
            path = list(self._path(parent))
            delta = min(self._edges[index].residual for index in path)
            for index in path:
                self._edges[index].flow += delta
                self._edges[index ^ 1].flow -= delta
            potential = real
            total_flow += delta
            total_cost += delta * potential[self.sink]
        return total_flow, total_cost