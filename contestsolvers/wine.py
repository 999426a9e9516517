"""Least wine left over after filling bottles of adjustable volume."""

from __future__ import annotations

import heapq
import sys

MAX_VOLUME = 4500
NO_ANSWER = 10**9


def leftover_wine(litres, bottles):
    """Millilitres of ``litres`` of wine that cannot be bottled.

    ``bottles`` holds ``(lo, hi)`` ranges of allowed volumes in millilitres;
    any number of bottles of each kind may be used.
    """
    bottles = list(bottles)
    if not bottles:
        raise ValueError("at least one bottle kind is needed")
    volumes: set[int] = set()
    for lo, hi in bottles:
        if not 1 <= lo <= hi <= MAX_VOLUME:
            raise ValueError(f"bad bottle range ({lo}, {hi})")
        volumes.update(range(lo, hi + 1))
    modulus = min(lo for lo, _ in bottles)

    cheapest: dict[int, int] = {}
    for size in volumes:
        residue = size % modulus
        if residue not in cheapest or size < cheapest[residue]:
            cheapest[residue] = size
    steps = sorted(cheapest.values())

    dist = [NO_ANSWER] * modulus
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost != dist[node]:
            continue
        for size in steps:
            target = (node + size) % modulus
            if dist[target] > cost + size:
                dist[target] = cost + size
                heapq.heappush(heap, (cost + size, target))

    total = litres * 1000
    for poured in range(total, total - modulus - 1, -1):
        if dist[poured % modulus] <= poured:
            return total - poured
    return NO_ANSWER


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    for _ in range(cases):
        litres, count = int(next(tokens)), int(next(tokens))
        bottles = [(int(next(tokens)), int(next(tokens))) for _ in range(count)]
        print(leftover_wine(litres, bottles))