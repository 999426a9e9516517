"""Rounds Julia can keep her lead while rivals copy her bets."""

from __future__ import annotations

import sys
from collections import Counter

NEVER = 10**18


def _floor_log2(value: int) -> int:
    return value.bit_length() - 1


def steps_to_exceed(n, x, y):
    """Rounds for ``n`` tied leaders at score ``x`` to pass score ``y``.

    Returns ``NEVER`` when they cannot.
    """
    if n < 2 or x >= y:
        return NEVER
    gap = y - x + 1
    step = _floor_log2(n)
    stalls = (gap + step - 1) // step - 1
    return gap + stalls


def _overtakes(leader: int, tied: int, julia: int) -> bool:
    return leader + _floor_log2(tied) > julia


def betting_rounds(julia, others):
    """Number of rounds Julia stays strictly ahead of every rival."""
    counts = Counter(others)
    if not counts:
        raise ValueError("at least one rival is needed")
    groups = sorted(counts.items(), reverse=True)
    (leader, tied), rest = groups[0], groups[1:]
    rounds = 0
    for value, count in rest:
        if _overtakes(leader, tied, julia):
            break
        lg = _floor_log2(tied)
        gap = leader - (rounds + value) - 1
        prep = (lg + 1) * gap
        if steps_to_exceed(tied, leader, julia) <= prep:
            break
        rounds += prep
        leader += gap * lg
        if _overtakes(leader, tied, julia):
            break
        rounds += lg + 1
        tied += count
        leader += lg
    if _overtakes(leader, tied, julia):
        return rounds + julia - leader
    return rounds + steps_to_exceed(tied, leader, julia) - 1


def main(argv=None):
    tokens = iter(sys.stdin.read().split())
    n, julia = int(next(tokens)), int(next(tokens))
    others = [int(next(tokens)) for _ in range(n - 1)]
    print(betting_rounds(julia, others))