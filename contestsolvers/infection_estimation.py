"""Interactive Bayesian estimation of the number of infected people."""

from __future__ import annotations

import sys

POPULATION = 10_000_000
MAX_INFECTED = 5_000_000
MIN_INFECTED = 100
GROWTH = 1.01
TESTS = 50


class InfectionEstimator:
    """Keeps a posterior over candidate infection counts and picks pool sizes."""

    def __init__(self) -> None:
        sizes = [MIN_INFECTED]
        while sizes[-1] < MAX_INFECTED:
            sizes.append(min(int(sizes[-1] * GROWTH), MAX_INFECTED))
        self.sizes = sizes
        self.weights = [1.0 / len(sizes)] * len(sizes)
        self._last: int | None = None

    def _positive_chance(self, pool: int) -> float:
        negative = sum(
            w * (1.0 - size / POPULATION) ** pool
            for w, size in zip(self.weights, self.sizes)
        )
        return 1.0 - negative

    def next_test(self) -> int:
        """Largest pool size whose chance of a positive result stays at most one half."""
        pool = 0
        step = 1 << (POPULATION.bit_length() - 1)
        while step:
            if self._positive_chance(pool + step) <= 0.5:
                pool += step
            step >>= 1
        self._last = max(pool, 1)
        return self._last

    def record(self, positive: bool) -> None:
        """Update the posterior with the outcome of the last test."""
        if self._last is None:
            raise RuntimeError("no test has been issued")
        pool = self._last
        chance = self._positive_chance(pool)
        updated = []
        for w, size in zip(self.weights, self.sizes):
            clean = ((POPULATION - size) / POPULATION) ** pool
            if positive:
                updated.append(w * (1.0 - clean) / chance)
            else:
                updated.append(w * clean / (1.0 - chance))
        self.weights = updated

    def estimate(self) -> int:
        """The most probable infection count."""
        best = max(range(len(self.weights)), key=self.weights.__getitem__)
        return self.sizes[best]


def main(argv=None):
    estimator = InfectionEstimator()
    for _ in range(TESTS):
        print(f"test {estimator.next_test()}", flush=True)
        feedback = int(sys.stdin.readline())
        estimator.record(feedback == 1)
    print(f"estimate {estimator.estimate()}", flush=True)
    print("done", end="", file=sys.stderr)