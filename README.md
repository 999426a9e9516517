# contestsolvers

Solvers for a collection of algorithmic contest problems. Every solver is a
plain Python function (or a small class), and each also has a command that
reads the problem's input from standard input and prints the answer to
standard output. There are no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from contestsolvers.xor_maximization import max_xor
from contestsolvers.halloween_loot import split_loot
from contestsolvers.sequences import inversion_sum

max_xor([3, 5, 6])          # 6: largest XOR of any subset
split_loot([1, 2], [2, 1])  # smallest "A"/"B" string among the most balanced splits
inversion_sum("0?1")        # total inversions over all fillings of '?', modulo 10**9 + 7
```

| Module | Entry points | What it computes |
| --- | --- | --- |
| `contestsolvers.mincostflow` | `MinCostFlow` (`add_edge`, `solve`) | Maximum flow at minimum cost; `solve()` returns `(flow, cost)` |
| `contestsolvers.arboriculture` | `parse_tree`, `match_cost`, `min_total_cost` | Cheapest assignment of pattern trees to target trees (`match_cost` returns `None` when no embedding exists) |
| `contestsolvers.dragonball` | `shortest_collection` | Shortest walk from node 1 gathering seven ball kinds, or `None` |
| `contestsolvers.halloween_loot` | `split_loot` | Most even A/B split of loot, ties broken lexicographically |
| `contestsolvers.holmes` | `deduce` | Facts that follow from implications and observations, ascending |
| `contestsolvers.howls_castle` | `min_popcount` | Least popcount of a reachable non-negative signed subset sum |
| `contestsolvers.infection_estimation` | `InfectionEstimator` (`next_test`, `record`, `estimate`) | Bayesian estimate of an infection count from pooled tests |
| `contestsolvers.interconnectivity` | `RollbackDSU` (`find`, `union`, `rollback`), `min_connecting_masks` | Least edge-index mask connecting each queried pair |
| `contestsolvers.jinxed_betting` | `steps_to_exceed`, `betting_rounds` | Rounds Julia stays strictly ahead |
| `contestsolvers.sequences` | `inversion_sum` | Inversions summed over all fillings of a `0`/`1`/`?` pattern |
| `contestsolvers.wine` | `leftover_wine` | Millilitres of wine that cannot be bottled |
| `contestsolvers.winter_roads` | `answer_queries` | Whether loads can travel between nodes as road limits change; one bool per query |
| `contestsolvers.xor_maximization` | `XorBasis` (`add`, `maximum`), `max_xor` | Largest XOR over subsets of 63-bit values |
| `contestsolvers.xorisland` | `min_removals` | Fewest values to drop so that no three remaining XOR to zero |

Invalid arguments raise `ValueError` where the solvers check them (for
example unequal lists in `split_loot`, an unknown character in
`inversion_sum`, or a value outside 63 bits in `XorBasis.add`).

### Min-cost flow

```python
from contestsolvers.mincostflow import MinCostFlow

flow = MinCostFlow(3, 0, 3)   # nodes 0..3, source 0, sink 3
flow.add_edge(0, 1, 1, 2)
flow.add_edge(1, 3, 1, 3)
flow.solve()                  # (1, 5)
```

### Interactive infection estimation

`InfectionEstimator` keeps a probability distribution over candidate
infection counts. `next_test()` returns the next pool size, `record(positive)`
updates the distribution with that test's outcome (calling it before any
`next_test()` raises `RuntimeError`), and `estimate()` returns the most
likely count.

## Commands

Each command reads whitespace-separated numbers from standard input.

| Command | Input | Output |
| --- | --- | --- |
| `contestsolvers-arboriculture` | `m n`, then `m` wanted trees and `n` ordered trees, each as a size followed by the parent of every node `1..size` (node 0 is the root) | minimum total cost |
| `contestsolvers-dragonball` | `n m k`, `m` roads `a b length`, `k` balls `node kind` | shortest length, or `-1` |
| `contestsolvers-halloween-loot` | `n`, then `n` values `a`, then `n` values `b` | the choice string |
| `contestsolvers-holmes` | `n m t`, `m` implications `a b`, `t` observed facts | deduced facts, space separated |
| `contestsolvers-howls-castle` | `n`, then `n` values | least popcount (`0` when `n >= 25`) |
| `contestsolvers-infection-estimation` | interactive, see below | |
| `contestsolvers-interconnectivity` | `n m`, `m` edges `a b`, `q`, `q` queries `a b` | one mask per line |
| `contestsolvers-jinxed-betting` | `n julia`, then `n - 1` rival scores | number of rounds |
| `contestsolvers-sequences` | a pattern of `0`, `1` and `?` | inversion sum modulo 10**9 + 7 |
| `contestsolvers-wine` | number of cases; each `litres count` then `count` ranges `lo hi` | leftover per case |
| `contestsolvers-winter-roads` | `n m`, `m` roads `a b limit`, `q`, then operations `S a b weight` or `<tag> road limit` | `1` or `0` per `S` query |
| `contestsolvers-xor-maximization` | `n`, then `n` values | largest XOR |
| `contestsolvers-xorisland` | `n`, then `n` values | fewest removals |

`contestsolvers-infection-estimation` prints 50 lines of the form `test <k>`,
reading one reply after each (`1` for positive, anything else for negative),
then prints `estimate <count>` and writes `done` to standard error.

For example:

```
$ printf '3\n3 5 6\n' | contestsolvers-xor-maximization
6
```