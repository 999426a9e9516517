from contestsolvers.mincostflow import MinCostFlow


def test_no_path_gives_zero_flow():
    network = MinCostFlow(3, 0, 3)
    network.add_edge(0, 1, 1, 4)
    network.add_edge(2, 3, 1, 4)
    assert network.solve() == (0, 0)


def test_picks_cheaper_route_when_sink_is_narrow():
    cheap, dear = 2, 5
    network = MinCostFlow(4, 0, 4)
    network.add_edge(0, 1, 1, dear)
    network.add_edge(0, 2, 1, cheap)
    network.add_edge(1, 3, 1, 0)
    network.add_edge(2, 3, 1, 0)
    network.add_edge(3, 4, 1, 0)
    assert network.solve() == (1, min(cheap, dear))


def test_uses_both_routes_when_possible():
    costs = (1, 3)
    network = MinCostFlow(3, 0, 3)
    network.add_edge(0, 1, 1, costs[0])
    network.add_edge(0, 2, 1, costs[1])
    network.add_edge(1, 3, 1, 0)
    network.add_edge(2, 3, 1, 0)
    flow, cost = network.solve()
    assert flow == len(costs)
    assert cost == sum(costs)


def test_rerouting_through_residual_edges():
    # The greedy first path blocks the second; the residual edge fixes it.
    network = MinCostFlow(5, 0, 5)
    network.add_edge(0, 1, 1, 0)
    network.add_edge(0, 2, 1, 0)
    network.add_edge(1, 3, 1, 1)
    network.add_edge(1, 4, 1, 1)
    network.add_edge(2, 3, 1, 1)
    network.add_edge(3, 5, 1, 0)
    network.add_edge(4, 5, 1, 0)
    flow, cost = network.solve()
    assert flow == 2
    assert cost == 2


def test_capacity_limits_flow():
    capacity = 7
    network = MinCostFlow(1, 0, 1)
    network.add_edge(0, 1, capacity, 3)
    assert network.solve() == (capacity, capacity * 3)