import io

from contestsolvers.dragonball import main, shortest_collection


def test_all_balls_at_start():
    balls = [(1, kind) for kind in range(1, 8)]
    assert shortest_collection(2, [(1, 2, 9)], balls) == 0


def test_chain_walk_sums_lengths():
    edges = [(i, i + 1, i * 2 + 1) for i in range(1, 7)]
    balls = [(i, i) for i in range(1, 8)]
    assert shortest_collection(7, edges, balls) == sum(e[2] for e in edges)


def test_too_few_kinds():
    balls = [(1, kind) for kind in range(1, 7)]
    assert shortest_collection(1, [], balls) is None


def test_unreachable_balls():
    balls = [(3, kind) for kind in range(1, 8)]
    assert shortest_collection(3, [(1, 2, 1)], balls) is None


def test_prefers_shorter_road():
    near, far = 2, 5
    edges = [(1, 2, far), (1, 3, near)]
    balls = [(node, kind) for node in (2, 3) for kind in range(1, 8)]
    assert shortest_collection(3, edges, balls) == min(near, far)


def test_walk_may_return_through_start():
    w12, w13 = 1, 4
    edges = [(1, 2, w12), (1, 3, w13)]
    balls = [(2, k) for k in (1, 2, 3)] + [(3, k) for k in (4, 5, 6, 7)]
    assert shortest_collection(3, edges, balls) == 2 * w12 + w13


def test_main_prints_minus_one(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 1\n1 2 3\n2 1\n"))
    main([])
    assert capsys.readouterr().out.strip() == "-1"