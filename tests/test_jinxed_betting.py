import itertools

import pytest

from contestsolvers.jinxed_betting import NEVER, betting_rounds, steps_to_exceed


def test_single_leader_never_passes():
    assert steps_to_exceed(1, 0, 5) == NEVER
    assert steps_to_exceed(1, 3, 5) == 10**18


def test_already_level_never_counts():
    assert steps_to_exceed(4, 5, 5) == NEVER
    assert steps_to_exceed(4, 9, 5) == NEVER


def test_two_leaders_value():
    assert steps_to_exceed(2, 0, 4) == 9


@pytest.mark.parametrize("n", [2, 3, 4, 7, 8, 100])
def test_steps_grow_with_target(n):
    values = [steps_to_exceed(n, 10, y) for y in range(11, 60)]
    assert values == sorted(values)
    assert all(v >= 60 - 60 for v in values)


@pytest.mark.parametrize("y", [12, 20, 57])
def test_more_leaders_need_no_more_steps(y):
    values = [steps_to_exceed(n, 10, y) for n in range(2, 40)]
    assert values == sorted(values, reverse=True)


def test_two_tied_rivals():
    assert betting_rounds(10, [4, 4]) == 12


def test_single_rival_keeps_pace_forever():
    assert betting_rounds(5, [3]) == NEVER - 1


def test_order_of_rivals_does_not_matter():
    others = [3, 7, 7, 1, 5]
    expected = betting_rounds(20, others)
    for perm in itertools.permutations(others):
        assert betting_rounds(20, list(perm)) == expected


def test_result_is_non_negative():
    for others in ([1, 2, 3], [9, 9, 9, 9], [0, 5, 8, 8]):
        assert betting_rounds(30, others) >= 0


def test_no_rivals_rejected():
    with pytest.raises(ValueError):
        betting_rounds(10, [])