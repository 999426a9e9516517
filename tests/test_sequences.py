import random

import pytest

from contestsolvers.sequences import MOD, inversion_sum


@pytest.mark.parametrize(
    "pattern,expected",
    [("?0", 1), ("1?", 1), ("1?0", 4), ("?", 0)],
)
def test_halved_expectation_scales_back(pattern, expected):
    assert inversion_sum(pattern) == expected


def test_sample():
    assert inversion_sum("?0?") == 3


def test_two_wildcards():
    assert inversion_sum("??") == 1


@pytest.mark.parametrize("ones,zeros", [(0, 0), (1, 1), (3, 2), (5, 7)])
def test_block_of_ones_before_zeros(ones, zeros):
    assert inversion_sum("1" * ones + "0" * zeros) == ones * zeros


@pytest.mark.parametrize("pattern", ["", "0", "1", "000111", "0011"])
def test_sorted_has_no_inversions(pattern):
    assert inversion_sum(pattern) == 0


def _reverse_complement(pattern):
    return pattern[::-1].translate(str.maketrans("01", "10"))


@pytest.mark.parametrize("seed", range(6))
def test_reverse_complement_preserves_sum(seed):
    rng = random.Random(seed)
    pattern = "".join(rng.choice("01?") for _ in range(rng.randint(1, 15)))
    assert inversion_sum(pattern) == inversion_sum(_reverse_complement(pattern))


@pytest.mark.parametrize("seed", range(6))
def test_wildcard_splits_into_both_fillings(seed):
    rng = random.Random(100 + seed)
    pattern = "".join(rng.choice("01?") for _ in range(rng.randint(1, 12)))
    spot = rng.randrange(len(pattern))
    pattern = pattern[:spot] + "?" + pattern[spot + 1:]
    zero = pattern[:spot] + "0" + pattern[spot + 1:]
    one = pattern[:spot] + "1" + pattern[spot + 1:]
    assert inversion_sum(pattern) == (inversion_sum(zero) + inversion_sum(one)) % MOD


def test_long_input_stays_reduced():
    result = inversion_sum("?" * 5000)
    assert 0 <= result < MOD


def test_bad_character_rejected():
    with pytest.raises(ValueError):
        inversion_sum("01x")