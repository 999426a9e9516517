import io

import pytest

from contestsolvers.howls_castle import LIMIT, NO_ANSWER, main, min_popcount


def test_many_values_give_zero():
    assert min_popcount([7] * LIMIT) == 0


def test_no_values():
    assert min_popcount([]) == NO_ANSWER


@pytest.mark.parametrize("value", [1, 3, 6, 255, 1000])
def test_single_value(value):
    assert min_popcount([value]) == bin(value).count("1")


def test_duplicates_cancel():
    assert min_popcount([13, 13]) == 0


def test_bounded_by_each_value():
    values = [7, 11, 29]
    result = min_popcount(values)
    assert result <= min(bin(v).count("1") for v in values)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        min_popcount([-1])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7\n"))
    main([])
    assert capsys.readouterr().out.strip() == str(bin(7).count("1"))