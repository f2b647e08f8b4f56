# tests/test_rng.py

import pytest

from engine.rng import MODULUS, make_rng


def test_sequence_follows_linear_congruence():
    rng = make_rng(6)

    assert rng() == pytest.approx(105103 / MODULUS)
    assert rng() == pytest.approx(169100 / MODULUS)
    assert rng() == pytest.approx(74637 / MODULUS)


def test_same_seed_gives_same_sequence():
    a, b = make_rng(1234), make_rng(1234)

    assert [a() for _ in range(50)] == [b() for _ in range(50)]


def test_different_seeds_give_different_sequences():
    a, b = make_rng(6), make_rng(7)

    assert [a() for _ in range(10)] != [b() for _ in range(10)]


def test_values_stay_in_range():
    rng = make_rng(99)

    for _ in range(1000):
        assert 0 <= rng() < 1
    for _ in range(100):
        assert 5 <= rng(10, 5) < 10


def test_zero_seed_is_coerced_to_one(caplog):
    zero, one = make_rng(0), make_rng(1)

    assert "seed cannot be 0" in caplog.text
    assert [zero() for _ in range(5)] == [one() for _ in range(5)]
