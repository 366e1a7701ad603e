import math

import pytest

from cpalgos.combinatorics import (
    MOD,
    FactorialTable,
    factorial_mod,
    inverse,
    modular_expression,
    ncr_basic,
    ncr_single,
    ncr_table,
    power_mod,
)


@pytest.mark.parametrize("n", [0, 1, 5, 20, 100])
def test_factorial_mod_matches_math(n):
    assert factorial_mod(n) == math.factorial(n) % MOD


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial_mod(-1)


@pytest.mark.parametrize("a,b", [(2, 10), (3, 0), (10**9, 10**9), (7, MOD - 1)])
def test_power_mod_matches_pow(a, b):
    assert power_mod(a, b) == pow(a, b, MOD)


def test_power_mod_negative_exponent_raises():
    with pytest.raises(ValueError):
        power_mod(2, -1)


@pytest.mark.parametrize("x", [1, 2, 12345, MOD - 1])
def test_inverse_times_value_is_one(x):
    assert x * inverse(x) % MOD == 1


def test_inverse_of_zero_raises():
    with pytest.raises(ValueError):
        inverse(MOD)


@pytest.mark.parametrize("n,r", [(5, 2), (10, 0), (40, 20), (1000, 500), (10**6, 3), (3, 5)])
def test_ncr_single_matches_comb(n, r):
    assert ncr_single(n, r) == math.comb(n, r) % MOD


@pytest.mark.parametrize("n,r", [(5, 2), (40, 20), (60, 30), (4, 7)])
def test_ncr_basic_is_exact(n, r):
    assert ncr_basic(n, r) == math.comb(n, r)


@pytest.mark.parametrize("n,r", [(0, 0), (5, 2), (100, 37), (300, 150), (4, 9)])
def test_ncr_table_matches_comb(n, r):
    assert ncr_table(n, r) == math.comb(n, r) % MOD


def test_factorial_table_matches_comb():
    table = FactorialTable(200)
    for n in range(0, 201, 17):
        for r in range(n + 1):
            assert table.ncr(n, r) == math.comb(n, r) % MOD


def test_factorial_table_out_of_range():
    table = FactorialTable(10)
    assert table.ncr(5, 6) == 0
    with pytest.raises(ValueError):
        table.ncr(11, 2)


def test_modular_expression_wraps_negative():
    assert modular_expression(0, 0, 1, 0, 1, 0) == MOD - 1


def test_modular_expression_without_power_term():
    assert modular_expression(1, 1, 0, 5, 9, 1) == 3


def test_modular_expression_in_range():
    value = modular_expression(10**18, -(10**18), 10**12, 50, 3, -7)
    assert 0 <= value < MOD