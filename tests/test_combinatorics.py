"""Test exact-integer factorial, permutation and combination."""

import math

import pytest

from bizstats.stats import combination, factorial, permutation


class TestFactorial:
    def test_base_cases(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120

    def test_negative_returns_zero_sentinel(self):
        assert factorial(-1) == 0

    def test_non_integral_returns_zero_sentinel(self):
        assert factorial(2.5) == 0

    def test_integral_float_accepted(self):
        assert factorial(5.0) == 120

    def test_large_values_are_exact(self):
        assert factorial(200) == math.factorial(200)


class TestPermutation:
    @pytest.mark.parametrize("n", [0, 1, 5, 50])
    def test_r_zero_is_one(self, n):
        assert permutation(n, 0) == 1

    def test_documented_values(self):
        assert permutation(5, 3) == 60
        assert permutation(8, 3) == 336

    def test_out_of_domain(self):
        assert permutation(3, 4) == 0
        assert permutation(3, -1) == 0
        assert permutation(-3, 1) == 0

    def test_matches_math_perm(self):
        assert permutation(200, 200) == math.perm(200, 200)


class TestCombination:
    def test_documented_value(self):
        assert combination(10, 4) == 210

    def test_edges(self):
        assert combination(7, 0) == 1
        assert combination(7, 7) == 1
        assert combination(0, 0) == 1

    def test_out_of_domain(self):
        assert combination(4, 5) == 0
        assert combination(4, -1) == 0

    def test_symmetry(self):
        for n in range(0, 30):
            for r in range(0, n + 1):
                assert combination(n, r) == combination(n, n - r)

    @pytest.mark.parametrize("n,r", [(52, 5), (171, 85), (200, 100), (500, 3)])
    def test_exact_beyond_double_precision(self, n, r):
        assert combination(n, r) == math.comb(n, r)
