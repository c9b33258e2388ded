"""Tests for array_utils/keys.py"""

import math
from decimal import Decimal

import numpy as np
import pytest

from array_utils.keys import identity_key, to_key


class TestToKey:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("a", "a"),
            ("", ""),
            ("1.0", "1.0"),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (1, "1"),
            (-12, "-12"),
            (1.0, "1"),
            (-0.0, "0"),
            (1.5, "1.5"),
            (float("nan"), "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (10**20, "100000000000000000000"),
            (10**22, "1e+22"),
            (-(10**22), "-1e+22"),
            pytest.param(10**5000, "Infinity", id="huge-int"),
            pytest.param(-(10**5000), "-Infinity", id="huge-negative-int"),
            (Decimal("1e22"), "1e+22"),
            (Decimal("2.50"), "2.5"),
            (Decimal("NaN"), "NaN"),
            (np.int64(3), "3"),
            (np.float64(4.0), "4"),
            (np.bool_(False), "false"),
        ],
    )
    def test_primitive_table(self, value, expected):
        assert to_key(value) == expected

    @pytest.mark.parametrize("value", [[1, 2], {}, (1, 2), {3}, object()])
    def test_placeholder(self, value):
        assert to_key(value) == "[object]"

    def test_own_str_is_used(self):
        class Named:
            def __str__(self):
                return "named"

        assert to_key(Named()) == "named"


class TestIdentityKey:
    def test_int_and_float_share_key(self):
        assert identity_key(1) == identity_key(1.0)

    def test_bool_distinct_from_int(self):
        assert identity_key(True) != identity_key(1)
        assert identity_key(False) != identity_key(0)
        assert identity_key(True) == identity_key(np.bool_(True))

    def test_nan_shares_key(self):
        assert identity_key(float("nan")) == identity_key(float("nan"))
        assert identity_key(np.float32("nan")) == identity_key(float("nan"))

    def test_decimal_nan_shares_key(self):
        assert identity_key(Decimal("NaN")) == identity_key(Decimal("NaN"))
        assert identity_key(Decimal("NaN")) == identity_key(float("nan"))

    def test_large_int_shares_key_with_float(self):
        assert identity_key(10**22) == identity_key(1e22)
        assert to_key(10**22) == to_key(1e22)

    def test_unhashable_by_identity(self):
        first, second = [1], [1]
        assert identity_key(first) != identity_key(second)
        assert identity_key(first) == identity_key(first)
        assert hash(identity_key(first)) == hash(identity_key(first))

    def test_tuple_holding_list(self):
        inner = ([1],)
        assert identity_key(inner) == identity_key(inner)
        assert identity_key(inner) != identity_key(([1],))

    def test_hashable_tuples_by_value(self):
        assert identity_key((1, 2)) == identity_key((1, 2))
