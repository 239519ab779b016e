"""
Test suite for std_numeric() - stdlib types and duck-typed scalars, no third-party dependencies.
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

# Local ----------------------------------------------------------------------------------------------------------------

from metricnum.numeric import std_numeric


class FakeIntScalar:
    """Mimics a NumPy integer scalar."""

    def __init__(self, v):
        self.v = v

    def __index__(self):
        return self.v


class FakeArrayScalar:
    """Mimics a 0-d array exposing .item()."""

    def __init__(self, v):
        self.v = v

    def item(self):
        return self.v


class FakeFloat:
    def __float__(self):
        return 2.5


class TestStdNumericBasicTypes:

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(42, 42, int, id="int"),
            pytest.param(3.25, 3.25, float, id="float"),
            pytest.param(None, None, type(None), id="none"),
            pytest.param(10 ** 400, 10 ** 400, int, id="huge-int"),
            pytest.param(-3.5, -3.5, float, id="negative-float"),
        ],
    )
    def test_preserve_value_type(self, value, expected, expected_type):
        """Preserve values and types for supported numerics and None."""
        res = std_numeric(value)
        assert res == expected
        assert isinstance(res, expected_type)

    def test_special_floats_preserved(self):
        assert std_numeric(math.inf) == math.inf
        assert math.isnan(std_numeric(math.nan))


class TestStdNumericStdlib:

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(Decimal("42.0"), 42, int, id="decimal-int"),
            pytest.param(Decimal("0.5"), 0.5, float, id="decimal-frac"),
            pytest.param(Fraction(10, 5), 2, int, id="fraction-int"),
            pytest.param(Fraction(1, 4), 0.25, float, id="fraction-frac"),
        ],
    )
    def test_convert(self, value, expected, expected_type):
        res = std_numeric(value)
        assert res == expected
        assert isinstance(res, expected_type)

    def test_decimal_special(self):
        assert std_numeric(Decimal("Infinity")) == math.inf
        assert math.isnan(std_numeric(Decimal("NaN")))


class TestStdNumericDuckTyping:

    def test_index(self):
        res = std_numeric(FakeIntScalar(7))
        assert res == 7
        assert isinstance(res, int)

    def test_item(self):
        assert std_numeric(FakeArrayScalar(1.5)) == 1.5

    def test_item_bool_rejected(self):
        with pytest.raises(TypeError, match="boolean"):
            std_numeric(FakeArrayScalar(True))

    def test_float(self):
        assert std_numeric(FakeFloat()) == 2.5


class TestStdNumericErrors:

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("1000", id="str"),
            pytest.param(b"1000", id="bytes"),
            pytest.param([1], id="list"),
            pytest.param(object(), id="object"),
        ],
    )
    def test_unsupported(self, value):
        with pytest.raises(TypeError, match="unsupported numeric type"):
            std_numeric(value)

    def test_bool(self):
        with pytest.raises(TypeError, match="boolean values not supported"):
            std_numeric(True)
        assert std_numeric(True, allow_bool=True) == 1
        assert std_numeric(False, allow_bool=True) == 0
