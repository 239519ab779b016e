#
# Metricnum - Tools Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from metricnum.tools import fmt_type, fmt_value


# Tests ----------------------------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


class TestFmtValue:

    @pytest.mark.parametrize(
        "style, expected",
        [
            pytest.param("ascii", "<str: '1k'>", id="ascii"),
            pytest.param("unicode-angle", "⟨str: '1k'⟩", id="unicode-angle"),
            pytest.param("equal", "str='1k'", id="equal"),
            pytest.param("paren", "str('1k')", id="paren"),
            pytest.param("colon", "str: '1k'", id="colon"),
        ],
    )
    def test_styles(self, style, expected):
        assert fmt_value("1k", style=style) == expected

    def test_numbers(self):
        assert fmt_value(1e27) == "<float: 1e+27>"
        assert fmt_value(Decimal("1.5")) == "<Decimal: Decimal('1.5')>"

    def test_truncate_quoted(self):
        assert fmt_value("1234567890k", max_repr=6) == "<str: '12'...>"
        assert fmt_value("1234567890k", max_repr=6, style="colon") == "str: '12'…"

    def test_truncate_unquoted(self):
        assert fmt_value(1234567890, max_repr=4) == "<int: 1234...>"
        assert fmt_value(1234567890, max_repr=4, ellipsis="~") == "<int: 1234~>"

    def test_ascii_escape(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"

    def test_broken_repr(self):
        assert fmt_value(BrokenRepr()) == "<BrokenRepr: <BrokenRepr object (repr failed: RuntimeError)\\>>"


class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(int, "<type: int>", id="class"),
            pytest.param(None, "<type: NoneType>", id="none"),
        ],
    )
    def test_basic(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_show_module(self):
        assert fmt_type(Decimal(1), show_module=True) == "<type: decimal.Decimal>"
        assert fmt_type(1, show_module=True) == "<type: int>"

    def test_style(self):
        assert fmt_type(1.5, style="equal") == "type=float"
