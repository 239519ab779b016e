#
# Metricnum - Collection Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from metricnum.collections import FrozenBiMap


# Tests ----------------------------------------------------------------------------------------------------------------
class TestFrozenBiMap:

    @pytest.fixture
    def steps(self):
        """Fixture providing a pre-populated FrozenBiMap instance."""
        return FrozenBiMap({
            "k": 1,
            "M": 2,
            "m": -1,
        })

    def test_lookup(self, steps):
        assert steps["M"] == 2
        assert steps.get("k") == 1
        assert steps.get("G") is None
        assert steps.get_key(-1) == "m"
        assert steps.has_value(2)
        assert not steps.has_value(3)

    def test_missing(self, steps):
        with pytest.raises(KeyError):
            steps["G"]
        with pytest.raises(KeyError):
            steps.get_key(3)

    def test_contains(self, steps):
        assert "k" in steps  # Checks key
        assert 1 not in steps  # Values are not keys
        assert "G" not in steps

    def test_keys_values_items_ordered(self, steps):
        assert list(steps.keys()) == ["k", "M", "m"]
        assert list(steps.values()) == [1, 2, -1]
        assert list(steps.items()) == [("k", 1), ("M", 2), ("m", -1)]
        assert len(steps) == 3

    def test_from_pairs(self):
        assert FrozenBiMap([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}
        assert len(FrozenBiMap()) == 0

    def test_value_uniqueness(self):
        with pytest.raises(ValueError, match="Value <int: 1> already exists"):
            FrozenBiMap([("k", 1), ("K", 1)])

    def test_key_uniqueness(self):
        with pytest.raises(ValueError, match="Key <str: 'k'> already exists"):
            FrozenBiMap([("k", 1), ("k", 2)])

    def test_immutable(self, steps):
        with pytest.raises(TypeError):
            steps["G"] = 3
        with pytest.raises(AttributeError):
            steps._forward_map = {}
        with pytest.raises(AttributeError):
            del steps._backward_map

    def test_inverse(self, steps):
        inverse = steps.inverse()
        assert inverse[-1] == "m"
        assert inverse.get_key("M") == 2
        assert list(inverse) == [1, 2, -1]

    def test_eq_hash_repr(self, steps):
        same = FrozenBiMap({"k": 1, "M": 2, "m": -1})
        assert steps == same
        assert hash(steps) == hash(same)
        assert steps != FrozenBiMap({"k": 1})
        assert repr(FrozenBiMap({"k": 1})) == "FrozenBiMap({'k': 1})"
