"""
Metricnum Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterable, Iterator, KeysView, ValuesView, ItemsView
from typing import Any, TypeVar, Generic

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")


class FrozenBiMap(Mapping[K, V], Generic[K, V]):
    """
    An immutable, insertion-ordered bidirectional map.

    - Forward direction (key -> value) implements the stdlib Mapping protocol.
      Membership (x in bimap) applies to KEYS only, like dict.
    - Reverse direction (value -> key) is available via get_key(value) and has_value(value).
    - Both keys and values must be hashable and unique; duplicates are rejected at construction.
    - No mutating methods exist, so instances are safe to share between threads.

    Examples:
        >>> steps = FrozenBiMap({"k": 1, "M": 2, "m": -1})
        >>> steps["M"]
        2
        >>> steps.get_key(-1)
        'm'
    """

    __slots__ = ("_forward_map", "_backward_map")

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        forward_map: dict[K, V] = {}
        backward_map: dict[V, K] = {}
        pairs = initial.items() if isinstance(initial, Mapping) else (initial or ())
        for key, value in pairs:
            if key in forward_map:
                raise ValueError(f"Key {fmt_value(key)} already exists (maps to {forward_map[key]!r})")
            if value in backward_map:
                raise ValueError(f"Value {fmt_value(value)} already exists (mapped from {backward_map[value]!r})")
            forward_map[key] = value
            backward_map[value] = key
        object.__setattr__(self, "_forward_map", forward_map)
        object.__setattr__(self, "_backward_map", backward_map)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ----- Mapping required methods -----

    def __getitem__(self, key: K) -> V:
        return self._forward_map[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward_map)

    def __len__(self) -> int:
        return len(self._forward_map)

    # ----- Mapping helpers (typed views) -----

    def keys(self) -> KeysView[K]:
        return self._forward_map.keys()

    def values(self) -> ValuesView[V]:
        return self._forward_map.values()

    def items(self) -> ItemsView[K, V]:
        return self._forward_map.items()

    def get(self, key: K, default: V | None = None) -> V | None:
        return self._forward_map.get(key, default)

    # ----- Bidirectional operations -----

    def get_key(self, value: V) -> K:
        """Lookup key by value, raises KeyError if missing."""
        return self._backward_map[value]

    def has_value(self, value: V) -> bool:
        """True if value exists in reverse map."""
        return value in self._backward_map

    def inverse(self) -> "FrozenBiMap[V, K]":
        """Return a new map with keys and values swapped, order preserved."""
        return FrozenBiMap((v, k) for k, v in self._forward_map.items())

    # ----- Equality and representation -----

    def __repr__(self) -> str:
        return f"FrozenBiMap({self._forward_map!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Mapping):
            return dict(self._forward_map.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._forward_map.items()))
