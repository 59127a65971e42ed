"""Ordered monoids used as path weights.

A weight type only needs an identity element, an associative ``append`` and a
total order exposed through ``compare``. The engines never use arithmetic or
comparison operators on weights directly, so integers, floats, decimals,
fractions or composite tuples all work once wrapped in a monoid.

Example:
    >>> FLOAT_WEIGHTS.append(1.5, 2.0)
    3.5
    >>> hops = LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS)
    >>> hops.compare((3, 1), (3, 2))
    -1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from functools import cmp_to_key
from typing import Any, Callable, Generic, Tuple

from spath.types.base import Weight


class OrderedMonoid(ABC, Generic[Weight]):
    """Identity, associative combination and total order over weights."""

    @abstractmethod
    def identity(self) -> Weight:
        """Return the neutral element of ``append``."""

    @abstractmethod
    def append(self, a: Weight, b: Weight) -> Weight:
        """Combine two weights."""

    @abstractmethod
    def compare(self, a: Weight, b: Weight) -> int:
        """Return a negative, zero or positive int as ``a`` is below, equal
        to or above ``b``."""

    def fold(self, weights) -> Weight:
        """Append every weight of an iterable, starting from the identity."""
        total = self.identity()
        for weight in weights:
            total = self.append(total, weight)
        return total


class AdditiveMonoid(OrderedMonoid[Weight]):
    """Addition over a numeric type, ordered by ``<``.

    Args:
        zero: Identity value; its type documents the weight domain
            (``0``, ``0.0``, ``Decimal(0)``, ``Fraction(0)``...).
    """

    def __init__(self, zero: Weight) -> None:
        self._zero = zero

    def identity(self) -> Weight:
        return self._zero

    def append(self, a: Weight, b: Weight) -> Weight:
        return a + b

    def compare(self, a: Weight, b: Weight) -> int:
        return (a > b) - (a < b)

    def __repr__(self) -> str:
        return f"AdditiveMonoid({self._zero!r})"


class LexicographicMonoid(OrderedMonoid[Tuple[Any, ...]]):
    """Component-wise product of monoids, ordered lexicographically.

    Useful to rank equal-distance paths by a secondary criterion, e.g.
    ``(distance, hops)`` with an edge weight function returning
    ``(cost, 1)``.

    Weights must have one element per component; ``append`` and ``compare``
    raise ValueError otherwise.
    """

    def __init__(self, *components: OrderedMonoid) -> None:
        if not components:
            raise ValueError("LexicographicMonoid needs at least one component.")
        self._components = components

    def identity(self) -> Tuple[Any, ...]:
        return tuple(m.identity() for m in self._components)

    def append(self, a: Tuple[Any, ...], b: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return tuple(
            m.append(x, y) for m, x, y in zip(self._components, a, b, strict=True)
        )

    def compare(self, a: Tuple[Any, ...], b: Tuple[Any, ...]) -> int:
        for m, x, y in zip(self._components, a, b, strict=True):
            result = m.compare(x, y)
            if result:
                return result
        return 0

    def __repr__(self) -> str:
        inner = ", ".join(repr(m) for m in self._components)
        return f"LexicographicMonoid({inner})"


def sort_key(monoid: OrderedMonoid) -> Callable[[Any], Any]:
    """Turn ``monoid.compare`` into a key function usable by ``heapq``."""
    return cmp_to_key(monoid.compare)


FLOAT_WEIGHTS: OrderedMonoid[float] = AdditiveMonoid(0.0)
INT_WEIGHTS: OrderedMonoid[int] = AdditiveMonoid(0)
DECIMAL_WEIGHTS: OrderedMonoid[Decimal] = AdditiveMonoid(Decimal(0))
FRACTION_WEIGHTS: OrderedMonoid[Fraction] = AdditiveMonoid(Fraction(0))
