from decimal import Decimal
from fractions import Fraction

import pytest

from spath.types.monoid import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    FRACTION_WEIGHTS,
    INT_WEIGHTS,
    AdditiveMonoid,
    LexicographicMonoid,
    OrderedMonoid,
    sort_key,
)


class TestAdditiveMonoid:
    def test_identity(self):
        assert INT_WEIGHTS.identity() == 0
        assert isinstance(FLOAT_WEIGHTS.identity(), float)
        assert isinstance(DECIMAL_WEIGHTS.identity(), Decimal)
        assert isinstance(FRACTION_WEIGHTS.identity(), Fraction)

    def test_append(self):
        assert INT_WEIGHTS.append(2, 3) == 5
        assert FRACTION_WEIGHTS.append(Fraction(1, 3), Fraction(1, 6)) == Fraction(1, 2)

    def test_compare(self):
        assert INT_WEIGHTS.compare(1, 2) == -1
        assert INT_WEIGHTS.compare(2, 2) == 0
        assert INT_WEIGHTS.compare(3, 2) == 1
        assert FLOAT_WEIGHTS.compare(-0.5, 0.0) == -1

    def test_fold(self):
        assert INT_WEIGHTS.fold([1, 2, 3]) == 6
        assert INT_WEIGHTS.fold([]) == 0
        assert DECIMAL_WEIGHTS.fold([Decimal("0.1")] * 3) == Decimal("0.3")

    def test_identity_is_neutral(self):
        for w in (-2, 0, 7):
            assert INT_WEIGHTS.append(INT_WEIGHTS.identity(), w) == w
            assert INT_WEIGHTS.append(w, INT_WEIGHTS.identity()) == w

    def test_repr(self):
        assert repr(AdditiveMonoid(0)) == "AdditiveMonoid(0)"


class TestLexicographicMonoid:
    def test_componentwise_operations(self):
        monoid = LexicographicMonoid(INT_WEIGHTS, FLOAT_WEIGHTS)
        assert monoid.identity() == (0, 0.0)
        assert monoid.append((1, 0.5), (2, 1.5)) == (3, 2.0)

    def test_lexicographic_order(self):
        monoid = LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS)
        assert monoid.compare((1, 9), (2, 0)) < 0
        assert monoid.compare((2, 1), (2, 0)) > 0
        assert monoid.compare((2, 1), (2, 1)) == 0

    def test_needs_components(self):
        with pytest.raises(ValueError, match="at least one component"):
            LexicographicMonoid()

    def test_repr(self):
        assert (
            repr(LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS))
            == "LexicographicMonoid(AdditiveMonoid(0), AdditiveMonoid(0))"
        )


def test_sort_key_orders_by_compare():
    class Longest(OrderedMonoid):
        """Max-plus-like order: larger weights come first."""

        def identity(self):
            return 0

        def append(self, a, b):
            return a + b

        def compare(self, a, b):
            return (a < b) - (a > b)

    assert sorted([1, 3, 2], key=sort_key(Longest())) == [3, 2, 1]
    assert sorted([(2, 1), (1, 5)], key=sort_key(LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS))) == [
        (1, 5),
        (2, 1),
    ]


def test_abstract_monoid_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OrderedMonoid()


def test_lexicographic_rejects_wrong_arity():
    monoid = LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS)
    with pytest.raises(ValueError):
        monoid.append((1, 2), (3,))
    with pytest.raises(ValueError):
        monoid.append((1, 2, 3), (1, 2, 3))
    with pytest.raises(ValueError):
        monoid.compare((1, 2), (1, 2, 0))
