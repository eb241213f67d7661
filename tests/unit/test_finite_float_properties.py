"""
Property-based тесты для FiniteFloat

Проверяет законы, которые должны выполняться для всех значений обеих ширин:
1. new(x) успешен ⇔ x конечен
2. Round-trip: new(new(x).get()) == new(x)
3. Равенство — отношение эквивалентности, хэш согласован с равенством
4. Порядок полный и транзитивный
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.core.domain import FiniteF32, FiniteF64, Ordering

WIDTHS = [FiniteF32, FiniteF64]


def any_floats(cls) -> st.SearchStrategy[float]:
    """Все значения ширины класса, включая NaN и ±Inf"""
    return st.floats(width=cls.float_format.bits)


def finite_floats(cls) -> st.SearchStrategy[float]:
    """Конечные значения ширины класса"""
    return st.floats(
        width=cls.float_format.bits, allow_nan=False, allow_infinity=False
    )


@pytest.mark.parametrize("cls", WIDTHS)
class TestConstructionLaws:
    """Законы создания"""

    @given(data=st.data())
    def test_new_iff_finite(self, cls, data: st.DataObject) -> None:
        x = data.draw(any_floats(cls))
        assert (cls.new(x) is not None) == math.isfinite(x)

    @given(data=st.data())
    def test_round_trip(self, cls, data: st.DataObject) -> None:
        x = data.draw(finite_floats(cls))
        value = cls.new(x)
        assert value is not None
        assert value.value == x
        assert cls.new(value.get()) == value


@pytest.mark.parametrize("cls", WIDTHS)
class TestEqualityLaws:
    """Равенство и хэш"""

    @given(data=st.data())
    def test_reflexive(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        assert a == a

    @given(data=st.data())
    def test_symmetric(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        b = cls(data.draw(finite_floats(cls)))
        assert (a == b) == (b == a)

    @given(data=st.data())
    def test_hash_consistent_with_equality(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        b = cls(data.draw(st.sampled_from([a.value, -a.value, a.value * 0.5])))
        if a == b:
            assert hash(a) == hash(b)


@pytest.mark.parametrize("cls", WIDTHS)
class TestOrderLaws:
    """Полный порядок"""

    @given(data=st.data())
    def test_trichotomy(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        b = cls(data.draw(finite_floats(cls)))
        assert [a < b, a == b, a > b].count(True) == 1

    @given(data=st.data())
    def test_cmp_matches_operators(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        b = cls(data.draw(finite_floats(cls)))
        expected = Ordering.LESS if a < b else Ordering.GREATER if a > b else Ordering.EQUAL
        assert a.cmp(b) is expected
        assert b.cmp(a) == -expected

    @given(data=st.data())
    def test_transitive(self, cls, data: st.DataObject) -> None:
        a, b, c = sorted(cls(data.draw(finite_floats(cls))) for _ in range(3))
        assert a <= b <= c
        assert a <= c

    @given(data=st.data())
    def test_nan_unordered(self, cls, data: st.DataObject) -> None:
        a = cls(data.draw(finite_floats(cls)))
        assert not (a < math.nan)
        assert not (a > math.nan)
        assert not (a == math.nan)
        assert a.partial_cmp(math.nan) is None
