"""
Тесты для модуля Float (float32)

Проверяет:
1. Конструирование и извлечение (of/fold/map_/chain/sign)
2. Eq, Ord, Bounded
3. Floating: арифметика с округлением до single precision
4. IEEE-754 поведение: inf/nan без исключений
5. Show и Semigroup/Monoid экземпляры
"""

import math

import numpy as np
import pytest

from src.core.algebra import classes
from src.core.algebra.ordering import Ordering
from src.core.numeric import float32 as F
from src.core.numeric.tolerance import get_float_approx_eq


def _f32(value: float) -> float:
    """Значение после округления до float32"""
    return float(np.float32(value))


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstructors:
    """Тесты для of/fold/map_/chain"""

    @pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1024.0, 0.125])
    def test_fold_of_roundtrip(self, value: float) -> None:
        """fold(of(x)) == x для представимых x"""
        assert F.fold(F.of(value)) == value

    def test_of_rounds_to_single_precision(self) -> None:
        """0.1 хранится как ближайшее float32"""
        assert F.fold(F.of(0.1)) == _f32(0.1)
        assert F.fold(F.of(0.1)) != 0.1

    def test_of_overflow_becomes_infinity(self) -> None:
        """Значения вне диапазона float32 становятся ±inf"""
        assert F.fold(F.of(1e39)) == math.inf
        assert F.fold(F.of(-1e39)) == -math.inf

    def test_of_huge_int_becomes_infinity(self) -> None:
        """Целые вне диапазона float64 тоже дают ±inf"""
        assert F.fold(F.of(10**400)) == math.inf
        assert F.fold(F.of(-(10**400))) == -math.inf
        assert F.fold(F.map_(lambda x: int(x) ** 40, F.of(1e10))) == math.inf

    def test_buffer_is_float32(self) -> None:
        """Буфер — одноэлементный float32"""
        fa = F.of(3)
        assert fa.buffer.dtype == np.float32
        assert fa.buffer.shape == (1,)

    def test_map(self) -> None:
        """map_ поднимает number -> number"""
        assert F.map_(lambda x: x * 2, F.of(1.5)) == F.of(3)

    def test_chain(self) -> None:
        """chain поднимает number -> Float"""
        assert F.chain(lambda x: F.of(x + 1), F.of(1)) == F.of(2)

    def test_sign(self) -> None:
        """sign возвращает положение относительно нуля"""
        assert F.sign(F.of(-3)) == Ordering.LT
        assert F.sign(F.of(0)) == Ordering.EQ
        assert F.sign(F.of(2)) == Ordering.GT

    def test_sign_of_nan_is_eq(self) -> None:
        """NaN не меньше и не больше нуля"""
        assert F.sign(F.of(math.nan)) == Ordering.EQ


# =============================================================================
# EQ / ORD / BOUNDED
# =============================================================================


class TestEqOrd:
    """Тесты для Eq и Ord"""

    def test_eq(self) -> None:
        assert F.Eq.equals(F.of(5), F.of(5)) is True
        assert F.Eq.equals(F.of(5), F.of(6)) is False

    def test_eq_is_symmetric_and_transitive(self) -> None:
        a, b, c = F.of(0.1), F.of(0.1), F.of(0.1)
        assert F.Eq.equals(a, b) and F.Eq.equals(b, a)
        assert F.Eq.equals(a, b) and F.Eq.equals(b, c) and F.Eq.equals(a, c)

    def test_compare(self) -> None:
        """compare(first, second) — положение first относительно second"""
        assert F.Ord.compare(F.of(1), F.of(2)) == -1
        assert F.Ord.compare(F.of(2), F.of(1)) == 1
        assert F.Ord.compare(F.of(2), F.of(2)) == 0

    def test_compare_antisymmetric(self) -> None:
        a, b = F.of(-1.5), F.of(7)
        assert F.Ord.compare(a, b) == -F.Ord.compare(b, a)

    def test_ord_equals_is_eq(self) -> None:
        assert F.Ord.equals(F.of(1), F.of(1)) is True


class TestBounded:
    """Bounded сохраняет литералы -3.4e38 / 1.2e-38"""

    def test_literals(self) -> None:
        assert F.fold(F.Bounded.top) == _f32(-3.4e38)
        assert F.fold(F.Bounded.bottom) == _f32(1.2e-38)

    def test_orientation(self) -> None:
        """top отрицателен, поэтому bottom > top"""
        assert F.Bounded.compare(F.Bounded.bottom, F.Bounded.top) == Ordering.GT
        assert F.Bounded.compare(F.Bounded.top, F.Bounded.bottom) == Ordering.LT


# =============================================================================
# FLOATING
# =============================================================================


class TestFloating:
    """Тесты для Floating-экземпляра"""

    def test_is_floating_instance(self) -> None:
        assert isinstance(F.Floating, classes.Floating)

    def test_identities(self) -> None:
        assert F.Floating.zero == F.of(0)
        assert F.Floating.one == F.of(1)

    def test_add_sub_mul_div(self) -> None:
        assert F.Floating.add(F.of(1.5), F.of(2.25)) == F.of(3.75)
        assert F.Floating.sub(F.of(1.5), F.of(2.25)) == F.of(-0.75)
        assert F.Floating.mul(F.of(1.5), F.of(2)) == F.of(3)
        assert F.Floating.div(F.of(1), F.of(4)) == F.of(0.25)

    def test_result_rounded_to_single_precision(self) -> None:
        """Сумма считается в double и округляется при сохранении"""
        expected = _f32(_f32(0.1) + _f32(0.2))
        assert F.fold(F.Floating.add(F.of(0.1), F.of(0.2))) == expected

    def test_mod_is_truncated_remainder(self) -> None:
        """mod сохраняет знак делимого"""
        assert F.Floating.mod(F.of(5.5), F.of(2)) == F.of(1.5)
        assert F.Floating.mod(F.of(-5.5), F.of(2)) == F.of(-1.5)

    def test_abs(self) -> None:
        assert F.Floating.abs(F.of(-2.5)) == F.of(2.5)
        assert F.Floating.abs(F.of(2.5)) == F.of(2.5)

    def test_degree(self) -> None:
        assert F.Floating.degree(F.of(0)) == 1
        assert F.Floating.degree(F.of(42)) == 1

    def test_division_by_zero_is_infinity(self) -> None:
        """Деление на ноль не бросает исключение"""
        assert F.fold(F.Floating.div(F.of(1), F.of(0))) == math.inf
        assert F.fold(F.Floating.div(F.of(-1), F.of(0))) == -math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        assert math.isnan(F.fold(F.Floating.div(F.of(0), F.of(0))))

    def test_mod_by_zero_is_nan(self) -> None:
        assert math.isnan(F.fold(F.Floating.mod(F.of(1), F.of(0))))

    def test_nan_propagates(self) -> None:
        nan = F.of(math.nan)
        assert math.isnan(F.fold(F.Floating.add(nan, F.of(1))))

    def test_mul_overflow_is_infinity(self) -> None:
        assert F.fold(F.Floating.mul(F.of(3e38), F.of(10))) == math.inf


class TestFieldLaws:
    """Законы поля (в пределах точности float32)"""

    values = [F.of(0.1), F.of(-3.75), F.of(1234.5)]

    @pytest.mark.parametrize("x", values)
    def test_sub_self_is_zero(self, x: F.Float) -> None:
        assert F.Floating.sub(x, x) == F.Floating.zero

    @pytest.mark.parametrize("x", values)
    def test_div_self_is_one(self, x: F.Float) -> None:
        assert F.Floating.div(x, x) == F.Floating.one

    def test_add_mul_commutative(self) -> None:
        a, b = F.of(0.1), F.of(0.7)
        assert F.Floating.add(a, b) == F.Floating.add(b, a)
        assert F.Floating.mul(a, b) == F.Floating.mul(b, a)

    def test_add_mul_associative_within_tolerance(self) -> None:
        approx = get_float_approx_eq()
        a, b, c = F.of(0.1), F.of(0.2), F.of(0.3)
        add, mul = F.Floating.add, F.Floating.mul
        assert approx.equals(add(add(a, b), c), add(a, add(b, c)))
        assert approx.equals(mul(mul(a, b), c), mul(a, mul(b, c)))


# =============================================================================
# SHOW / SEMIGROUP / MONOID
# =============================================================================


class TestShow:
    @pytest.mark.parametrize(
        "value, expected",
        [(1, "1"), (-2, "-2"), (1.5, "1.5"), (math.nan, "NaN"), (math.inf, "Infinity"), (-math.inf, "-Infinity")],
    )
    def test_show(self, value: float, expected: str) -> None:
        assert F.Show.show(F.of(value)) == expected

    def test_show_uses_stored_value(self) -> None:
        """Показывается значение после округления до float32"""
        assert F.Show.show(F.of(0.1)) == repr(_f32(0.1))


class TestSemigroupMonoid:
    def test_semigroup_sum(self) -> None:
        assert F.SemigroupSum.concat(F.of(2), F.of(3)) == F.of(5)

    def test_semigroup_product(self) -> None:
        assert F.SemigroupProduct.concat(F.of(2), F.of(3)) == F.of(6)

    @pytest.mark.parametrize("x", [F.of(0), F.of(2.5), F.of(-7)])
    def test_monoid_identity(self, x: F.Float) -> None:
        assert F.MonoidSum.concat(x, F.MonoidSum.empty) == x
        assert F.MonoidSum.concat(F.MonoidSum.empty, x) == x
        assert F.MonoidProduct.concat(x, F.MonoidProduct.empty) == x
        assert F.MonoidProduct.concat(F.MonoidProduct.empty, x) == x
