"""
Complex — комплексное число из двух Float

Все операции делегируются Floating-экземпляру Float через замкнутые формулы:
    (a+bi) + (c+di) = (a+c) + (b+d)i
    (a+bi) * (c+di) = (ac - bd) + (bc + ad)i
    (a+bi) / (c+di) = [(ac + bd) + (bc - ad)i] / (c² + d²)
    x mod y         = x - y * floor(x / y)   (floor покомпонентно)
    |a+bi|          = sqrt(a² + b²)

Порядок (Ord) определяется ТОЛЬКО модулем: числа равного модуля с разной
фазой равны по Ord, но различны по Eq.

Каждая промежуточная операция округляется до float32, так что результаты
совпадают с вычислением на Float-экземпляре шаг за шагом.
"""

import numbers
from functools import partial
from typing import Any, Callable, Final, TypeVar

import numpy as np
from pydantic import BaseModel, field_validator

from src.core.algebra import classes
from src.core.algebra.infix import get_field_infix
from src.core.algebra.ordering import Ordering
from src.core.numeric import float32
from src.core.numeric.float32 import Float

B = TypeVar("B")

_f = get_field_infix(float32.Floating)
_floor = partial(float32.map_, np.floor)


# =============================================================================
# MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число real + complex·i.

    Immutable модель (frozen=True): каждая операция создаёт новый экземпляр.
    Числа при конструировании приводятся к Float.
    """

    real: Float
    complex: Float

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("real", "complex", mode="before")
    @classmethod
    def coerce_to_float(cls, v: Any) -> Any:
        """Приведение Python/numpy чисел к Float; bool не является компонентой"""
        if isinstance(v, (bool, np.bool_)):
            raise ValueError(f"Complex component must be a number, got bool {v!r}")
        if isinstance(v, numbers.Real):
            return float32.of(v)
        return v


def of(a: Float | float, b: Float | float) -> Complex:
    """
    Конструирование комплексного числа a + b·i.

    Examples:
        >>> of(1, 2)
        Complex(real=Float(1.0), complex=Float(2.0))
    """
    return Complex(real=a, complex=b)


def real(c: Complex) -> Float:
    """Действительная часть"""
    return c.real


def complex_(c: Complex) -> Float:
    """Мнимая часть"""
    return c.complex


def fold(f: Callable[[Float, Float], B], c: Complex) -> B:
    """
    Свёртка двух компонент бинарной функцией.

    Examples:
        >>> fold(float32.Floating.add, of(8, 8))
        Float(16.0)
    """
    return f(real(c), complex_(c))


def map_(fr: Callable[[Float], Float], fc: Callable[[Float], Float], c: Complex) -> Complex:
    """Независимые преобразования действительной и мнимой частей"""
    return of(fr(real(c)), fc(complex_(c)))


def modulus(c: Complex) -> Float:
    """
    Модуль: sqrt(real² + complex²).

    Examples:
        >>> modulus(of(3, 4))
        Float(5.0)
    """
    a, b = real(c), complex_(c)
    return float32.map_(np.sqrt, _f(_f(a, "*", a), "+", _f(b, "*", b)))


# =============================================================================
# INSTANCES
# =============================================================================


class ComplexEq(classes.Eq[Complex]):
    def equals(self, first: Complex, second: Complex) -> bool:
        return float32.Eq.equals(real(first), real(second)) and float32.Eq.equals(
            complex_(first), complex_(second)
        )


class ComplexOrd(ComplexEq, classes.Ord[Complex]):
    """Порядок по модулю; фаза не учитывается"""

    def compare(self, first: Complex, second: Complex) -> Ordering:
        second_modulus = modulus(second)
        first_modulus = modulus(first)
        return float32.Ord.compare(first_modulus, second_modulus)


class ComplexBounded(ComplexOrd, classes.Bounded[Complex]):
    # Обе компоненты доведены до одного и того же экстремума Float
    top = of(float32.Bounded.top, float32.Bounded.top)
    bottom = of(float32.Bounded.bottom, float32.Bounded.bottom)


class ComplexFloating(ComplexOrd, classes.Floating[Complex]):
    zero = of(float32.Floating.zero, float32.Floating.zero)
    one = of(float32.Floating.one, float32.Floating.zero)

    def add(self, first: Complex, second: Complex) -> Complex:
        return of(_f(real(first), "+", real(second)), _f(complex_(first), "+", complex_(second)))

    def sub(self, first: Complex, second: Complex) -> Complex:
        return of(_f(real(first), "-", real(second)), _f(complex_(first), "-", complex_(second)))

    def mul(self, first: Complex, second: Complex) -> Complex:
        a, b = real(first), complex_(first)
        c, d = real(second), complex_(second)
        return of(
            _f(_f(a, "*", c), "-", _f(b, "*", d)),
            _f(_f(b, "*", c), "+", _f(a, "*", d)),
        )

    def div(self, first: Complex, second: Complex) -> Complex:
        a, b = real(first), complex_(first)
        c, d = real(second), complex_(second)
        denominator = _f(_f(c, "*", c), "+", _f(d, "*", d))
        return of(
            _f(_f(_f(a, "*", c), "+", _f(b, "*", d)), "/", denominator),
            _f(_f(_f(b, "*", c), "-", _f(a, "*", d)), "/", denominator),
        )

    def mod(self, first: Complex, second: Complex) -> Complex:
        """
        Floored modulo, перенесённый на две компоненты:
        first - second * floor(first / second), floor отдельно к real и complex.
        """
        floored = map_(_floor, _floor, self.div(first, second))
        return self.sub(first, self.mul(second, floored))

    def abs(self, value: Complex) -> Complex:
        """Возвращает (modulus, 0), а не скаляр"""
        return of(modulus(value), float32.Floating.zero)


class ComplexShow(classes.Show[Complex]):
    """Формат <real><sign><|complex|>i, например 1-2i"""

    def show(self, value: Complex) -> str:
        imaginary = complex_(value)
        sign = "-" if float32.sign(imaginary) == Ordering.LT else "+"
        return f"{float32.Show.show(real(value))}{sign}{float32.Show.show(float32.Floating.abs(imaginary))}i"


class ComplexSemigroupSum(classes.Semigroup[Complex]):
    def concat(self, first: Complex, second: Complex) -> Complex:
        return Floating.add(first, second)


class ComplexSemigroupProduct(classes.Semigroup[Complex]):
    def concat(self, first: Complex, second: Complex) -> Complex:
        return Floating.mul(first, second)


class ComplexMonoidSum(ComplexSemigroupSum, classes.Monoid[Complex]):
    empty = of(0, 0)


class ComplexMonoidProduct(ComplexSemigroupProduct, classes.Monoid[Complex]):
    empty = of(1, 0)


Eq: Final[ComplexEq] = ComplexEq()
Ord: Final[ComplexOrd] = ComplexOrd()
Bounded: Final[ComplexBounded] = ComplexBounded()
Floating: Final[ComplexFloating] = ComplexFloating()
Show: Final[ComplexShow] = ComplexShow()
SemigroupSum: Final[ComplexSemigroupSum] = ComplexSemigroupSum()
SemigroupProduct: Final[ComplexSemigroupProduct] = ComplexSemigroupProduct()
MonoidSum: Final[ComplexMonoidSum] = ComplexMonoidSum()
MonoidProduct: Final[ComplexMonoidProduct] = ComplexMonoidProduct()
