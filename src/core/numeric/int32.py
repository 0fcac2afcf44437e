"""
Int — 32-битное знаковое целое

Integral-экземпляр: кольцо + порядок + abs, деления нет.
Результаты операций заворачиваются в int32 (wraparound).
"""

import operator
from typing import Callable, Final

import numpy as np

from src.core.algebra import classes
from src.core.algebra.ordering import Ordering, compare_numbers
from src.core.numeric.storage import FixedWidth, format_number, integer_buffer

# =============================================================================
# BOUNDED LITERALS
# =============================================================================

# Совпадают с диапазоном int8, а не int32; хранятся как есть
INT_TOP: Final[int] = 127
INT_BOTTOM: Final[int] = -128


class Int(FixedWidth):
    """32-битное знаковое целое"""

    DTYPE = np.int32


def of(value: float) -> Int:
    """
    Упаковка числа в Int (усечение к нулю + wraparound).

    Examples:
        >>> of(7)
        Int(7)
        >>> of(2**31)
        Int(-2147483648)
    """
    return Int(integer_buffer(value, np.int32))


def fold(fa: Int) -> int:
    """Извлечение хранимого значения"""
    return fa.value


def map_(f: Callable[[int], float], fa: Int) -> Int:
    """Поднятие функции number -> number до Int -> Int"""
    return of(f(fold(fa)))


def chain(f: Callable[[int], Int], fa: Int) -> Int:
    """Поднятие функции number -> Int до Int -> Int"""
    return f(fold(fa))


def _apply(op: Callable[[int, int], int], first: Int, second: Int) -> Int:
    return of(op(fold(first), fold(second)))


class IntEq(classes.Eq[Int]):
    def equals(self, first: Int, second: Int) -> bool:
        return fold(first) == fold(second)


class IntOrd(IntEq, classes.Ord[Int]):
    def compare(self, first: Int, second: Int) -> Ordering:
        return compare_numbers(fold(first), fold(second))


class IntBounded(IntOrd, classes.Bounded[Int]):
    top = of(INT_TOP)
    bottom = of(INT_BOTTOM)


class IntIntegral(IntOrd, classes.Integral[Int]):
    zero = of(0)
    one = of(1)

    def add(self, first: Int, second: Int) -> Int:
        return _apply(operator.add, first, second)

    def sub(self, first: Int, second: Int) -> Int:
        return _apply(operator.sub, first, second)

    def mul(self, first: Int, second: Int) -> Int:
        return _apply(operator.mul, first, second)

    def abs(self, value: Int) -> Int:
        return map_(abs, value)


class IntShow(classes.Show[Int]):
    def show(self, value: Int) -> str:
        return format_number(fold(value))


class IntSemigroupSum(classes.Semigroup[Int]):
    def concat(self, first: Int, second: Int) -> Int:
        return Integral.add(first, second)


class IntSemigroupProduct(classes.Semigroup[Int]):
    def concat(self, first: Int, second: Int) -> Int:
        return Integral.mul(first, second)


class IntMonoidSum(IntSemigroupSum, classes.Monoid[Int]):
    empty = of(0)


class IntMonoidProduct(IntSemigroupProduct, classes.Monoid[Int]):
    empty = of(1)


Eq: Final[IntEq] = IntEq()
Ord: Final[IntOrd] = IntOrd()
Bounded: Final[IntBounded] = IntBounded()
Integral: Final[IntIntegral] = IntIntegral()
Show: Final[IntShow] = IntShow()
SemigroupSum: Final[IntSemigroupSum] = IntSemigroupSum()
SemigroupProduct: Final[IntSemigroupProduct] = IntSemigroupProduct()
MonoidSum: Final[IntMonoidSum] = IntMonoidSum()
MonoidProduct: Final[IntMonoidProduct] = IntMonoidProduct()
