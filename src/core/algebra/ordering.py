"""
Ordering — трёхзначный результат сравнения и обобщённые Ord-утилиты

Ordering совместим с обычными int (-1/0/1), поэтому результат compare
можно сравнивать и с Ordering.LT, и с литералом -1.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from src.core.algebra.classes import Ord

A = TypeVar("A")


class Ordering(IntEnum):
    """Результат compare(first, second)"""

    LT = -1
    EQ = 0
    GT = 1


def compare_numbers(first: float, second: float) -> Ordering:
    """
    Сравнение двух чисел стандартными операторами.

    NaN не меньше и не больше чего-либо, поэтому даёт Ordering.EQ.

    Examples:
        >>> compare_numbers(1.0, 2.0)
        <Ordering.LT: -1>
        >>> compare_numbers(2, 2)
        <Ordering.EQ: 0>
    """
    if first < second:
        return Ordering.LT
    if first > second:
        return Ordering.GT
    return Ordering.EQ


# =============================================================================
# ОБОБЩЁННЫЕ УТИЛИТЫ ПОВЕРХ Ord
# =============================================================================


def min_(ord_: "Ord[A]", first: A, second: A) -> A:
    """Меньшее из двух; при равенстве возвращается first"""
    return second if ord_.compare(first, second) == Ordering.GT else first


def max_(ord_: "Ord[A]", first: A, second: A) -> A:
    """Большее из двух; при равенстве возвращается first"""
    return second if ord_.compare(first, second) == Ordering.LT else first


def clamp(ord_: "Ord[A]", low: A, high: A, value: A) -> A:
    """
    Ограничение value диапазоном [low, high] по заданному порядку.

    Args:
        ord_: Экземпляр Ord для типа A
        low: Нижняя граница
        high: Верхняя граница
        value: Значение для ограничения

    Returns:
        low если value < low, high если value > high, иначе value

    Raises:
        ValueError: Если low > high
    """
    if ord_.compare(low, high) == Ordering.GT:
        raise ValueError(f"clamp bounds are inverted: low={low!r} > high={high!r}")
    return min_(ord_, max_(ord_, value, low), high)


def between(ord_: "Ord[A]", low: A, high: A, value: A) -> bool:
    """Проверка low <= value <= high (включительно)"""
    return ord_.compare(value, low) != Ordering.LT and ord_.compare(value, high) != Ordering.GT
