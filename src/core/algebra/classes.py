"""
Algebraic Capability Sets — интерфейсы type-class иерархии

Абстрактные контракты без состояния. Каждый конкретный числовой тип
предоставляет по одному экземпляру (instance) на каждый контракт, и любой
обобщённый алгоритм получает нужный экземпляр явным параметром.

Иерархия:
- Eq → Ord → Bounded
- Ring → Field
- Ring + Eq → Num
- Ord + Num → Real
- Field + Real → Floating
- Ring + Real → Integral
- Semigroup → Monoid
- Show

Порядок аргументов: op(first, second), т.е. div(a, b) = a / b,
compare(a, b) — положение a относительно b.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from src.core.algebra.ordering import Ordering

A = TypeVar("A")


# =============================================================================
# EQUALITY / ORDERING
# =============================================================================


class Eq(ABC, Generic[A]):
    """Структурное равенство"""

    @abstractmethod
    def equals(self, first: A, second: A) -> bool: ...


class Ord(Eq[A]):
    """
    Полный порядок поверх Eq.

    compare(first, second) возвращает Ordering first относительно second.
    """

    @abstractmethod
    def compare(self, first: A, second: A) -> Ordering: ...


class Bounded(Ord[A]):
    """Ord с выделенными крайними значениями top/bottom"""

    top: A
    bottom: A


class Show(ABC, Generic[A]):
    @abstractmethod
    def show(self, value: A) -> str: ...


# =============================================================================
# SEMIGROUP / MONOID
# =============================================================================


class Semigroup(ABC, Generic[A]):
    """Ассоциативная операция concat"""

    @abstractmethod
    def concat(self, first: A, second: A) -> A: ...


class Monoid(Semigroup[A]):
    """Semigroup с нейтральным элементом empty"""

    empty: A


def concat_all(monoid: Monoid[A], values: Iterable[A]) -> A:
    """
    Свёртка последовательности через Monoid.

    Начинает с monoid.empty, поэтому пустая последовательность даёт empty.

    Examples:
        >>> concat_all(float32.MonoidSum, [float32.of(1), float32.of(2)])
        Float(3.0)
    """
    result = monoid.empty
    for value in values:
        result = monoid.concat(result, value)
    return result


# =============================================================================
# RING / FIELD
# =============================================================================


class Ring(ABC, Generic[A]):
    """Кольцо: add/sub/mul и нейтральные элементы zero/one"""

    zero: A
    one: A

    @abstractmethod
    def add(self, first: A, second: A) -> A: ...

    @abstractmethod
    def sub(self, first: A, second: A) -> A: ...

    @abstractmethod
    def mul(self, first: A, second: A) -> A: ...


class Field(Ring[A]):
    """
    Поле: Ring + div/mod.

    degree — маркер характеристики; все экземпляры в пакете возвращают 1.
    """

    @abstractmethod
    def div(self, first: A, second: A) -> A: ...

    @abstractmethod
    def mod(self, first: A, second: A) -> A: ...

    def degree(self, value: A) -> int:
        return 1


# =============================================================================
# NUMERIC TOWER
# =============================================================================


class Num(Ring[A], Eq[A]):
    """Ring + Eq + abs"""

    @abstractmethod
    def abs(self, value: A) -> A: ...


class Real(Ord[A], Num[A]):
    """Упорядоченный Num"""


class Floating(Field[A], Real[A]):
    """Полный набор возможностей для Float и Complex"""


class Integral(Real[A]):
    """Ring + порядок + abs, без деления (Int)"""
