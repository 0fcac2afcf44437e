"""
Infix Helpers — инфиксная запись поверх Ring/Field/Ord экземпляров

Позволяет писать формулы как f(a, "*", b) вместо вложенных вызовов
field.mul(a, b). Набор операторов закрыт; неизвестный оператор —
ошибка программиста (ValueError).

Examples:
    >>> f = get_field_infix(float32.Floating)
    >>> f(f(a, "*", c), "-", f(b, "*", d))
"""

from typing import Callable, Final, Literal, TypeVar

from src.core.algebra.classes import Field, Ord, Ring
from src.core.algebra.ordering import Ordering

A = TypeVar("A")

RingOperation = Literal["+", "-", "*"]
FieldOperation = Literal["+", "-", "*", "/", "mod"]
OrdOperation = Literal["==", "<", "<=", ">", ">="]

RingInfix = Callable[[A, RingOperation, A], A]
FieldInfix = Callable[[A, FieldOperation, A], A]
OrdInfix = Callable[[A, OrdOperation, A], bool]

RING_OPERATIONS: Final[tuple[str, ...]] = ("+", "-", "*")
FIELD_OPERATIONS: Final[tuple[str, ...]] = RING_OPERATIONS + ("/", "mod")
ORD_OPERATIONS: Final[tuple[str, ...]] = ("==", "<", "<=", ">", ">=")


def _unsupported(operator: str, supported: tuple[str, ...]) -> ValueError:
    return ValueError(f"Unsupported infix operator {operator!r}, expected one of {supported}")


def get_ring_infix(ring: Ring[A]) -> RingInfix[A]:
    """Инфикс для операций кольца: +, -, *"""

    def infix(left: A, operator: RingOperation, right: A) -> A:
        if operator == "+":
            return ring.add(left, right)
        if operator == "-":
            return ring.sub(left, right)
        if operator == "*":
            return ring.mul(left, right)
        raise _unsupported(operator, RING_OPERATIONS)

    return infix


def get_field_infix(field: Field[A]) -> FieldInfix[A]:
    """Инфикс для операций поля: кольцевые операции плюс / и mod"""
    ring_infix = get_ring_infix(field)

    def infix(left: A, operator: FieldOperation, right: A) -> A:
        if operator == "/":
            return field.div(left, right)
        if operator == "mod":
            return field.mod(left, right)
        if operator in RING_OPERATIONS:
            return ring_infix(left, operator, right)
        raise _unsupported(operator, FIELD_OPERATIONS)

    return infix


def get_ord_infix(ord_: Ord[A]) -> OrdInfix[A]:
    """
    Инфикс для сравнений: ==, <, <=, >, >=

    == использует equals, строгие сравнения — compare. Нестрогие
    сравнения истинны, если compare даёт строгий результат ИЛИ equals
    истинно; для типов, где Ord и Eq расходятся (Complex), равные по
    модулю, но неравные по Eq значения НЕ удовлетворяют <= и >=.
    """

    def infix(left: A, operator: OrdOperation, right: A) -> bool:
        if operator == "==":
            return ord_.equals(left, right)
        if operator == "<":
            return ord_.compare(left, right) == Ordering.LT
        if operator == "<=":
            return ord_.compare(left, right) == Ordering.LT or ord_.equals(left, right)
        if operator == ">":
            return ord_.compare(left, right) == Ordering.GT
        if operator == ">=":
            return ord_.compare(left, right) == Ordering.GT or ord_.equals(left, right)
        raise _unsupported(operator, ORD_OPERATIONS)

    return infix
