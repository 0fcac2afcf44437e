"""
Algebra — capability-set интерфейсы и вспомогательные комбинаторы.

Интерфейсы не содержат состояния; конкретные экземпляры живут в
src.core.numeric рядом со своими типами.
"""

from src.core.algebra.classes import (
    Bounded,
    Eq,
    Field,
    Floating,
    Integral,
    Monoid,
    Num,
    Ord,
    Real,
    Ring,
    Semigroup,
    Show,
    concat_all,
)
from src.core.algebra.infix import get_field_infix, get_ord_infix, get_ring_infix
from src.core.algebra.ordering import (
    Ordering,
    between,
    clamp,
    compare_numbers,
    max_,
    min_,
)

__all__ = [
    # Interfaces
    "Eq",
    "Ord",
    "Bounded",
    "Show",
    "Semigroup",
    "Monoid",
    "Ring",
    "Field",
    "Num",
    "Real",
    "Floating",
    "Integral",
    # Combinators
    "concat_all",
    # Infix
    "get_ring_infix",
    "get_field_infix",
    "get_ord_infix",
    # Ordering
    "Ordering",
    "compare_numbers",
    "min_",
    "max_",
    "clamp",
    "between",
]
