"""
Comparison - Поэлементные сравнения векторов

Примитивы:
- compare: condition(v1[i], v2[i]) для каждой пары компонент
- compare_scalar: condition(v[i], val) для каждой компоненты
- all_of / any_of: свёртка булевой последовательности

Условие сравнения передаётся либо как callable (float, float) -> bool,
либо как член ComparisonOp.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compare на векторах разного размера → SizeMismatchError
   (truncate=True включает усечение до более короткого)
2. Длина результата compare_scalar всегда равна размеру вектора
3. all_of([]) is True, any_of([]) is False
"""

import logging
import operator
from enum import Enum
from typing import Callable, Iterable, Sequence

from mathi.core.errors import SizeMismatchError
from mathi.core.math.tolerance import isclose

logger = logging.getLogger(__name__)

Condition = Callable[[float, float], bool]


# =============================================================================
# ENUMS
# =============================================================================


class ComparisonOp(str, Enum):
    """Стандартные условия поэлементного сравнения"""

    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    EQ = "eq"
    NE = "ne"
    CLOSE = "close"  # isclose с DEFAULT_TOL

    @property
    def condition(self) -> Condition:
        return _OP_CONDITIONS[self]


_OP_CONDITIONS: dict[ComparisonOp, Condition] = {
    ComparisonOp.LT: operator.lt,
    ComparisonOp.LE: operator.le,
    ComparisonOp.GT: operator.gt,
    ComparisonOp.GE: operator.ge,
    ComparisonOp.EQ: operator.eq,
    ComparisonOp.NE: operator.ne,
    ComparisonOp.CLOSE: isclose,
}


def as_condition(condition: Condition | ComparisonOp | str) -> Condition:
    """
    Приведение условия к callable.

    Args:
        condition: callable, член ComparisonOp или его строковое значение ("lt", ...)

    Returns:
        Функция (float, float) -> bool

    Raises:
        ValueError: Неизвестное имя операции
        TypeError: condition не callable и не ComparisonOp
    """
    if isinstance(condition, str):
        return ComparisonOp(condition).condition
    if callable(condition):
        return condition
    raise TypeError(f"condition must be callable or ComparisonOp, got {type(condition).__name__}")


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ СРАВНЕНИЯ
# =============================================================================


def compare(
    v1: Sequence[float],
    v2: Sequence[float],
    condition: Condition | ComparisonOp | str,
    truncate: bool = False,
) -> list[bool]:
    """
    Поэлементное сравнение двух векторов.

    Args:
        v1: Левый вектор (Vector или любая последовательность float)
        v2: Правый вектор
        condition: Условие сравнения
        truncate: Усекать до более короткого вектора вместо ошибки (default: False)

    Returns:
        [condition(v1[i], v2[i]) for i in range(size)]

    Raises:
        SizeMismatchError: Если размеры различаются и truncate=False

    Examples:
        >>> compare([1.0, 2.0], [2.0, 2.0], ComparisonOp.LT)
        [True, False]
        >>> compare([1.0, 2.0, 3.0], [0.0], ComparisonOp.GT, truncate=True)
        [True]
    """
    cond = as_condition(condition)

    if not truncate and len(v1) != len(v2):
        logger.debug("compare rejected operands of sizes %d and %d", len(v1), len(v2))
        raise SizeMismatchError(len(v1), len(v2), "compare")

    return [bool(cond(a, b)) for a, b in zip(v1, v2)]


def compare_scalar(
    v: Iterable[float],
    val: float,
    condition: Condition | ComparisonOp | str,
) -> list[bool]:
    """
    Поэлементное сравнение вектора со скаляром.

    Returns:
        [condition(v[i], val) for i in range(size)]
    """
    cond = as_condition(condition)
    return [bool(cond(x, val)) for x in v]


# =============================================================================
# СВЁРТКИ
# =============================================================================


def all_of(flags: Iterable[bool]) -> bool:
    """True если все элементы True (пустая последовательность → True)."""
    for flag in flags:
        if not flag:
            return False
    return True


def any_of(flags: Iterable[bool]) -> bool:
    """True если хотя бы один элемент True (пустая последовательность → False)."""
    for flag in flags:
        if flag:
            return True
    return False
