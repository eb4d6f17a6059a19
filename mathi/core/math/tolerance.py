"""
Tolerance - Скалярный компаратор с абсолютной толерантностью

Единственный источник истины для "числа считаются равными".
Все сравнения на равенство в mathi (is_zero, ==, allclose) сводятся к
многократному применению isclose.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. isclose(a, b, tol) <=> abs(a - b) < tol (строгое неравенство, не <=)
2. Только абсолютная разница, относительной толерантности нет
3. tol по умолчанию = DEFAULT_TOL (1e-6)
4. NaN никогда не близок ни к чему (включая NaN)

ВНИМАНИЕ: отношение "близко" не транзитивно:
    isclose(0.0, 0.6e-6) and isclose(0.6e-6, 1.2e-6), но not isclose(0.0, 1.2e-6)
"""

import math
from typing import Final

# =============================================================================
# TOLERANCE-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность по умолчанию для всех сравнений float
DEFAULT_TOL: Final[float] = 1e-6


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def resolve_tol(tol: float | None = None) -> float:
    """
    Разрешение толерантности: None → DEFAULT_TOL.

    Args:
        tol: Явная толерантность или None

    Returns:
        Положительная конечная толерантность

    Raises:
        ValueError: Если tol <= 0, NaN или Inf

    Examples:
        >>> resolve_tol(None)
        1e-06
        >>> resolve_tol(0.1)
        0.1
    """
    if tol is None:
        return DEFAULT_TOL

    if not math.isfinite(tol):
        raise ValueError(f"tol must be a finite number, got {tol}")

    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")

    return float(tol)


# =============================================================================
# СКАЛЯРНОЕ СРАВНЕНИЕ
# =============================================================================


def isclose(a: float, b: float, tol: float | None = None) -> bool:
    """
    Проверка, что два float равны с точностью до абсолютной толерантности.

    Алгоритм:
        abs(a - b) < tol

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: DEFAULT_TOL = 1e-6)

    Returns:
        True если abs(a - b) строго меньше tol

    Raises:
        ValueError: Если tol задан и не является положительным конечным числом

    Examples:
        >>> isclose(19.1, 19.12)
        False
        >>> isclose(19.1, 19.12, 0.1)
        True
        >>> isclose(19.12, 19.12)
        True
    """
    return abs(a - b) < resolve_tol(tol)
