"""
Core math modules для mathi

Скалярный компаратор с толерантностью и поэлементные сравнения.
"""

# Tolerance
from mathi.core.math.tolerance import (
    DEFAULT_TOL,
    isclose,
    resolve_tol,
)

# Element-wise comparison
from mathi.core.math.comparison import (
    ComparisonOp,
    Condition,
    all_of,
    any_of,
    as_condition,
    compare,
    compare_scalar,
)

__all__ = [
    # Tolerance - Constants
    "DEFAULT_TOL",
    # Tolerance - Functions
    "isclose",
    "resolve_tol",
    # Comparison - Types
    "ComparisonOp",
    "Condition",
    # Comparison - Functions
    "all_of",
    "any_of",
    "as_condition",
    "compare",
    "compare_scalar",
]
