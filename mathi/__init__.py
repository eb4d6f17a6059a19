"""
mathi - small vector math library over double-precision floats.
"""

from mathi.core.domain import CROSS_DIM, Vector, VectorModel, add, cross, dot
from mathi.core.errors import (
    DimensionError,
    SizeMismatchError,
    VectorError,
    VectorIndexError,
)
from mathi.core.math import (
    DEFAULT_TOL,
    ComparisonOp,
    all_of,
    any_of,
    compare,
    compare_scalar,
    isclose,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "CROSS_DIM",
    "DEFAULT_TOL",
    # Types
    "ComparisonOp",
    "Vector",
    "VectorModel",
    # Errors
    "DimensionError",
    "SizeMismatchError",
    "VectorError",
    "VectorIndexError",
    # Functions
    "add",
    "all_of",
    "any_of",
    "compare",
    "compare_scalar",
    "cross",
    "dot",
    "isclose",
]
