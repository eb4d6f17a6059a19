"""
Domain value objects.

Contains the Vector value type and its serialisable model.
"""

from mathi.core.domain.vector import CROSS_DIM, Vector, add, cross, dot
from mathi.core.domain.vector_model import VectorModel

__all__ = [
    "CROSS_DIM",
    "Vector",
    "VectorModel",
    "add",
    "cross",
    "dot",
]
