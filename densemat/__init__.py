"""
densemat: generic dense matrices for Python.

A small, exact matrix type over any numeric element type (int, float,
Fraction, Decimal, complex, numpy scalars), with shape-checked addition,
subtraction and multiplication and a plain-text rendering.

Submodules:
    core: Exceptions, validation, element-type protocols
    dense: The Matrix type and functional arithmetic
"""

__version__ = "0.1.0"

from densemat.core.exceptions import (
    DenseMatError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    MalformedConstructionError,
    CapabilityError,
)
from densemat.dense import Matrix, add, sub, mul, matmul

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "sub",
    "mul",
    "matmul",
    "DenseMatError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "MalformedConstructionError",
    "CapabilityError",
]
