"""
Dense matrix module.

Provides a fixed-shape, row-major dense matrix over any element type that
supports the arithmetic in use.

Public API:
    Matrix          - The matrix type (operators +, -, *, @, +=, -=)
    add(lhs, rhs)   - Elementwise sum
    sub(lhs, rhs)   - Elementwise difference
    mul(lhs, rhs)   - Matrix product (alias: matmul)
"""

from densemat.dense.matrix import Matrix
from densemat.dense.operations import add, sub, mul, matmul

__all__ = [
    "Matrix",
    "add",
    "sub",
    "mul",
    "matmul",
]
