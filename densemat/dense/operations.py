"""
Functional entry points for matrix arithmetic.

add(), sub() and mul() are equivalent to the `+`, `-` and `*` operators
but reject non-Matrix operands with a message naming the operand, instead
of Python's generic "unsupported operand type(s)" error.
"""

from __future__ import annotations

from typing import Any

from densemat.dense.matrix import Matrix


def _ensure_matrix(value: Any, name: str, operation: str) -> Matrix[Any]:
    """Reject anything that is not a Matrix."""
    if not isinstance(value, Matrix):
        raise TypeError(
            f"{operation}: {name} must be a Matrix, got {type(value).__name__}"
        )
    return value


def add(lhs: Matrix[Any], rhs: Matrix[Any]) -> Matrix[Any]:
    """
    Elementwise sum of two equally shaped matrices.

    Parameters
    ----------
    lhs, rhs : Matrix
        Operands; neither is modified.

    Returns
    -------
    Matrix of the common shape.

    Raises
    ------
    ShapeMismatchError
        If the shapes differ.
    """
    return _ensure_matrix(lhs, "lhs", "add") + _ensure_matrix(rhs, "rhs", "add")


def sub(lhs: Matrix[Any], rhs: Matrix[Any]) -> Matrix[Any]:
    """
    Elementwise difference `lhs - rhs` of two equally shaped matrices.

    Raises
    ------
    ShapeMismatchError
        If the shapes differ.
    """
    return _ensure_matrix(lhs, "lhs", "sub") - _ensure_matrix(rhs, "rhs", "sub")


def mul(lhs: Matrix[Any], rhs: Matrix[Any]) -> Matrix[Any]:
    """
    Matrix product of an (m, n) and an (n, p) matrix.

    Returns
    -------
    Matrix of shape (m, p).

    Raises
    ------
    ShapeMismatchError
        If lhs.col != rhs.row.
    """
    return _ensure_matrix(lhs, "lhs", "mul") * _ensure_matrix(rhs, "rhs", "mul")


matmul = mul
