"""
Input validation utilities for densemat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Validators work on shapes and sequences, not on Matrix, so the
      matrix module can depend on them without an import cycle
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.capabilities import required_capabilities
from densemat.core.exceptions import (
    CapabilityError,
    DimensionError,
    MalformedConstructionError,
    ShapeMismatchError,
    ValidationError,
)
from densemat.core.protocols import supports


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer (bools are rejected)
        DimensionError: If value is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise DimensionError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_length(length: int, shape: tuple[int, int], name: str) -> None:
    """
    Verify an element count matches row * col.

    Args:
        length: Number of elements held
        shape: Declared (row, col)
        name: Parameter name for error messages

    Raises:
        MalformedConstructionError: If length != row * col
    """
    row, col = shape
    if length != row * col:
        raise MalformedConstructionError(
            f"{name}: shape ({row}, {col}) needs {row * col} elements, got {length}",
            shape=shape,
            length=length,
        )


def check_same_shape(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have equal shapes.

    Args:
        lhs_shape: (row, col) of the left operand
        rhs_shape: (row, col) of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ in rows or columns
    """
    if lhs_shape != rhs_shape:
        raise ShapeMismatchError(
            f"{operation}: operands must have equal shapes, "
            f"got lhs {lhs_shape} and rhs {rhs_shape}",
            operation=operation,
            lhs_shape=lhs_shape,
            rhs_shape=rhs_shape,
            expected=lhs_shape,
            actual=rhs_shape,
        )


def check_inner_dimension(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str = 'mul',
) -> None:
    """
    Verify lhs columns equal rhs rows for a matrix product.

    Args:
        lhs_shape: (row, col) of the left operand
        rhs_shape: (row, col) of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If lhs.col != rhs.row
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise ShapeMismatchError(
            f"{operation}: lhs has {lhs_shape[1]} columns but rhs has "
            f"{rhs_shape[0]} rows (lhs {lhs_shape}, rhs {rhs_shape})",
            operation=operation,
            lhs_shape=lhs_shape,
            rhs_shape=rhs_shape,
            expected=lhs_shape[1],
            actual=rhs_shape[0],
        )


def check_capabilities(values: Sequence[Any], operation: str, operand: str) -> None:
    """
    Verify every element supports the arithmetic `operation` needs.

    Args:
        values: Elements in row-major order
        operation: 'add', 'sub' or 'mul'
        operand: 'lhs' or 'rhs', for error messages

    Raises:
        CapabilityError: On the first element lacking a capability
    """
    capabilities = required_capabilities(operation)
    for index, value in enumerate(values):
        for capability in capabilities:
            if not supports(value, capability):
                type_name = type(value).__name__
                raise CapabilityError(
                    f"{operation}: {operand} element {index} of type {type_name} "
                    f"does not support '{capability}'",
                    operation=operation,
                    capability=capability,
                    operand=operand,
                    index=index,
                    element_type=type_name,
                )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a float-only pipeline, the dtype is preserved so integer
    matrices stay exact.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric (or bool) dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)
