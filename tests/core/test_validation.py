"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: integer, non-negative, bool rejection
    - check_length: element count vs row * col
    - check_same_shape / check_inner_dimension: operand compatibility
    - check_capabilities: per-element arithmetic support
    - check_array / check_2d: numpy conversion and dimensionality
"""

from fractions import Fraction

import numpy as np
import pytest

from densemat.core.exceptions import (
    CapabilityError,
    DimensionError,
    MalformedConstructionError,
    ShapeMismatchError,
    ValidationError,
)
from densemat.core.validation import (
    check_2d,
    check_array,
    check_capabilities,
    check_dimension,
    check_inner_dimension,
    check_length,
    check_same_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_accepts_int(self):
        assert check_dimension(3, "row") == 3

    def test_accepts_zero(self):
        assert check_dimension(0, "col") == 0

    def test_numpy_integer_returned_as_int(self):
        result = check_dimension(np.int64(4), "row")
        assert result == 4
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(DimensionError, match="row: must be non-negative"):
            check_dimension(-1, "row")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="col: expected a non-negative integer"):
            check_dimension(2.0, "col")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_dimension(True, "row")


# ═══════════════════════════════════════════════════════════════════════
# check_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckLength:

    def test_matching_length_passes(self):
        check_length(6, (2, 3), "values")

    def test_empty_shape_passes(self):
        check_length(0, (0, 5), "values")

    def test_short_raises_with_diagnostics(self):
        with pytest.raises(MalformedConstructionError) as exc_info:
            check_length(5, (2, 3), "values")
        err = exc_info.value
        assert err.shape == (2, 3)
        assert err.length == 5
        assert "needs 6 elements, got 5" in str(err)

    def test_long_raises(self):
        with pytest.raises(MalformedConstructionError):
            check_length(7, (2, 3), "values")


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_equal_shapes_pass(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_row_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_same_shape((2, 3), (3, 3), "add")
        err = exc_info.value
        assert err.operation == "add"
        assert err.expected == (2, 3)
        assert err.actual == (3, 3)

    def test_col_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="sub: operands must have equal shapes"):
            check_same_shape((2, 3), (2, 2), "sub")


class TestCheckInnerDimension:

    def test_compatible_passes(self):
        check_inner_dimension((2, 3), (3, 5))

    def test_transposed_shapes_pass(self):
        check_inner_dimension((4, 1), (1, 4))

    def test_mismatch_reports_inner_dimensions(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_inner_dimension((2, 3), (2, 3))
        err = exc_info.value
        assert err.operation == "mul"
        assert err.expected == 3
        assert err.actual == 2
        assert err.lhs_shape == (2, 3)
        assert err.rhs_shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_capabilities
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCapabilities:

    def test_numeric_types_pass(self):
        values = [1, 2.5, Fraction(1, 3), complex(1, 2), np.float32(1.5)]
        for operation in ("add", "sub", "mul"):
            check_capabilities(values, operation, "lhs")

    def test_none_rejected_for_add(self):
        with pytest.raises(CapabilityError) as exc_info:
            check_capabilities([1, None, 3], "add", "rhs")
        err = exc_info.value
        assert err.index == 1
        assert err.operand == "rhs"
        assert err.capability == "add"
        assert err.element_type == "NoneType"

    def test_strings_support_add_but_not_sub(self):
        check_capabilities(["a", "b"], "add", "lhs")
        with pytest.raises(CapabilityError, match="does not support 'sub'"):
            check_capabilities(["a", "b"], "sub", "lhs")

    def test_empty_sequence_passes(self):
        check_capabilities([], "mul", "lhs")

    def test_unknown_operation_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown operation"):
            check_capabilities([1], "div", "lhs")


# ═══════════════════════════════════════════════════════════════════════
# check_array / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_dtype_preserved(self):
        result = check_array([[1, 2], [3, 4]], "array")
        assert np.issubdtype(result.dtype, np.integer)

    def test_float_passthrough(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "array").dtype == np.float64

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "array")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "array")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.array([1, 2, 3]), "array")

    def test_check_2d_accepts_2d(self):
        check_2d(np.zeros((2, 2)), "array")
