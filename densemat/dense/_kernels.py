"""
Arithmetic kernels for dense row-major matrices.

These are the only implementations of add, sub and mul; every operator and
functional entry point funnels into them. Kernels take flat row-major
element sequences plus shapes, assume validation has already happened, and
append results to an output list in row-major order of the result.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any


ELEMENTWISE_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    'add': operator.add,
    'sub': operator.sub,
}


def elementwise(
    out: list[Any],
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    operation: str,
) -> None:
    """Append `lhs[i] <op> rhs[i]` for every i to `out`."""
    op = ELEMENTWISE_OPERATORS[operation]
    for i in range(len(lhs)):
        out.append(op(lhs[i], rhs[i]))


def matmul(
    out: list[Any],
    lhs: Sequence[Any],
    lhs_shape: tuple[int, int],
    rhs: Sequence[Any],
    rhs_shape: tuple[int, int],
) -> None:
    """
    Append the product `lhs @ rhs` to `out`.

    Each entry is the left fold of its dot-product terms starting from the
    first term, k = 0, 1, ..., n-1. There is no zero seed, so the inner
    dimension n must be at least 1 whenever the result is non-empty.
    """
    n_rows, inner = lhs_shape
    n_cols = rhs_shape[1]

    for r in range(n_rows):
        row_start = r * inner
        for c in range(n_cols):
            acc = lhs[row_start] * rhs[c]
            rhs_index = c + n_cols
            for k in range(1, inner):
                acc = acc + lhs[row_start + k] * rhs[rhs_index]
                rhs_index += n_cols
            out.append(acc)
