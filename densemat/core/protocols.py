"""
Element-type protocols for densemat.

Matrix is generic over its element type. Rather than restricting elements to
concrete numeric types, each operation states the arithmetic it needs as a
structural Protocol, so ints, floats, Fractions, Decimals, complex numbers
and numpy scalars all qualify.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
third-party numeric types work without registration.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from densemat.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_MUL,
    CAPABILITY_SUB,
)

T = TypeVar('T')  # Element type


@runtime_checkable
class SupportsAdd(Protocol):
    """Element supports `self + other`."""

    def __add__(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsSub(Protocol):
    """Element supports `self - other`."""

    def __sub__(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsMul(Protocol):
    """Element supports `self * other`."""

    def __mul__(self, other: Any) -> Any:
        ...


@runtime_checkable
class Scalar(SupportsAdd, SupportsSub, SupportsMul, Protocol):
    """Element usable with every matrix operation."""


# Capability string -> protocol that satisfies it
CAPABILITY_PROTOCOLS: dict[str, type] = {
    CAPABILITY_ADD: SupportsAdd,
    CAPABILITY_SUB: SupportsSub,
    CAPABILITY_MUL: SupportsMul,
}


def supports(value: object, capability: str) -> bool:
    """
    Check whether `value` has the given arithmetic capability.

    Note:
        Unknown capabilities return False, never raise.
    """
    protocol = CAPABILITY_PROTOCOLS.get(capability)
    if protocol is None:
        return False
    return isinstance(value, protocol)
