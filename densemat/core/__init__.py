"""
Core infrastructure for densemat.

This module provides the shared abstractions used by the dense matrix
implementation.

Key components:
    protocols: Element-type capability protocols
    capabilities: Capability strings and per-operation requirements
    exceptions: Exception hierarchy
    validation: Input validators
"""

from densemat.core.protocols import (
    SupportsAdd,
    SupportsSub,
    SupportsMul,
    Scalar,
    supports,
)
from densemat.core.exceptions import (
    DenseMatError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    MalformedConstructionError,
    CapabilityError,
)

__all__ = [
    # Protocols
    "SupportsAdd",
    "SupportsSub",
    "SupportsMul",
    "Scalar",
    "supports",
    # Exceptions
    "DenseMatError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "MalformedConstructionError",
    "CapabilityError",
]
