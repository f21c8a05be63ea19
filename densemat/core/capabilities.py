"""
Capability string constants for densemat.

This module is the SINGLE SOURCE OF TRUTH for capability strings and for
which capabilities each matrix operation requires of its elements.
Import from here, never use raw strings.

Usage:
    from densemat.core.capabilities import required_capabilities

    for capability in required_capabilities('mul'):
        ...
"""

# Element supports `a + b`
CAPABILITY_ADD = 'add'

# Element supports `a - b`
CAPABILITY_SUB = 'sub'

# Element supports `a * b`
CAPABILITY_MUL = 'mul'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ADD,
    CAPABILITY_SUB,
    CAPABILITY_MUL,
})

# Operation name -> capabilities every element of both operands needs.
# Multiplication accumulates dot products, so it needs add as well as mul.
OPERATION_CAPABILITIES: dict[str, tuple[str, ...]] = {
    'add': (CAPABILITY_ADD,),
    'sub': (CAPABILITY_SUB,),
    'mul': (CAPABILITY_MUL, CAPABILITY_ADD),
}


def required_capabilities(operation: str) -> tuple[str, ...]:
    """Capabilities needed by `operation`; unknown operations raise KeyError."""
    try:
        return OPERATION_CAPABILITIES[operation]
    except KeyError:
        raise KeyError(
            f"Unknown operation {operation!r}; "
            f"known: {sorted(OPERATION_CAPABILITIES)}"
        ) from None


__all__ = [
    'CAPABILITY_ADD',
    'CAPABILITY_SUB',
    'CAPABILITY_MUL',
    'ALL_CAPABILITIES',
    'OPERATION_CAPABILITIES',
    'required_capabilities',
]
