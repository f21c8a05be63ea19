"""
Exception hierarchy for densemat.

All exceptions inherit from DenseMatError to allow catching any
library-specific error. Shape problems are recoverable exceptions, never
process aborts, and no operation returns a partial result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatError(Exception):
    """Base exception for all densemat errors."""
    pass


class ValidationError(DenseMatError):
    """
    Input validation failed.

    Raised when user-provided inputs (shapes, element sequences, operands)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a shape is invalid on its own, or when an operation cannot
    be carried out for the shapes involved.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Addition and subtraction need equal shapes; multiplication needs the
    left column count to equal the right row count.

    Attributes:
        operation: Operation name ('add', 'sub' or 'mul')
        lhs_shape: (row, col) of the left operand
        rhs_shape: (row, col) of the right operand
        expected: The dimension(s) the right operand needed to have
        actual: The dimension(s) the right operand actually had
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        lhs_shape: tuple[int, int] | None = None,
        rhs_shape: tuple[int, int] | None = None,
        expected: object = None,
        actual: object = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        self.expected = expected
        self.actual = actual


class MalformedConstructionError(DimensionError):
    """
    Element count does not match the declared shape.

    Raised eagerly by the filled constructor, and when an incomplete matrix
    (e.g. a partially filled accumulator) is used as an operand.

    Attributes:
        shape: Declared (row, col)
        length: Number of elements actually held
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        length: int | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.length = length

    @property
    def expected_length(self) -> int | None:
        """row * col for the declared shape, if known."""
        if self.shape is None:
            return None
        return self.shape[0] * self.shape[1]


class CapabilityError(ValidationError):
    """
    An element lacks an arithmetic capability the operation needs.

    Attributes:
        operation: Operation name ('add', 'sub' or 'mul')
        capability: Missing capability string (see core.capabilities)
        operand: 'lhs' or 'rhs'
        index: Row-major index of the offending element
        element_type: Name of the offending element's type
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        capability: str | None = None,
        operand: str | None = None,
        index: int | None = None,
        element_type: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.capability = capability
        self.operand = operand
        self.index = index
        self.element_type = element_type
