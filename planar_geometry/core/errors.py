"""
Error types for planar geometry evaluation.

- InvalidInputError: malformed geometry, detected eagerly at construction
- ComputationError: arithmetic failure or non-finite result during a query
"""


class GeometryError(Exception):
    """Base class for all planar geometry errors."""


class InvalidInputError(GeometryError, ValueError):
    """Raised when a point, polygon or request document is malformed."""


class ComputationError(GeometryError, ArithmeticError):
    """Raised when a query cannot produce a finite result."""
