"""
Exception types raised by the rotation conversions.

Every error derives from ``OrientationError``, itself a ``ValueError``, so
callers that already guard numeric input with ``except ValueError`` keep
working.
"""


class OrientationError(ValueError):
    """Base class for invalid input to an orientation operation."""


class DegenerateInputError(OrientationError):
    """
    The operation would divide by a (near-)zero quantity.

    Raised when normalizing a zero quaternion, when extracting the axis of
    the identity rotation, when an angle-axis pair has a zero axis, or when
    a matrix pivot is not positive.
    """


class NotNormalizedError(OrientationError):
    """A unit quaternion was required but the norm deviates from 1."""

    def __init__(self, norm: float, tolerance: float) -> None:
        self.norm = norm
        self.tolerance = tolerance
        super().__init__(
            f"Quaternion is not normalized (norm = {norm:.12f}, "
            f"tolerance = {tolerance:.1e}). Call normalize() first."
        )


class InvalidMatrixError(OrientationError):
    """Input matrix is not a proper rotation (orthonormal, det = +1)."""
