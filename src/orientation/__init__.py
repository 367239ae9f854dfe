"""
orientation - Rotation algebra for crystal orientations

Converts between unit quaternions, Bunge (Z-X-Z) Euler angles, angle-axis
pairs and rotation matrices, composes rotations, rotates vectors and samples
uniformly random orientations.

    >>> from orientation import Quaternion
    >>> q = Quaternion.from_bunge_eulers([30.0, 10.0, 0.0], in_degrees=True)
    >>> phi1, PHI, phi2 = q.to_bunge_eulers(in_degrees=True)
"""

from orientation.core import (
    Quaternion, OrientationError, DegenerateInputError, NotNormalizedError,
    InvalidMatrixError
)

__version__ = "0.1.0"

__all__ = [
    "Quaternion",
    "OrientationError",
    "DegenerateInputError",
    "NotNormalizedError",
    "InvalidMatrixError",
]
