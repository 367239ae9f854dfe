"""
===============================================================================
ORIENTATION - Core Package
===============================================================================
Rotation algebra shared by the rest of the package.

Modules:
    quaternion : Quaternion value type with Bunge-Euler, angle-axis and
                 rotation-matrix conversions, composition and sampling
    constants  : Angle conversion factors and numerical tolerances
    errors     : Exception hierarchy rooted at OrientationError
===============================================================================
"""

from orientation.core.errors import (
    OrientationError, DegenerateInputError, NotNormalizedError,
    InvalidMatrixError
)
from orientation.core.quaternion import Quaternion

__all__ = [
    "Quaternion",
    "OrientationError",
    "DegenerateInputError",
    "NotNormalizedError",
    "InvalidMatrixError",
]
