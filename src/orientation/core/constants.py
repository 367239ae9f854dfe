"""
===============================================================================
ORIENTATION - Numerical Constants
===============================================================================
Angle conversion factors and the floating-point tolerances shared by the
rotation conversions. All angles are handled internally in radians; degree
input/output is converted at the boundary of each public function.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
TWO_PI = 2.0 * np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# TOLERANCES
# =============================================================================
# Components below this magnitude select a gimbal-lock branch (PHI = 0 or pi)
GIMBAL_LOCK_TOLERANCE = 1e-10

# Norms below this are treated as zero (normalization, axis extraction)
NORM_TOLERANCE = 1e-12

# Maximum |norm - 1| accepted by operations that require a unit quaternion
UNIT_TOLERANCE = 1e-8

# Two quaternions closer than this under the difference metric are the same
# rotation
DIFFERENCE_TOLERANCE = 1e-8

# Maximum Frobenius norm of (R^T R - I) for an accepted rotation matrix
ORTHOGONALITY_TOLERANCE = 1e-6


def to_radians(angles, in_degrees: bool) -> np.ndarray:
    """
    Convert an angle (or array of angles) to radians when needed.

    Args:
        angles: Scalar or array-like of angles
        in_degrees: True if ``angles`` are given in degrees

    Returns:
        Angles in radians as a float64 array (0-d for scalar input)
    """
    angles = np.asarray(angles, dtype=np.float64)
    return angles * DEG2RAD if in_degrees else angles


def from_radians(angles, in_degrees: bool) -> np.ndarray:
    """Convert radians to degrees when ``in_degrees`` is True."""
    angles = np.asarray(angles, dtype=np.float64)
    return angles * RAD2DEG if in_degrees else angles
