"""
===============================================================================
ORIENTATION - Quaternion Rotation Algebra
===============================================================================

Quaternion implementation for describing crystal orientations and converting
between the equivalent representations of a 3-D rotation: unit quaternions,
Bunge-Euler angles, angle-axis pairs and rotation matrices.

Convention
----------
Scalar-first components:

    q = [w, x, y, z] = w + x*i + y*j + z*k

Rotations are ACTIVE. A unit quaternion rotates a vector v by the sandwich
product

    v' = q * v * q_conjugate

where v is embedded as the pure quaternion [0, v_x, v_y, v_z]. The type does
NOT enforce unit norm: components are stored exactly as given, and callers
normalize explicitly after operations that can make the norm drift
(repeated multiplication, scaling). Operations that only make sense for a
rotation (to_matrix, to_angle_axis, to_bunge_eulers, rotate_vector) check the
norm and raise NotNormalizedError instead of normalizing silently.

q and -q describe the same rotation (double cover). Rotation equivalence is
therefore measured with difference(), which checks both signs; the ``==``
operator compares components exactly.

Euler Angle Convention
----------------------
Bunge (Z-X-Z) angles (phi1, PHI, phi2), the usual convention for texture and
EBSD work:
    1. phi1 about Z
    2. PHI  about the rotated X'
    3. phi2 about the twice-rotated Z''

so that q = q_z(phi1) * q_x(PHI) * q_z(phi2). Every function that accepts or
returns angles takes an explicit ``in_degrees`` flag.

Instances are plain values with no shared state. Only the methods named
``*_in_place`` mutate.

References
----------
    [1] Melcher, Unser, Reichhardt, Nestler, Poetschke, Selzer, "Conversion
        of EBSD data by a quaternion based algorithm to be used for grain
        structure simulations", Technische Mechanik 30 (2010) 401-413.
    [2] Shepperd, "Quaternion from rotation matrix", JGCD 1(3), 1978.
    [3] Shoemake, "Uniform Random Rotations", Graphics Gems III, 1992.

===============================================================================
"""

import logging
from typing import Optional, Tuple, Union

import numpy as np

from orientation.core.constants import (
    GIMBAL_LOCK_TOLERANCE, NORM_TOLERANCE, UNIT_TOLERANCE,
    DIFFERENCE_TOLERANCE, ORTHOGONALITY_TOLERANCE, PI, TWO_PI,
    to_radians, from_radians
)
from orientation.core.errors import (
    DegenerateInputError, NotNormalizedError, InvalidMatrixError
)

logger = logging.getLogger(__name__)


class Quaternion:
    """
    Quaternion q = w + x*i + y*j + z*k used to represent a 3-D rotation.

    A unit quaternion parameterizes a rotation by angle theta about the unit
    axis n as:

        q = [cos(theta/2), sin(theta/2) * n_x, sin(theta/2) * n_y, sin(theta/2) * n_z]

    Attributes
    ----------
    w : float
        Scalar (real) component, cos(theta/2) for a rotation.
    x, y, z : float
        Vector (imaginary) components, sin(theta/2) * n.

    Notes
    -----
    Instances hash by their components. normalize_in_place(),
    conjugate_in_place() and scale_in_place() change the components and
    therefore the hash: do not call them on a quaternion stored in a set or
    used as a dict key, or it can no longer be found there. Use the
    value-returning normalize(), conjugate() and scale() instead.

    Examples
    --------
    >>> q = Quaternion.from_bunge_eulers([45.0, 0.0, 0.0], in_degrees=True)
    >>> q.rotate_vector(np.array([1.0, 0.0, 0.0]))
    array([0.70710678, 0.70710678, 0.        ])
    """

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        """
        Store the four components (scalar first) without normalizing.

        Parameters
        ----------
        w : float
            Scalar part.
        x, y, z : float
            i, j and k components of the vector part.
        """
        self._q = np.array([w, x, y, z], dtype=np.float64)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def w(self) -> float:
        """Scalar (real) part of the quaternion."""
        return float(self._q[0])

    @property
    def x(self) -> float:
        """First imaginary component (i-axis)."""
        return float(self._q[1])

    @property
    def y(self) -> float:
        """Second imaginary component (j-axis)."""
        return float(self._q[2])

    @property
    def z(self) -> float:
        """Third imaginary component (k-axis)."""
        return float(self._q[3])

    @property
    def vector(self) -> np.ndarray:
        """Vector part [x, y, z] as a new 3-element array."""
        return self._q[1:4].copy()

    @property
    def norm(self) -> float:
        """
        Euclidean norm sqrt(w^2 + x^2 + y^2 + z^2).

        Defined for any four reals; the zero quaternion has norm 0.
        """
        return float(np.sqrt(np.dot(self._q, self._q)))

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    def _require_unit(self) -> None:
        """Raise NotNormalizedError unless |norm - 1| <= UNIT_TOLERANCE."""
        n = self.norm
        if abs(n - 1.0) > UNIT_TOLERANCE:
            raise NotNormalizedError(n, UNIT_TOLERANCE)

    def _checked_norm(self) -> float:
        n = self.norm
        if n < NORM_TOLERANCE:
            raise DegenerateInputError(
                f"Cannot normalize near-zero quaternion (norm = {n:.2e})."
            )
        return n

    # =========================================================================
    # NORMALIZATION, CONJUGATE, SCALING
    # =========================================================================

    def normalize(self) -> 'Quaternion':
        """
        Return a new quaternion with unit norm.

        Multiplication never renormalizes its result, so call this after
        long chains of products to remove accumulated floating-point drift.

        Returns
        -------
        Quaternion
            q / |q|.

        Raises
        ------
        DegenerateInputError
            If the norm is below NORM_TOLERANCE.
        """
        q = self._q / self._checked_norm()
        return Quaternion(q[0], q[1], q[2], q[3])

    def normalize_in_place(self) -> 'Quaternion':
        """Divide this quaternion by its norm; returns self for chaining."""
        self._q /= self._checked_norm()
        return self

    def conjugate(self) -> 'Quaternion':
        """
        Return the conjugate [w, -x, -y, -z].

        For a unit quaternion the conjugate is the inverse rotation.
        """
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def conjugate_in_place(self) -> 'Quaternion':
        """Negate the vector part of this quaternion; returns self."""
        self._q[1:4] = -self._q[1:4]
        return self

    def scale(self, s: float) -> 'Quaternion':
        """
        Return a new quaternion with every component multiplied by ``s``.

        This is not a rotation-preserving operation unless s = +/-1.
        """
        q = self._q * float(s)
        return Quaternion(q[0], q[1], q[2], q[3])

    def scale_in_place(self, s: float) -> 'Quaternion':
        """Multiply every component of this quaternion by ``s``; returns self."""
        self._q *= float(s)
        return self

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Multiply this quaternion by another (Hamilton product).

        The product represents composition of rotations: the result rotates
        a vector first by ``other`` and then by ``self``.

            (Aw + Ax*i + Ay*j + Az*k) * (Bw + Bx*i + By*j + Bz*k) =

            (Aw*Bw - Ax*Bx - Ay*By - Az*Bz) +
            (Aw*Bx + Ax*Bw + Ay*Bz - Az*By) i +
            (Aw*By - Ax*Bz + Ay*Bw + Az*Bx) j +
            (Aw*Bz + Ax*By - Ay*Bx + Az*Bw) k

        Non-commutative and associative. The result is not normalized.

        Parameters
        ----------
        other : Quaternion
            The right-hand quaternion in the product.

        Returns
        -------
        Quaternion
            The Hamilton product self * other.
        """
        aw, ax, ay, az = self._q
        bw, bx, by, bz = other._q

        w = aw * bw - ax * bx - ay * by - az * bz
        x = aw * bx + ax * bw + ay * bz - az * by
        y = aw * by - ax * bz + ay * bw + az * bx
        z = aw * bz + ax * by - ay * bx + az * bw

        return Quaternion(w, x, y, z)

    def difference(self, other: 'Quaternion') -> float:
        """
        Distance between two quaternions that respects the double cover.

        Sums the absolute component differences for both q - p and q + p and
        returns the smaller total, so q and -q are at distance 0.

        Parameters
        ----------
        other : Quaternion
            Quaternion to compare against.

        Returns
        -------
        float
            min(sum|q_i - p_i|, sum|q_i + p_i|).
        """
        delta_direct = np.sum(np.abs(self._q - other._q))
        delta_flipped = np.sum(np.abs(self._q + other._q))
        return float(min(delta_direct, delta_flipped))

    def is_close(self, other: 'Quaternion',
                 tolerance: float = DIFFERENCE_TOLERANCE) -> bool:
        """True if both quaternions describe the same rotation within tolerance."""
        return self.difference(other) < tolerance

    # =========================================================================
    # ROTATION OPERATIONS
    # =========================================================================

    def rotate_vector(self, v: np.ndarray) -> np.ndarray:
        """
        Rotate a 3-D vector by this quaternion.

        Evaluates the sandwich product v' = q * v * q_conjugate in closed
        form, without building the intermediate pure quaternion. The
        expansion equals q.multiply(Quaternion(0, *v)).multiply(q.conjugate())
        term by term; for a quaternion of norm n it would scale the rotated
        vector by n^2, which is why a unit quaternion is required.

        Parameters
        ----------
        v : np.ndarray
            3-element vector to rotate.

        Returns
        -------
        np.ndarray
            Rotated 3-element vector.

        Raises
        ------
        NotNormalizedError
            If the quaternion is not of unit norm.
        """
        v = np.asarray(v, dtype=np.float64)
        if v.shape != (3,):
            raise ValueError(f"Vector must have 3 elements, got shape {v.shape}")
        self._require_unit()

        w, x, y, z = self._q
        vx, vy, vz = v

        return np.array([
            w * w * vx + 2 * y * w * vz - 2 * z * w * vy + x * x * vx
            + 2 * y * x * vy + 2 * z * x * vz - z * z * vx - y * y * vx,
            2 * x * y * vx + y * y * vy + 2 * z * y * vz + 2 * w * z * vx
            - z * z * vy + w * w * vy - 2 * x * w * vz - x * x * vy,
            2 * x * z * vx + 2 * y * z * vy + z * z * vz - 2 * w * y * vx
            - y * y * vz + 2 * w * x * vy - x * x * vz + w * w * vz,
        ], dtype=np.float64)

    # =========================================================================
    # BUNGE-EULER ANGLES
    # =========================================================================

    @staticmethod
    def from_bunge_eulers(angles, in_degrees: bool) -> 'Quaternion':
        """
        Create a quaternion from Bunge (Z-X-Z) Euler angles.

        The closed form is the expansion of

            q = q_z(phi1) * q_x(PHI) * q_z(phi2)

        with half-angle single-axis quaternions q_z(a) = [cos(a/2), 0, 0, sin(a/2)]
        and q_x(a) = [cos(a/2), sin(a/2), 0, 0].

        Parameters
        ----------
        angles : array-like
            (phi1, PHI, phi2).
        in_degrees : bool
            True if the angles are given in degrees, False for radians.

        Returns
        -------
        Quaternion
            Unit quaternion for the rotation.

        Notes
        -----
        For PHI = 0 or PHI = pi only phi1 + phi2 (resp. phi1 - phi2) is
        determined, so to_bunge_eulers() returns the total in phi1 and
        phi2 = 0. The quaternion round trip still holds; the angle triple
        round trip does not, and is not expected to.
        """
        eulers = to_radians(angles, in_degrees)
        if eulers.shape != (3,):
            raise ValueError(
                f"Bunge-Euler angles must have 3 elements, got shape {eulers.shape}"
            )

        c = np.cos(eulers / 2.0)
        s = np.sin(eulers / 2.0)

        w = c[0] * c[1] * c[2] - s[0] * c[1] * s[2]
        x = c[0] * s[1] * c[2] + s[0] * s[1] * s[2]
        y = -c[0] * s[1] * s[2] + s[0] * s[1] * c[2]
        z = c[0] * c[1] * s[2] + s[0] * c[1] * c[2]

        return Quaternion(w, x, y, z)

    def to_bunge_eulers(self, in_degrees: bool) -> np.ndarray:
        """
        Convert to Bunge (Z-X-Z) Euler angles (phi1, PHI, phi2).

        Two gimbal-lock configurations are handled explicitly:

            x ~ 0 and y ~ 0 :  PHI = 0,  phi1 = atan2(2wz, w^2 - z^2), phi2 = 0
            w ~ 0 and z ~ 0 :  PHI = pi, phi1 = atan2(2xy, x^2 - y^2), phi2 = 0

        Otherwise, with chi = sqrt((w^2 + z^2)(x^2 + y^2)):

            phi1 = atan2((wy + xz) / 2chi, (wx - yz) / 2chi)
            PHI  = atan2(2chi, w^2 + z^2 - x^2 - y^2)
            phi2 = atan2((zx - yw) / 2chi, (wx + yz) / 2chi)

        Parameters
        ----------
        in_degrees : bool
            Return degrees if True, radians if False.

        Returns
        -------
        np.ndarray
            (phi1, PHI, phi2). PHI is in [0, pi]; phi1 and phi2 in (-pi, pi].

        Raises
        ------
        NotNormalizedError
            If the quaternion is not of unit norm.
        """
        self._require_unit()
        w, x, y, z = self._q
        eulers = np.zeros(3)

        if abs(x) < GIMBAL_LOCK_TOLERANCE and abs(y) < GIMBAL_LOCK_TOLERANCE:
            logger.debug("Gimbal lock with PHI = 0; phi2 folded into phi1")
            eulers[0] = np.arctan2(2.0 * w * z, w * w - z * z)
        elif abs(w) < GIMBAL_LOCK_TOLERANCE and abs(z) < GIMBAL_LOCK_TOLERANCE:
            logger.debug("Gimbal lock with PHI = pi; phi2 folded into phi1")
            eulers[0] = np.arctan2(2.0 * x * y, x * x - y * y)
            eulers[1] = PI
        else:
            chi = np.sqrt((w * w + z * z) * (x * x + y * y))

            eulers[0] = np.arctan2((w * y + x * z) / 2.0 / chi,
                                   (w * x - y * z) / 2.0 / chi)
            eulers[1] = np.arctan2(2.0 * chi,
                                   w * w + z * z - (x * x + y * y))
            eulers[2] = np.arctan2((z * x - y * w) / 2.0 / chi,
                                   (w * x + y * z) / 2.0 / chi)

        return from_radians(eulers, in_degrees)

    # =========================================================================
    # ANGLE-AXIS PAIR
    # =========================================================================

    @staticmethod
    def from_angle_axis(angle: float, axis, in_degrees: bool) -> 'Quaternion':
        """
        Create a quaternion from a rotation angle and axis.

            q = [cos(angle/2), sin(angle/2) * n],   n = axis / |axis|

        Parameters
        ----------
        angle : float
            Rotation angle.
        axis : array-like
            3-element rotation axis; need not be unit length.
        in_degrees : bool
            True if ``angle`` is in degrees, False for radians.

        Returns
        -------
        Quaternion
            Unit quaternion for the rotation.

        Raises
        ------
        DegenerateInputError
            If the axis has near-zero length.
        """
        axis = np.asarray(axis, dtype=np.float64)
        if axis.shape != (3,):
            raise ValueError(f"Rotation axis must have 3 elements, got shape {axis.shape}")

        axis_norm = np.linalg.norm(axis)
        if axis_norm < NORM_TOLERANCE:
            raise DegenerateInputError(
                "Rotation axis has near-zero magnitude; "
                "cannot define a rotation about a zero vector."
            )
        n = axis / axis_norm

        half_angle = float(to_radians(angle, in_degrees)) / 2.0
        sin_half = np.sin(half_angle)

        return Quaternion(np.cos(half_angle),
                          sin_half * n[0], sin_half * n[1], sin_half * n[2])

    def to_angle_axis(self, in_degrees: bool) -> Tuple[float, np.ndarray]:
        """
        Convert to an angle-axis pair.

            angle = 2 * arccos(w)          in [0, 2*pi]
            axis  = [x, y, z] / |[x, y, z]|

        The arccos argument is clipped to [-1, 1] so a quaternion that has
        drifted slightly past unit norm does not produce NaN.

        Parameters
        ----------
        in_degrees : bool
            Return the angle in degrees if True, radians if False.

        Returns
        -------
        tuple of (float, np.ndarray)
            (angle, axis) with ``axis`` a unit 3-vector.

        Raises
        ------
        NotNormalizedError
            If the quaternion is not of unit norm.
        DegenerateInputError
            For the identity rotation, whose axis is undefined.
        """
        self._require_unit()

        vec = self.vector
        vec_norm = np.linalg.norm(vec)
        if vec_norm < NORM_TOLERANCE:
            raise DegenerateInputError(
                "Rotation axis is undefined for the identity rotation."
            )

        angle = 2.0 * np.arccos(np.clip(self.w, -1.0, 1.0))
        return float(from_radians(angle, in_degrees)), vec / vec_norm

    # =========================================================================
    # ROTATION MATRIX
    # =========================================================================

    @staticmethod
    def from_matrix(m: np.ndarray) -> 'Quaternion':
        """
        Create a quaternion from a 3x3 rotation matrix.

        Uses Shepperd's pivoting. When the trace is positive, w is the
        largest component and is extracted first:

            s = 2 * sqrt(trace + 1),  w = s / 4,  x = (r21 - r12) / s, ...

        Otherwise the derivation pivots on the largest diagonal entry
        (r00, r11 or r22). The trace-only formula loses all precision near
        180 degree rotations, where trace + 1 approaches 0.

        Parameters
        ----------
        m : np.ndarray
            3x3 proper orthogonal matrix (R^T R = I, det = +1).

        Returns
        -------
        Quaternion
            Unit quaternion for the rotation.

        Raises
        ------
        ValueError
            If ``m`` is not 3x3.
        InvalidMatrixError
            If ``m`` is not orthonormal or has a negative determinant.
        DegenerateInputError
            If the selected pivot is not positive.
        """
        r = np.asarray(m, dtype=np.float64)
        if r.shape != (3, 3):
            raise ValueError(f"Rotation matrix must be 3x3, got shape {r.shape}")

        orthogonality_error = np.linalg.norm(r.T @ r - np.eye(3))
        if orthogonality_error > ORTHOGONALITY_TOLERANCE:
            raise InvalidMatrixError(
                f"Input matrix is not orthogonal (error = {orthogonality_error:.2e})."
            )
        if np.linalg.det(r) < 0.0:
            raise InvalidMatrixError(
                "Input matrix is a reflection (det = -1), not a rotation."
            )

        trace = np.trace(r)

        if trace > 0.0:
            s = 2.0 * np.sqrt(trace + 1.0)
            w = 0.25 * s
            x = (r[2, 1] - r[1, 2]) / s
            y = (r[0, 2] - r[2, 0]) / s
            z = (r[1, 0] - r[0, 1]) / s
            return Quaternion(w, x, y, z)

        if r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
            pivot, t = 'r00', 1.0 + r[0, 0] - r[1, 1] - r[2, 2]
        elif r[1, 1] > r[2, 2]:
            pivot, t = 'r11', 1.0 - r[0, 0] + r[1, 1] - r[2, 2]
        else:
            pivot, t = 'r22', 1.0 - r[0, 0] - r[1, 1] + r[2, 2]

        if t <= NORM_TOLERANCE:
            raise DegenerateInputError(
                f"Matrix pivot {pivot} is not positive (t = {t:.2e})."
            )
        logger.debug("Non-positive trace %.6f, pivoting on %s", trace, pivot)
        s = 2.0 * np.sqrt(t)

        if pivot == 'r00':
            w = (r[2, 1] - r[1, 2]) / s
            x = 0.25 * s
            y = (r[0, 1] + r[1, 0]) / s
            z = (r[2, 0] + r[0, 2]) / s
        elif pivot == 'r11':
            w = (r[0, 2] - r[2, 0]) / s
            x = (r[0, 1] + r[1, 0]) / s
            y = 0.25 * s
            z = (r[1, 2] + r[2, 1]) / s
        else:
            w = (r[1, 0] - r[0, 1]) / s
            x = (r[2, 0] + r[0, 2]) / s
            y = (r[1, 2] + r[2, 1]) / s
            z = 0.25 * s

        return Quaternion(w, x, y, z)

    def to_matrix(self) -> np.ndarray:
        """
        Convert to a 3x3 rotation matrix.

            R = | 1-2(y^2+z^2)    2(xy-wz)      2(xz+wy)   |
                | 2(xy+wz)      1-2(x^2+z^2)    2(yz-wx)   |
                | 2(xz-wy)      2(yz+wx)      1-2(x^2+y^2) |

        so that R @ v == q.rotate_vector(v).

        Returns
        -------
        np.ndarray
            3x3 rotation matrix.

        Raises
        ------
        NotNormalizedError
            If the quaternion is not of unit norm.
        """
        self._require_unit()
        w, x, y, z = self._q

        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z

        return np.array([
            [1.0 - 2.0 * (yy + zz),  2.0 * (xy - wz),        2.0 * (xz + wy)],
            [2.0 * (xy + wz),         1.0 - 2.0 * (xx + zz),  2.0 * (yz - wx)],
            [2.0 * (xz - wy),         2.0 * (yz + wx),         1.0 - 2.0 * (xx + yy)]
        ], dtype=np.float64)

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @staticmethod
    def identity() -> 'Quaternion':
        """The identity rotation [1, 0, 0, 0]."""
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def random_unit(rng: Optional[np.random.Generator] = None) -> 'Quaternion':
        """
        Draw a unit quaternion uniformly distributed over the rotation group.

        Three independent U(0, 1) variates u1, u2, u3 are mapped through

            w = cos(2 pi u1) sqrt(u3)
            x = sin(2 pi u2) sqrt(1 - u3)
            y = cos(2 pi u2) sqrt(1 - u3)
            z = sin(2 pi u1) sqrt(u3)

        Normalizing a random 4-vector would NOT give a uniform distribution.

        Parameters
        ----------
        rng : np.random.Generator, optional
            Source of uniform variates. Pass a seeded generator
            (``np.random.default_rng(seed)``) for reproducible samples. When
            omitted a freshly seeded generator is created; the global numpy
            random state is never touched. A generator shared between
            threads must be guarded by the caller.

        Returns
        -------
        Quaternion
            Random unit quaternion.
        """
        if rng is None:
            rng = np.random.default_rng()

        u1, u2, u3 = rng.random(3)

        sqrt_u3 = np.sqrt(u3)
        sqrt_1_minus_u3 = np.sqrt(1.0 - u3)

        w = np.cos(TWO_PI * u1) * sqrt_u3
        x = np.sin(TWO_PI * u2) * sqrt_1_minus_u3
        y = np.cos(TWO_PI * u2) * sqrt_1_minus_u3
        z = np.sin(TWO_PI * u1) * sqrt_u3

        return Quaternion(w, x, y, z)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def to_array(self) -> np.ndarray:
        """Components as a new array [w, x, y, z]."""
        return self._q.copy()

    def is_unit(self, tolerance: float = UNIT_TOLERANCE) -> bool:
        """True if |norm - 1| is within ``tolerance``."""
        return abs(self.norm - 1.0) <= tolerance

    def copy(self) -> 'Quaternion':
        """Return an independent copy of this quaternion."""
        return Quaternion(self.w, self.x, self.y, self.z)

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: Union['Quaternion', float, int]) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product (rotation composition)
        - Quaternion * scalar     -> component-wise scaling
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        elif isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> 'Quaternion':
        """Right-multiplication by a scalar: scalar * Quaternion."""
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        # Same rotation as self
        return self.scale(-1.0)

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        Use difference() or is_close() to compare rotations, which also
        treats q and -q as equal.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __hash__(self) -> int:
        return hash(tuple(self._q.tolist()))

    def __repr__(self) -> str:
        return (f"Quaternion(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f})")

    def __str__(self) -> str:
        return (f"[{self.w:+.6f}, {self.x:+.6f}, {self.y:+.6f}, "
                f"{self.z:+.6f}] (norm={self.norm:.6f})")
