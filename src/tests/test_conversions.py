"""
===============================================================================
ORIENTATION - Representation Conversion Test Suite
===============================================================================
Round trips and reference values for the Bunge-Euler, angle-axis and
rotation-matrix conversions, including the gimbal-lock branches of the
Euler decomposition and the pivot branches of the matrix conversion.

scipy.spatial.transform.Rotation serves as an independent reference for the
Z-X-Z convention and the matrix layout (scipy quaternions are scalar-last).
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.spatial.transform import Rotation

from orientation.core.quaternion import Quaternion
from orientation.core.errors import (
    DegenerateInputError, InvalidMatrixError, NotNormalizedError
)


TOLERANCE = 1e-8


@pytest.fixture
def random_quats():
    """Fifty reproducible random unit quaternions."""
    rng = np.random.default_rng(2024)
    return [Quaternion.random_unit(rng) for _ in range(50)]


def _scipy_quat(rot: Rotation) -> Quaternion:
    x, y, z, w = rot.as_quat()
    return Quaternion(w, x, y, z)


# =============================================================================
# Test: Bunge-Euler angles
# =============================================================================

class TestBungeEulers:
    """Tests for the Z-X-Z Euler conversions."""

    @pytest.mark.parametrize("eulers", [
        [45.0, 30.0, 10.0],
        [120.0, 75.0, -60.0],
        [-170.0, 179.0, 170.0],
        [0.5, 0.5, 0.5],
    ])
    def test_general_roundtrip_angles(self, eulers):
        """Away from gimbal lock the angle triple itself round-trips."""
        q = Quaternion.from_bunge_eulers(eulers, True)
        assert np.sum(np.abs(q.to_bunge_eulers(True) - eulers)) < TOLERANCE

    def test_zero_angles_exact(self):
        """(0, 0, 0) is the identity and maps back to zeros exactly."""
        q = Quaternion.from_bunge_eulers([0.0, 0.0, 0.0], True)
        assert q == Quaternion.identity()
        assert_allclose(q.to_bunge_eulers(True), [0.0, 0.0, 0.0], atol=0.0)

    def test_gimbal_lock_phi_zero(self):
        """PHI = 0 branch returns the total rotation in phi1."""
        q = Quaternion.from_bunge_eulers([33.0, 0.0, 0.0], True)
        assert np.sum(np.abs(q.to_bunge_eulers(True) - [33.0, 0.0, 0.0])) < TOLERANCE

    def test_gimbal_lock_phi_pi(self):
        """PHI = 180 degrees uses the w ~ z ~ 0 branch."""
        q = Quaternion.from_bunge_eulers([3.0, 180.0, 0.0], True)
        assert np.sum(np.abs(q.to_bunge_eulers(True) - [3.0, 180.0, 0.0])) < TOLERANCE

    def test_gimbal_lock_folds_phi2(self):
        """At PHI = 0 only phi1 + phi2 survives; the quaternion still round-trips."""
        q = Quaternion.from_bunge_eulers([20.0, 0.0, 15.0], True)
        eulers = q.to_bunge_eulers(True)
        assert_allclose(eulers, [35.0, 0.0, 0.0], atol=1e-10)
        assert Quaternion.from_bunge_eulers(eulers, True).difference(q) < TOLERANCE

    def test_gimbal_lock_pi_folds_difference(self):
        """At PHI = 180 degrees only phi1 - phi2 survives."""
        q = Quaternion.from_bunge_eulers([50.0, 180.0, 20.0], True)
        eulers = q.to_bunge_eulers(True)
        assert_allclose(eulers, [30.0, 180.0, 0.0], atol=1e-10)
        assert Quaternion.from_bunge_eulers(eulers, True).difference(q) < TOLERANCE

    def test_random_roundtrip(self, random_quats):
        """from_bunge_eulers(to_bunge_eulers(q)) ~ q for random q."""
        for q in random_quats:
            for in_degrees in (True, False):
                q2 = Quaternion.from_bunge_eulers(q.to_bunge_eulers(in_degrees), in_degrees)
                assert q2.difference(q) < TOLERANCE

    def test_degrees_radians_consistent(self, random_quats):
        """The degree flag is a uniform 180/pi scale."""
        for q in random_quats[:10]:
            assert_allclose(q.to_bunge_eulers(True),
                            np.degrees(q.to_bunge_eulers(False)), atol=1e-12)

    def test_radian_input(self):
        """Radian input equals the same angles given in degrees."""
        q_rad = Quaternion.from_bunge_eulers([np.pi / 4, np.pi / 6, np.pi / 18], False)
        q_deg = Quaternion.from_bunge_eulers([45.0, 30.0, 10.0], True)
        assert q_rad.difference(q_deg) < 1e-14

    def test_angle_ranges(self, random_quats):
        """PHI in [0, pi]; phi1 and phi2 in [-pi, pi]."""
        for q in random_quats:
            phi1, PHI, phi2 = q.to_bunge_eulers(False)
            assert 0.0 <= PHI <= np.pi
            assert -np.pi <= phi1 <= np.pi
            assert -np.pi <= phi2 <= np.pi

    def test_sign_invariant(self, random_quats):
        """q and -q decompose into the same angles."""
        for q in random_quats[:10]:
            assert_allclose((-q).to_bunge_eulers(False), q.to_bunge_eulers(False), atol=1e-12)

    @pytest.mark.parametrize("eulers", [
        [45.0, 30.0, 10.0],
        [200.0, 95.0, 300.0],
        [10.0, 0.0, 0.0],
        [3.0, 180.0, 0.0],
    ])
    def test_matches_scipy_zxz(self, eulers):
        """Bunge angles are intrinsic Z-X-Z rotations."""
        q = Quaternion.from_bunge_eulers(eulers, True)
        reference = Rotation.from_euler('ZXZ', eulers, degrees=True)
        assert_allclose(q.to_matrix(), reference.as_matrix(), atol=1e-12)
        assert q.difference(_scipy_quat(reference)) < 1e-12

    def test_wrong_length_raises(self):
        """Exactly three angles are required."""
        with pytest.raises(ValueError):
            Quaternion.from_bunge_eulers([1.0, 2.0], True)

    def test_non_unit_raises(self):
        """to_bunge_eulers() requires a unit quaternion."""
        with pytest.raises(NotNormalizedError):
            Quaternion(1.0, 1.0, 0.0, 0.0).to_bunge_eulers(True)


# =============================================================================
# Test: Angle-axis pairs
# =============================================================================

class TestAngleAxis:
    """Tests for angle-axis conversion."""

    def test_from_angle_axis(self):
        """90 degrees about Z gives [cos 45, 0, 0, sin 45]."""
        q = Quaternion.from_angle_axis(90.0, [0.0, 0.0, 1.0], True)
        s = np.sqrt(2.0) / 2.0
        assert_allclose(q.to_array(), [s, 0.0, 0.0, s], atol=1e-15)

    def test_axis_normalized(self):
        """The axis need not be unit length."""
        q1 = Quaternion.from_angle_axis(1.0, [0.0, 0.0, 5.0], False)
        q2 = Quaternion.from_angle_axis(1.0, [0.0, 0.0, 1.0], False)
        assert q1.difference(q2) < 1e-15

    def test_to_angle_axis(self):
        """120 degrees about [1, 1, 1] is recovered."""
        axis = np.array([1.0, 1.0, 1.0]) / np.sqrt(3.0)
        q = Quaternion.from_angle_axis(120.0, axis, True)
        angle, recovered = q.to_angle_axis(True)
        assert_allclose(angle, 120.0, atol=1e-12)
        assert_allclose(recovered, axis, atol=1e-14)

    def test_random_roundtrip(self, random_quats):
        """from_angle_axis(to_angle_axis(q)) ~ q for random q."""
        for q in random_quats:
            for in_degrees in (True, False):
                angle, axis = q.to_angle_axis(in_degrees)
                q2 = Quaternion.from_angle_axis(angle, axis, in_degrees)
                assert q2.difference(q) < TOLERANCE

    def test_angle_range(self, random_quats):
        """angle = 2 acos(w) lies in [0, 2 pi]; the axis is a unit vector."""
        for q in random_quats:
            angle, axis = q.to_angle_axis(False)
            assert 0.0 <= angle <= 2.0 * np.pi
            assert_allclose(np.linalg.norm(axis), 1.0, atol=1e-14)

    def test_drift_clamped(self):
        """A w marginally above 1 from drift does not produce NaN."""
        q = Quaternion(1.0 + 5e-9, 1e-6, 0.0, 0.0)
        angle, axis = q.to_angle_axis(False)
        assert np.isfinite(angle)
        assert_allclose(axis, [1.0, 0.0, 0.0], atol=1e-15)

    def test_identity_raises(self):
        """The identity rotation has no axis."""
        with pytest.raises(DegenerateInputError):
            Quaternion.identity().to_angle_axis(True)

    def test_zero_axis_raises(self):
        """A zero axis cannot define a rotation."""
        with pytest.raises(DegenerateInputError):
            Quaternion.from_angle_axis(30.0, [0.0, 0.0, 0.0], True)

    def test_zero_angle_is_identity(self):
        """A zero angle about any axis is the identity."""
        q = Quaternion.from_angle_axis(0.0, [1.0, 2.0, 3.0], True)
        assert q.difference(Quaternion.identity()) < 1e-15

    def test_non_unit_raises(self):
        """to_angle_axis() requires a unit quaternion."""
        with pytest.raises(NotNormalizedError):
            Quaternion(0.0, 2.0, 0.0, 0.0).to_angle_axis(False)


# =============================================================================
# Test: Rotation matrices
# =============================================================================

class TestMatrix:
    """Tests for rotation-matrix conversion."""

    def test_z_rotation(self):
        """45 degrees about Z has the textbook matrix."""
        ang = np.pi / 4
        m = np.array([
            [np.cos(ang), -np.sin(ang), 0.0],
            [np.sin(ang), np.cos(ang), 0.0],
            [0.0, 0.0, 1.0],
        ])
        q = Quaternion.from_bunge_eulers([45.0, 0.0, 0.0], True)
        assert_allclose(q.to_matrix(), m, atol=1e-15)
        assert Quaternion.from_matrix(m).difference(q) < TOLERANCE

    def test_random_roundtrip(self, random_quats):
        """from_matrix(to_matrix(q)) ~ q for random q."""
        for q in random_quats:
            assert Quaternion.from_matrix(q.to_matrix()).difference(q) < TOLERANCE

    def test_orthonormal(self, random_quats):
        """to_matrix() gives R^T R = I and det R = +1."""
        for q in random_quats[:10]:
            m = q.to_matrix()
            assert_allclose(m.T @ m, np.eye(3), atol=1e-14)
            assert_allclose(np.linalg.det(m), 1.0, atol=1e-14)

    def test_matrix_rotates_like_quaternion(self, random_quats):
        """R @ v equals q.rotate_vector(v)."""
        v = np.array([0.2, -0.7, 1.5])
        for q in random_quats[:10]:
            assert_allclose(q.to_matrix() @ v, q.rotate_vector(v), atol=1e-14)

    @pytest.mark.parametrize("axis", [
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [1.0, 1.0, 1.0],
        [1.0, -2.0, 0.5],
    ])
    def test_near_180_degrees(self, axis):
        """Rotations near 180 degrees use the diagonal pivots."""
        for angle in (180.0, 179.999):
            q = Quaternion.from_angle_axis(angle, axis, True)
            m = q.to_matrix()
            assert np.trace(m) <= 0.0
            assert Quaternion.from_matrix(m).difference(q) < TOLERANCE

    def test_matches_scipy(self, random_quats):
        """from_matrix() agrees with scipy's matrix-to-quaternion."""
        for q in random_quats[:10]:
            m = q.to_matrix()
            reference = _scipy_quat(Rotation.from_matrix(m))
            assert Quaternion.from_matrix(m).difference(reference) < 1e-12

    def test_result_is_unit(self, random_quats):
        """Quaternions recovered from matrices are normalized."""
        for q in random_quats[:10]:
            assert Quaternion.from_matrix(q.to_matrix()).is_unit()

    def test_non_orthogonal_raises(self):
        """A scaled matrix is rejected."""
        with pytest.raises(InvalidMatrixError):
            Quaternion.from_matrix(2.0 * np.eye(3))

    def test_reflection_raises(self):
        """An improper orthogonal matrix is rejected."""
        with pytest.raises(InvalidMatrixError):
            Quaternion.from_matrix(np.diag([1.0, 1.0, -1.0]))

    def test_bad_shape_raises(self):
        """Only 3x3 matrices are accepted."""
        with pytest.raises(ValueError):
            Quaternion.from_matrix(np.eye(4))

    def test_non_unit_raises(self):
        """to_matrix() requires a unit quaternion."""
        with pytest.raises(NotNormalizedError):
            Quaternion(0.5, 0.0, 0.0, 0.0).to_matrix()
