"""Tests for sdfgrid/primitives.py: vectorised 2-D SDF math.

Tests verify:
- Correct sign (negative inside, positive outside, zero on surface)
- Exact distance at analytically known points
- Array shape / broadcasting consistency
"""

import numpy as np
import numpy.testing as npt

from sdfgrid import primitives as sdf


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p2(*xy) -> np.ndarray:
    """Single 2-D point as shape ``(1, 2)``."""
    return np.array([list(xy)], dtype=float)


def _grid2(n: int = 8) -> np.ndarray:
    """Uniform ``n²`` grid of 2-D points in ``[-4, 4]²`` (shape ``(n, n, 2)``)."""
    lin = np.linspace(-4.0, 4.0, n)
    Y, X = np.meshgrid(lin, lin, indexing="ij")
    return np.stack([X, Y], axis=-1)


_SQUARE = np.array([[0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0]])


# ===========================================================================
# Math helpers
# ===========================================================================

class TestHelpers:
    def test_vec2_shape(self):
        v = sdf.vec2(np.array([1.0, 2.0]), np.array([3.0, 4.0]))
        assert v.shape == (2, 2)

    def test_vec2_broadcasts_scalar(self):
        v = sdf.vec2(np.zeros(3), 1.0)
        npt.assert_array_equal(v[:, 1], [1.0, 1.0, 1.0])

    def test_length(self):
        npt.assert_allclose(sdf.length(np.array([[3.0, 4.0]])), [5.0])

    def test_dot2_is_length_squared(self):
        npt.assert_allclose(sdf.dot2(np.array([[3.0, 4.0]])), [25.0])

    def test_clamp(self):
        x = np.array([-2.0, 0.5, 3.0])
        npt.assert_allclose(sdf.clamp(x, 0.0, 1.0), [0.0, 0.5, 1.0])

    def test_op_union_is_min(self):
        npt.assert_array_equal(
            sdf.opUnion(np.array([1.0, -2.0]), np.array([0.5, 3.0])), [0.5, -2.0]
        )


# ===========================================================================
# Primitive SDFs
# ===========================================================================

class TestSdCircle:
    def test_centre(self):
        npt.assert_allclose(sdf.sdCircle(_p2(5, 5), np.array([5.0, 5.0]), 2.0), [-2.0])

    def test_on_surface(self):
        npt.assert_allclose(sdf.sdCircle(_p2(7, 5), np.array([5.0, 5.0]), 2.0), [0.0])

    def test_outside(self):
        npt.assert_allclose(sdf.sdCircle(_p2(8, 9), np.array([5.0, 5.0]), 2.0), [3.0])

    def test_grid_shape(self):
        d = sdf.sdCircle(_grid2(), np.zeros(2), 1.0)
        assert d.shape == (8, 8)


class TestSdBox2D:
    def test_inside(self):
        c, b = np.zeros(2), np.array([2.0, 1.0])
        npt.assert_allclose(sdf.sdBox2D(_p2(0, 0), c, b), [-1.0])

    def test_face(self):
        c, b = np.zeros(2), np.array([2.0, 1.0])
        npt.assert_allclose(sdf.sdBox2D(_p2(3, 0), c, b), [1.0])

    def test_corner(self):
        c, b = np.zeros(2), np.array([2.0, 1.0])
        npt.assert_allclose(sdf.sdBox2D(_p2(3, 2), c, b), [np.sqrt(2.0)])

    def test_offset_centre(self):
        c, b = np.array([10.0, 10.0]), np.array([1.0, 1.0])
        npt.assert_allclose(sdf.sdBox2D(_p2(10, 10), c, b), [-1.0])


class TestSdRoundedBox2D:
    def test_zero_radius_matches_box(self):
        c, b = np.zeros(2), np.array([2.0, 1.0])
        p = _grid2()
        npt.assert_allclose(sdf.sdRoundedBox2D(p, c, b, 0.0), sdf.sdBox2D(p, c, b))

    def test_rounded_corner(self):
        c, b = np.zeros(2), np.array([2.0, 2.0])
        expected = np.hypot(1.5, 1.5) - 0.5
        npt.assert_allclose(sdf.sdRoundedBox2D(_p2(3, 3), c, b, 0.5), [expected])


class TestSdSegmentAndCapsule:
    def test_segment_perpendicular(self):
        a, b = np.array([0.0, 0.0]), np.array([4.0, 0.0])
        npt.assert_allclose(sdf.sdSegment2D(_p2(2, 3), a, b), [3.0])

    def test_segment_past_end(self):
        a, b = np.array([0.0, 0.0]), np.array([4.0, 0.0])
        npt.assert_allclose(sdf.sdSegment2D(_p2(7, 4), a, b), [5.0])

    def test_capsule_inside(self):
        a, b = np.array([0.0, 0.0]), np.array([4.0, 0.0])
        npt.assert_allclose(sdf.sdCapsule2D(_p2(2, 0), a, b, 1.0), [-1.0])

    def test_capsule_degenerate_is_circle(self):
        a = np.array([1.0, 1.0])
        npt.assert_allclose(sdf.sdCapsule2D(_p2(1, 4), a, a.copy(), 2.0), [1.0])


class TestSdTriangle2D:
    _v = (np.array([0.0, 0.0]), np.array([4.0, 0.0]), np.array([0.0, 4.0]))

    def test_inside(self):
        npt.assert_allclose(sdf.sdTriangle2D(_p2(1, 1), *self._v), [-1.0], atol=1e-12)

    def test_outside_vertex(self):
        npt.assert_allclose(sdf.sdTriangle2D(_p2(6, 0), *self._v), [2.0], atol=1e-12)

    def test_winding_does_not_matter(self):
        p = _grid2()
        v0, v1, v2 = self._v
        npt.assert_allclose(sdf.sdTriangle2D(p, v0, v1, v2),
                            sdf.sdTriangle2D(p, v0, v2, v1), atol=1e-12)


class TestSdPolygon2D:
    def test_inside(self):
        npt.assert_allclose(sdf.sdPolygon2D(_p2(2, 2), _SQUARE), [-2.0])

    def test_outside_face(self):
        npt.assert_allclose(sdf.sdPolygon2D(_p2(6, 2), _SQUARE), [2.0])

    def test_outside_corner(self):
        npt.assert_allclose(sdf.sdPolygon2D(_p2(5, 5), _SQUARE), [np.sqrt(2.0)])

    def test_matches_box(self):
        p = _grid2(17) + 2.0
        box = sdf.sdBox2D(p, np.array([2.0, 2.0]), np.array([2.0, 2.0]))
        npt.assert_allclose(sdf.sdPolygon2D(p, _SQUARE), box, atol=1e-12)

    def test_grid_shape(self):
        assert sdf.sdPolygon2D(_grid2(), _SQUARE).shape == (8, 8)
