"""Shapes that can be rasterized into an :class:`~sdfgrid.grid.SDFGrid`."""

from __future__ import annotations

import math
from typing import Callable, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from .errors import ConstructionError

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]


def _finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise ConstructionError(f"{name} must be finite, got {value!r}")
    return value


def _positive(name: str, value: float) -> float:
    value = _finite(name, value)
    if value <= 0:
        raise ConstructionError(f"{name} must be positive, got {value!r}")
    return value


def _point(name: str, xy: Sequence[float]) -> _Array:
    if len(xy) != 2:
        raise ConstructionError(f"{name} must be an (x, y) pair, got {xy!r}")
    return np.array([_finite(f"{name}[0]", xy[0]), _finite(f"{name}[1]", xy[1])])


def _points_bounds(pts: _Array, pad: float = 0.0) -> _Bounds2D:
    lo = pts.min(axis=0) - pad
    hi = pts.max(axis=0) + pad
    return (float(lo[0]), float(hi[0])), (float(lo[1]), float(hi[1]))


# ===========================================================================
# Base class
# ===========================================================================

class Shape:
    """Base class for shapes with an exact signed distance function.

    A ``Shape`` wraps a callable ``func(p) -> distances`` where *p* is a
    ``(..., 2)`` array of 2D points, plus the axis-aligned box that fully
    contains the shape's interior.

    Subclasses override ``__init__`` to pass the appropriate primitive SDF
    and bounds to ``super().__init__(func, bounds)``.

    Anything with a ``distance(x, y)`` method can be added to a grid; this
    class additionally gives the grid a vectorised :meth:`sdf`.
    """

    def __init__(self, func: _SDFFunc, bounds: _Bounds2D) -> None:
        self._func = func
        self._bounds = bounds

    def sdf(self, p: _Array) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 2)``)."""
        return self._func(p)

    def __call__(self, p: _Array) -> _Array:
        return self._func(p)

    def distance(self, x: float, y: float) -> float:
        """Signed distance from ``(x, y)`` to the boundary (negative inside)."""
        return float(self._func(np.array([[x, y]], dtype=float))[0])

    def contains(self, x: float, y: float) -> bool:
        """True if ``(x, y)`` is inside or on the boundary."""
        return self.distance(x, y) <= 0.0

    def bounds(self) -> _Bounds2D:
        """Axis-aligned bounding box ``((x0, x1), (y0, y1))``."""
        return self._bounds

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bounds={self._bounds!r})"

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def translate(self, dx: float, dy: float) -> "Translated":
        """Return this shape moved by ``(dx, dy)``."""
        return Translated(self, dx, dy)

    def union(self, other: "Shape") -> "Union":
        """Return the union (min) of this shape and *other*."""
        return Union(self, other)


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Circle(Shape):
    """Circle centred at ``(cx, cy)`` with given *radius*."""

    def __init__(self, cx: float, cy: float, radius: float) -> None:
        self.center = _point("center", (cx, cy))
        self.radius = _positive("radius", radius)
        c, r = self.center, self.radius
        super().__init__(
            lambda p: sdf.sdCircle(p, c, r),
            ((c[0] - r, c[0] + r), (c[1] - r, c[1] + r)),
        )

    def __repr__(self) -> str:
        cx, cy = self.center
        return f"Circle({cx:g}, {cy:g}, {self.radius:g})"


class Box(Shape):
    """Axis-aligned rectangle centred at ``(cx, cy)``."""

    def __init__(
        self, cx: float, cy: float, half_width: float, half_height: float
    ) -> None:
        c = _point("center", (cx, cy))
        b = np.array([
            _positive("half_width", half_width),
            _positive("half_height", half_height),
        ])
        super().__init__(
            lambda p: sdf.sdBox2D(p, c, b),
            ((c[0] - b[0], c[0] + b[0]), (c[1] - b[1], c[1] + b[1])),
        )


class RoundedBox(Shape):
    """Rectangle centred at ``(cx, cy)`` with corners rounded by *radius*."""

    def __init__(
        self,
        cx: float,
        cy: float,
        half_width: float,
        half_height: float,
        radius: float,
    ) -> None:
        c = _point("center", (cx, cy))
        b = np.array([
            _positive("half_width", half_width),
            _positive("half_height", half_height),
        ])
        r = _finite("radius", radius)
        if r < 0 or r > b.min():
            raise ConstructionError(
                f"radius must be in [0, {b.min():g}], got {r!r}"
            )
        super().__init__(
            lambda p: sdf.sdRoundedBox2D(p, c, b, r),
            ((c[0] - b[0], c[0] + b[0]), (c[1] - b[1], c[1] + b[1])),
        )


class Capsule(Shape):
    """Segment from *point_a* to *point_b* thickened by *radius*."""

    def __init__(
        self,
        point_a: Sequence[float],
        point_b: Sequence[float],
        radius: float,
    ) -> None:
        a = _point("point_a", point_a)
        b = _point("point_b", point_b)
        r = _positive("radius", radius)
        super().__init__(
            lambda p: sdf.sdCapsule2D(p, a, b, r),
            _points_bounds(np.stack([a, b]), pad=r),
        )


class Triangle(Shape):
    """Arbitrary triangle from three 2-D vertices."""

    def __init__(
        self,
        p0: Sequence[float],
        p1: Sequence[float],
        p2: Sequence[float],
    ) -> None:
        v0 = _point("p0", p0)
        v1 = _point("p1", p1)
        v2 = _point("p2", p2)
        e0, e2 = v1 - v0, v2 - v0
        if e0[0] * e2[1] - e0[1] * e2[0] == 0.0:
            raise ConstructionError("triangle vertices are collinear")
        super().__init__(
            lambda p: sdf.sdTriangle2D(p, v0, v1, v2),
            _points_bounds(np.stack([v0, v1, v2])),
        )


class Polygon(Shape):
    """Simple (non self-intersecting) polygon from *N* >= 3 vertices."""

    def __init__(self, vertices: Sequence[Sequence[float]]) -> None:
        if len(vertices) < 3:
            raise ConstructionError(
                f"polygon needs at least 3 vertices, got {len(vertices)}"
            )
        v = np.stack([_point(f"vertices[{i}]", xy) for i, xy in enumerate(vertices)])
        if (sdf.dot2(np.roll(v, -1, axis=0) - v) == 0.0).any():
            raise ConstructionError("polygon has repeated consecutive vertices")
        super().__init__(lambda p: sdf.sdPolygon2D(p, v), _points_bounds(v))


# ===========================================================================
# Composition
# ===========================================================================

class Translated(Shape):
    """*shape* moved by ``(dx, dy)``."""

    def __init__(self, shape: Shape, dx: float, dy: float) -> None:
        t = np.array([_finite("dx", dx), _finite("dy", dy)])
        (x0, x1), (y0, y1) = shape.bounds()
        super().__init__(
            lambda p: shape.sdf(p - t),
            ((x0 + t[0], x1 + t[0]), (y0 + t[1], y1 + t[1])),
        )


class Union(Shape):
    """Union of one or more shapes (minimum SDF)."""

    def __init__(self, *shapes: Shape) -> None:
        if not shapes:
            raise ConstructionError("union needs at least one shape")

        def _sdf(p: _Array) -> _Array:
            d = shapes[0].sdf(p)
            for s in shapes[1:]:
                d = sdf.opUnion(d, s.sdf(p))
            return d

        boxes = [s.bounds() for s in shapes]
        super().__init__(
            _sdf,
            (
                (min(b[0][0] for b in boxes), max(b[0][1] for b in boxes)),
                (min(b[1][0] for b in boxes), max(b[1][1] for b in boxes)),
            ),
        )
