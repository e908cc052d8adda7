"""Vectorised 2-D SDF math used by :mod:`sdfgrid.shapes`.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)``; scalar SDF results have shape ``(...,)``.

Formulas are adapted from Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "vec2", "length", "dot", "dot2", "clamp",
    "opUnion",
    "sdCircle", "sdBox2D", "sdRoundedBox2D", "sdSegment2D", "sdCapsule2D",
    "sdTriangle2D", "sdPolygon2D",
]


# ===========================================================================
# Math helpers
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    return np.minimum(np.maximum(x, lo), hi)


def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


# ===========================================================================
# Primitive SDFs
# ===========================================================================

def sdCircle(p: _F, c: _F, r: float) -> _F:
    """Circle of radius *r* centred at *c*."""
    return length(p - c) - r


def sdBox2D(p: _F, c: _F, b: _F) -> _F:
    """Axis-aligned box centred at *c* with half-extents *b* ``(bx, by)``."""
    d = np.abs(p - c) - b
    return length(np.maximum(d, 0.0)) + np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0)


def sdRoundedBox2D(p: _F, c: _F, b: _F, r: float) -> _F:
    """Box centred at *c* with half-extents *b* and corner radius *r*."""
    d = np.abs(p - c) - b + r
    return length(np.maximum(d, 0.0)) + np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0) - r


def sdSegment2D(p: _F, a: _F, b: _F) -> _F:
    """Line segment from *a* to *b* (zero-width)."""
    pa = p - a
    ba = b - a
    h  = clamp(dot(pa, ba) / dot2(ba), 0.0, 1.0)
    return length(pa - ba * h[..., None])


def sdCapsule2D(p: _F, a: _F, b: _F, r: float) -> _F:
    """Segment from *a* to *b* inflated by *r*.

    A zero-length segment degenerates to a circle of radius *r* at *a*.
    """
    if dot2(b - a) == 0.0:
        return length(p - a) - r
    return sdSegment2D(p, a, b) - r


def sdTriangle2D(p: _F, p0: _F, p1: _F, p2: _F) -> _F:
    """Triangle from three vertices *p0*, *p1*, *p2* (either winding)."""
    e0  = p1 - p0;  v0 = p - p0
    e1  = p2 - p1;  v1 = p - p1
    e2  = p0 - p2;  v2 = p - p2
    pq0 = v0 - e0 * clamp(dot(v0, e0) / dot2(e0), 0.0, 1.0)[..., None]
    pq1 = v1 - e1 * clamp(dot(v1, e1) / dot2(e1), 0.0, 1.0)[..., None]
    pq2 = v2 - e2 * clamp(dot(v2, e2) / dot2(e2), 0.0, 1.0)[..., None]
    s   = np.sign(e0[0] * e2[1] - e0[1] * e2[0])
    d   = np.minimum(np.minimum(
        vec2(dot2(pq0), s * (v0[..., 0] * e0[1] - v0[..., 1] * e0[0])),
        vec2(dot2(pq1), s * (v1[..., 0] * e1[1] - v1[..., 1] * e1[0]))),
        vec2(dot2(pq2), s * (v2[..., 0] * e2[1] - v2[..., 1] * e2[0])))
    return -np.sqrt(d[..., 0]) * np.sign(d[..., 1])


def sdPolygon2D(p: _F, v: _F) -> _F:
    """Simple polygon from *N* vertices *v* (shape ``(N, 2)``)."""
    N = v.shape[0]
    d = dot2(p - v[0])
    s = np.ones(p.shape[:-1])
    for i in range(N):
        j = (i + 1) % N
        e = v[j] - v[i]
        w = p - v[i]
        b = w - e * clamp(dot(w, e) / dot2(e), 0.0, 1.0)[..., None]
        d = np.minimum(d, dot2(b))
        c1 = p[..., 1] >= v[i][1]
        c2 = p[..., 1] < v[j][1]
        c3 = e[0] * w[..., 1] > e[1] * w[..., 0]
        flip = (c1 & c2 & c3) | (~c1 & ~c2 & ~c3)
        s = np.where(flip, -s, s)
    return s * np.sqrt(d)
