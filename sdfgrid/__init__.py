"""
sdfgrid — No-overlap Signed Distance Grid
=========================================

Rasterizes 2D shapes onto a square grid of signed distances.  The first
shape whose interior reaches a cell claims it; later shapes can never
overwrite a claimed cell, they only lower the distance of unclaimed ones.

Implemented features
--------------------
- Shapes: Circle, Box, RoundedBox, Capsule, Triangle, Polygon
- Composition: Union, ``shape.translate(dx, dy)``
- Grid: :class:`SDFGrid` with ``add_shape``, ``get``, ``size``, ``to_numpy``
- Overlap reporting: :class:`MergeReport`, strict mode raising
  :class:`OverlapRejected`

Quick start
-----------

::

    from sdfgrid import Circle, SDFGrid

    grid = SDFGrid(10)
    grid.add_shape(Circle(5, 5, 2))
    grid.get(5, 5)                            # -2.0

    report = grid.add_shape(Circle(5, 5, 1))  # nested, nothing changes
    report.overlapped                         # True
"""

import logging

from .config import FAR_VALUE, GridConfig
from .errors import (
    ConstructionError,
    OutOfRangeError,
    OverlapRejected,
    SDFGridError,
)
from .grid import MergeReport, SDFGrid
from .shapes import (
    Box,
    Capsule,
    Circle,
    Polygon,
    RoundedBox,
    Shape,
    Translated,
    Triangle,
    Union,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Grid
    "SDFGrid",
    "MergeReport",
    "GridConfig",
    "FAR_VALUE",

    # Shapes
    "Shape",
    "Circle",
    "Box",
    "RoundedBox",
    "Capsule",
    "Triangle",
    "Polygon",
    "Translated",
    "Union",

    # Errors
    "SDFGridError",
    "ConstructionError",
    "OutOfRangeError",
    "OverlapRejected",
]
