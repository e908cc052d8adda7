"""Fixed-size signed distance grid with a first-claim-wins merge rule."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import numpy.typing as npt

from .config import GridConfig
from .errors import ConstructionError, OutOfRangeError, OverlapRejected
from .shapes import Shape

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


@dataclass(frozen=True, slots=True)
class MergeReport:
    """Outcome of one :meth:`SDFGrid.add_shape` call.

    claimed:
        Cells whose interior was claimed by the shape.
    rejected:
        Cells inside the shape that were already claimed by an earlier shape
        and therefore kept their old value.
    """

    claimed: int
    rejected: int

    @property
    def overlapped(self) -> bool:
        return self.rejected > 0


def _check_index(name: str, value: Any, n: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value < n:
        raise OutOfRangeError(f"{name}={value} outside [0, {n})")
    return int(value)


def _vectorised(shape: Any) -> bool:
    # a subclass overriding distance() must be evaluated through it
    return isinstance(shape, Shape) and type(shape).distance is Shape.distance


class SDFGrid:
    """Square grid of signed distances that shapes are merged into.

    Cell ``(x, y)`` is column *x*, row *y* and lives at ``array[y, x]`` of
    the backing ``(gridsize, gridsize)`` array.  Shapes are evaluated at the
    integer point ``(x, y)``.

    Parameters
    ----------
    gridsize:
        Number of cells along each axis (positive integer).
    config:
        Optional :class:`~sdfgrid.config.GridConfig` (far value, dtype).
    """

    def __init__(self, gridsize: int, config: Optional[GridConfig] = None) -> None:
        if (
            isinstance(gridsize, bool)
            or not isinstance(gridsize, numbers.Integral)
            or gridsize <= 0
        ):
            raise ConstructionError(
                f"gridsize must be a positive integer, got {gridsize!r}"
            )
        config = config if config is not None else GridConfig()
        config.validate()

        self._gridsize = int(gridsize)
        self._config = config
        # initialize with "everything far away"
        self._sdf = np.full(
            (self._gridsize, self._gridsize), config.far_value, dtype=config.dtype
        )

    def __repr__(self) -> str:
        return f"SDFGrid({self._gridsize}, claimed={int(self.claimed_mask().sum())})"

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._gridsize

    @property
    def far_value(self) -> float:
        """Value of cells no shape has reached yet."""
        return float(self._sdf.dtype.type(self._config.far_value))

    def get(self, x: int, y: int) -> float:
        """Return the signed distance stored at column *x*, row *y*."""
        x = _check_index("x", x, self._gridsize)
        y = _check_index("y", y, self._gridsize)
        return float(self._sdf[y, x])

    def to_numpy(self) -> _Array:
        """Copy of the grid as a ``(gridsize, gridsize)`` array, indexed ``[y, x]``."""
        return self._sdf.copy()

    def claimed_mask(self) -> npt.NDArray[np.bool_]:
        """Boolean ``[y, x]`` array of cells claimed by some shape interior."""
        return self._sdf <= 0

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def _points(self) -> _Array:
        idx = np.arange(self._gridsize, dtype=float)
        Y, X = np.meshgrid(idx, idx, indexing="ij")
        return np.stack([X, Y], axis=-1)

    def _sample(self, shape: Any) -> _Array:
        """Evaluate *shape* at every cell, rounded to the grid dtype."""
        n = self._gridsize
        if _vectorised(shape):
            d = np.asarray(shape.sdf(self._points()), dtype=float)
        elif callable(getattr(shape, "distance", None)):
            d = np.array(
                [[shape.distance(x, y) for x in range(n)] for y in range(n)],
                dtype=float,
            )
        else:
            raise TypeError(f"{shape!r} has no distance(x, y) method")

        if d.shape != (n, n):
            raise ValueError(
                f"{shape!r} produced distances of shape {d.shape}, expected {(n, n)}"
            )
        if np.isnan(d).any():
            raise ValueError(f"{shape!r} produced NaN distances")
        return d.astype(self._sdf.dtype)

    def _log_if_off_grid(self, shape: Any) -> None:
        if not isinstance(shape, Shape):
            return
        (x0, x1), (y0, y1) = shape.bounds()
        hi = self._gridsize - 1
        if x1 < 0 or y1 < 0 or x0 > hi or y0 > hi:
            logger.debug(
                "%r lies outside the grid, only exterior distances can change",
                shape,
            )

    def add_shape(self, shape: Any, strict: bool = False) -> MergeReport:
        """Merge *shape*'s distance field into the grid.

        For every cell with current value ``old`` and new distance ``d``:

        - ``old <= 0``: already claimed by an earlier shape, left alone;
        - ``d <= 0``: claimed by *shape*, ``d`` is written;
        - otherwise ``min(old, d)`` is written.

        Parameters
        ----------
        shape:
            A :class:`~sdfgrid.shapes.Shape`, or any object with a
            ``distance(x, y) -> float`` method.
        strict:
            If true, raise :class:`~sdfgrid.errors.OverlapRejected` instead
            of merging when the shape's interior meets claimed cells.  The
            grid is not modified in that case.

        Returns
        -------
        MergeReport
            Counts of claimed and rejected cells.
        """
        self._log_if_off_grid(shape)
        d = self._sample(shape)

        old = self._sdf
        taken = old <= 0
        inside = d <= 0
        report = MergeReport(
            claimed=int(np.count_nonzero(inside & ~taken)),
            rejected=int(np.count_nonzero(inside & taken)),
        )
        if report.overlapped:
            if strict:
                raise OverlapRejected(report)
            logger.info(
                "%r overlaps %d claimed cell(s), keeping earlier values",
                shape,
                report.rejected,
            )

        merged = np.where(inside, d, np.minimum(old, d))
        np.copyto(self._sdf, merged, where=~taken)
        logger.debug(
            "merged %r: claimed=%d rejected=%d",
            shape,
            report.claimed,
            report.rejected,
        )
        return report
