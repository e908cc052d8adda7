"""Exceptions raised by :mod:`sdfgrid`.

Each error also derives from the built-in exception a caller would expect
(``ValueError`` for bad parameters, ``IndexError`` for bad coordinates), so
``except ValueError`` keeps working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import MergeReport


class SDFGridError(Exception):
    """Base class for all sdfgrid errors."""


class ConstructionError(SDFGridError, ValueError):
    """Invalid grid size, grid configuration or shape parameters."""


class OutOfRangeError(SDFGridError, IndexError):
    """Grid coordinates outside ``[0, gridsize)``."""


class OverlapRejected(SDFGridError):
    """A shape's interior met cells already claimed by an earlier shape.

    Only raised by ``SDFGrid.add_shape(..., strict=True)``; the grid is left
    untouched.  The offending :class:`~sdfgrid.grid.MergeReport` is kept on
    :attr:`report`.
    """

    def __init__(self, report: "MergeReport") -> None:
        self.report = report
        super().__init__(
            f"shape interior overlaps {report.rejected} already claimed cell(s)"
        )
