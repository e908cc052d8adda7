"""Draw an SDFGrid the way the original sketch does.

Every grid point gets a black dot and a circle whose diameter is
``|d| * scale``: red where the cell is outside every shape, blue where a
shape has claimed it.

Usage::

    python scripts/render_grid.py                          # saves sdf_grid.png
    python scripts/render_grid.py --scale 0.5 --out a.png
    python scripts/render_grid.py --size 20 --circle 5 5 3 --circle 12 12 4

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle as CirclePatch

from sdfgrid import Circle, SDFGrid

# Shapes drawn when no --circle is given
_DEFAULT_CIRCLES = [(6.0, 6.0, 3.0), (14.0, 14.0, 4.0)]


def build_grid(size: int, circles: list[tuple[float, float, float]]) -> SDFGrid:
    grid = SDFGrid(size)
    for cx, cy, r in circles:
        report = grid.add_shape(Circle(cx, cy, r))
        if report.overlapped:
            print(f"Circle({cx:g}, {cy:g}, {r:g}): {report.rejected} cell(s) already claimed")
    return grid


def render_grid(grid: SDFGrid, out_path: str, scale: float = 1.0) -> None:
    n = grid.size()
    phi = grid.to_numpy()

    fig, ax = plt.subplots(figsize=(8, 8), facecolor="#dcdcdc")
    ax.set_facecolor("#dcdcdc")

    Y, X = np.mgrid[0:n, 0:n]
    ax.scatter(X.ravel(), Y.ravel(), s=1, c="black")

    for y in range(n):
        for x in range(n):
            d = float(phi[y, x])
            color = "red" if d > 0 else "blue"
            ax.add_patch(CirclePatch((x, y), abs(d) * scale / 2.0,
                                     fill=False, edgecolor=color, linewidth=0.6))

    ax.set_xlim(-1, n)
    ax.set_ylim(n, -1)  # row 0 at the top, as on a canvas
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    plt.tight_layout(pad=0.4)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a no-overlap SDF grid to PNG.")
    parser.add_argument("--size", type=int, default=40, help="Grid size (default 40)")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="Circle diameter per unit distance (default 1.0)")
    parser.add_argument("--circle", type=float, nargs=3, action="append",
                        metavar=("CX", "CY", "R"), help="Add a circle (repeatable)")
    parser.add_argument("--out", default="sdf_grid.png", help="Output PNG path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log merges")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    grid = build_grid(args.size, args.circle or _DEFAULT_CIRCLES)
    render_grid(grid, args.out, scale=args.scale)


if __name__ == "__main__":
    main()
