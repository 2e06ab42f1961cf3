"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def line_stroke_quad(
    x1: float, y1: float, x2: float, y2: float, half_width: float
) -> NDArray[np.float64]:
    """Corners of the rectangle swept by a stroked line segment.

    Returns a 4x2 array ordered start+normal, end+normal, end−normal,
    start−normal, where normal = (−sin θ, cos θ) and θ = atan2(Δy, Δx).
    """
    theta = np.arctan2(y2 - y1, x2 - x1)
    offset = half_width * np.array([-np.sin(theta), np.cos(theta)])
    start = np.array([x1, y1], dtype=np.float64)
    end = np.array([x2, y2], dtype=np.float64)
    return np.array([start + offset, end + offset, end - offset, start - offset])


def rect_corners(x: float, y: float, width: float, height: float, clockwise: bool = True) -> NDArray[np.float64]:
    """Rectangle corners starting top-left; clockwise in SVG (y-down) space."""
    corners = np.array(
        [[x, y], [x + width, y], [x + width, y + height], [x, y + height]],
        dtype=np.float64,
    )
    if clockwise:
        return corners
    # Same start corner, reversed winding
    return corners[[0, 3, 2, 1]]
