"""Stroke → outline conversion for line, circle and rect.

Stroked paths, polygons, polylines and ellipses are not outlined: their
original data passes through unchanged and the icon stays non-canonical.
Ring and frame outlines use opposite-winding sub-paths and rely on
fill-rule="evenodd", which outline_node() sets explicitly.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from iconsmith.models.icon import (
    CircleNode,
    EllipseNode,
    LineNode,
    PolygonNode,
    PolylineNode,
    RectNode,
    ShapeNode,
)
from iconsmith.svg.elements import build_node
from iconsmith.svg.paint import is_visible_paint
from iconsmith.utils.geometry import line_stroke_quad, rect_corners
from iconsmith.utils.math_helpers import format_number, parse_number

logger = logging.getLogger(__name__)

_STROKE_ATTRS = frozenset(
    {
        "stroke",
        "stroke-width",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-miterlimit",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-opacity",
    }
)
_GEOMETRY_ATTRS = {
    "line": frozenset({"x1", "y1", "x2", "y2"}),
    "circle": frozenset({"cx", "cy", "r"}),
    "rect": frozenset({"x", "y", "width", "height", "rx", "ry"}),
}


def stroke_width_of(node: ShapeNode) -> float:
    return parse_number(node.stroke_width, default=1.0)


def outline(node: ShapeNode) -> str | None:
    """Fill-only path data for a stroked primitive, or None to pass through."""
    if not is_visible_paint(node.stroke):
        return None

    width = stroke_width_of(node)
    if isinstance(node, LineNode):
        return _polygon_data(line_stroke_quad(node.x1, node.y1, node.x2, node.y2, width / 2))
    if isinstance(node, CircleNode):
        return _circle_outline(node.cx, node.cy, node.r, width)
    if isinstance(node, RectNode):
        return _rect_outline(node.x, node.y, node.width, node.height, width)
    return None


def outline_node(node: ShapeNode) -> ShapeNode:
    """Replace an outlinable stroked primitive by the equivalent filled path.

    The stroke paint becomes the fill, stroke and geometry attributes are
    dropped, everything else (id, class, transform, opacity...) is kept.
    """
    data = outline(node)
    if data is None:
        return node

    geometry = _GEOMETRY_ATTRS[node.tag]
    attrs = {"d": data}
    for key, value in node.attributes.items():
        if key in _STROKE_ATTRS or key in geometry or key in ("d", "fill", "fill-rule"):
            continue
        attrs[key] = value
    attrs["fill"] = node.stroke
    if "stroke-opacity" in node.attributes:
        attrs["fill-opacity"] = node.attributes["stroke-opacity"]
    attrs["fill-rule"] = "evenodd"

    logger.debug("Outlined stroked <%s> into a filled path", node.tag)
    return build_node("path", attrs)


def shape_to_path(node: ShapeNode) -> str | None:
    """Path data for the *fill* geometry of a non-path primitive.

    Lines have no fill area and yield None, as do unknown tags.
    """
    if isinstance(node, CircleNode):
        return _circle_data(node.cx, node.cy, node.r, sweep=1) if node.r > 0 else None
    if isinstance(node, EllipseNode):
        if node.rx <= 0 or node.ry <= 0:
            return None
        return _ellipse_data(node.cx, node.cy, node.rx, node.ry, sweep=1)
    if isinstance(node, RectNode):
        if node.width <= 0 or node.height <= 0:
            return None
        return _polygon_data(rect_corners(node.x, node.y, node.width, node.height))
    if isinstance(node, PolygonNode) and len(node.points) >= 2:
        return _polygon_data(np.array(node.points, dtype=np.float64))
    if isinstance(node, PolylineNode) and len(node.points) >= 2:
        return _polygon_data(np.array(node.points, dtype=np.float64), closed=False)
    return None


def _circle_outline(cx: float, cy: float, r: float, width: float) -> str:
    outer = r + width / 2
    inner = r - width / 2
    if inner <= 0:
        # The stroke consumes the whole interior: a solid disc
        return _circle_data(cx, cy, outer, sweep=1)
    return f"{_circle_data(cx, cy, outer, sweep=1)} {_circle_data(cx, cy, inner, sweep=0)}"


def _rect_outline(x: float, y: float, width: float, height: float, stroke: float) -> str:
    half = stroke / 2
    outer = rect_corners(x - half, y - half, width + stroke, height + stroke)
    inner_w = width - stroke
    inner_h = height - stroke
    if inner_w <= 0 or inner_h <= 0:
        return _polygon_data(outer)
    inner = rect_corners(x + half, y + half, inner_w, inner_h, clockwise=False)
    return f"{_polygon_data(outer)} {_polygon_data(inner)}"


def _circle_data(cx: float, cy: float, r: float, sweep: int) -> str:
    return _ellipse_data(cx, cy, r, r, sweep)


def _ellipse_data(cx: float, cy: float, rx: float, ry: float, sweep: int) -> str:
    """Two half arcs top → bottom → top."""
    x, top, bottom = format_number(cx), format_number(cy - ry), format_number(cy + ry)
    radii = f"{format_number(rx)} {format_number(ry)}"
    return f"M {x} {top} A {radii} 0 1 {sweep} {x} {bottom} A {radii} 0 1 {sweep} {x} {top} Z"


def _polygon_data(points: NDArray[np.float64], closed: bool = True) -> str:
    coords = [f"{format_number(px)} {format_number(py)}" for px, py in points]
    data = f"M {coords[0]}" + "".join(f" L {c}" for c in coords[1:])
    return f"{data} Z" if closed else data
