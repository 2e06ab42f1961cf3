"""Shape node factory: the single place tag + attributes become a ShapeNode.

Both parser strategies go through build_node(), so a given primitive always
yields the same field set no matter which strategy read it.
"""

from __future__ import annotations

from iconsmith.models.icon import (
    CircleNode,
    EllipseNode,
    GenericNode,
    LineNode,
    PathNode,
    PolygonNode,
    PolylineNode,
    RectNode,
    ShapeNode,
)
from iconsmith.utils.math_helpers import parse_number, parse_points

SUPPORTED_TAGS = ("path", "line", "circle", "rect", "ellipse", "polygon", "polyline")


class SvgParseError(ValueError):
    """Raised by a parser strategy on a structural problem with the markup."""


def build_node(tag: str, attributes: dict[str, str], child_count: int = 0) -> ShapeNode:
    """Build the typed node for a tag. Unknown tags become GenericNode."""
    attrs = dict(attributes)
    common = {
        "fill": attrs.get("fill"),
        "stroke": attrs.get("stroke"),
        "stroke_width": attrs.get("stroke-width"),
        "attributes": attrs,
        "child_count": child_count,
    }

    def num(key: str) -> float:
        return parse_number(attrs.get(key))

    kind = tag.lower()
    if kind == "path":
        return PathNode(d=attrs.get("d", ""), **common)
    if kind == "line":
        return LineNode(x1=num("x1"), y1=num("y1"), x2=num("x2"), y2=num("y2"), **common)
    if kind == "circle":
        return CircleNode(cx=num("cx"), cy=num("cy"), r=num("r"), **common)
    if kind == "rect":
        return RectNode(x=num("x"), y=num("y"), width=num("width"), height=num("height"), **common)
    if kind == "ellipse":
        return EllipseNode(cx=num("cx"), cy=num("cy"), rx=num("rx"), ry=num("ry"), **common)
    if kind == "polygon":
        return PolygonNode(points=parse_points(attrs.get("points")), **common)
    if kind == "polyline":
        return PolylineNode(points=parse_points(attrs.get("points")), **common)
    return GenericNode(tag=tag, **common)
