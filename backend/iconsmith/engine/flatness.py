"""Flatness evaluation: is the principal shape set already canonical?

An icon may be accepted into the component library without a separate
flattening step only when this returns is_canonical=True. The evaluator
inspects stated attributes; it never converts geometry itself.
"""

from __future__ import annotations

from collections.abc import Sequence

from iconsmith.models.icon import ClassificationResult, ShapeNode
from iconsmith.svg.paint import is_visible_paint

REASON_EMPTY = "no principal elements"
REASON_MULTIPLE = "multiple raw elements"
REASON_STROKES = "unconverted strokes"
REASON_SINGLE_NON_PATH = "single element is not a path"
REASON_NESTED = "nested groups"

# Tags expected to declare a fill or a stroke; lines carry no fill area
_PAINT_CHECKED_TAGS = frozenset({"path", "circle", "ellipse", "rect", "polygon", "polyline"})


def has_unconverted_stroke(node: ShapeNode) -> bool:
    return is_visible_paint(node.stroke)


def is_well_formed(node: ShapeNode) -> bool:
    if node.tag not in _PAINT_CHECKED_TAGS:
        return True
    return is_visible_paint(node.fill) or is_visible_paint(node.stroke)


def evaluate(nodes: Sequence[ShapeNode]) -> ClassificationResult:
    count = len(nodes)
    nested = any(n.child_count > 0 for n in nodes)
    strokes = any(has_unconverted_stroke(n) for n in nodes)
    well_formed = all(is_well_formed(n) for n in nodes)

    single_path = count == 1 and nodes[0].tag == "path"
    multiple_flat = count > 1 and well_formed and not strokes
    canonical = not nested and (single_path or multiple_flat)

    reason = None
    if not canonical:
        reasons = []
        if count == 0:
            reasons.append(REASON_EMPTY)
        if count > 1 and not multiple_flat:
            reasons.append(REASON_MULTIPLE)
        if strokes:
            reasons.append(REASON_STROKES)
        if count == 1 and not single_path:
            reasons.append(REASON_SINGLE_NON_PATH)
        if nested:
            reasons.append(REASON_NESTED)
        reason = ", ".join(reasons)

    return ClassificationResult(
        is_canonical=canonical,
        shape_count=count,
        has_unconverted_strokes=strokes,
        has_nested_geometry=nested,
        diagnostic_reason=reason,
    )
