"""Markup-level flattening: merge all principal geometry into one path.

Stroked lines, circles and rects are outlined first. Every other primitive
contributes its fill geometry, so stroked paths, polygons, polylines and
ellipses keep their centre-line data (same gap as the outliner).
"""

from __future__ import annotations

import logging

from iconsmith.engine.outliner import outline, shape_to_path
from iconsmith.models.icon import PathNode, ShapeNode
from iconsmith.svg.paint import CURRENT_COLOR
from iconsmith.svg.parser import SvgParser, create_parser
from iconsmith.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


def path_data_for(node: ShapeNode) -> str | None:
    if isinstance(node, PathNode):
        return node.d.strip() or None
    return outline(node) or shape_to_path(node)


def flatten(markup: str, parser: SvgParser | None = None) -> str:
    """Single-path SVG (currentColor, even-odd) or the markup unchanged.

    Markup with fewer than two pieces of path data is already as flat as
    this step can make it and is returned as-is, as is markup the engine
    fails on.
    """
    try:
        document = (parser or create_parser()).parse(markup)
        pieces = [d for d in (path_data_for(n) for n in document.shapes) if d]

        if len(pieces) < 2:
            if not pieces:
                logger.warning("No path data found, returning markup unchanged")
            return markup

        logger.info("Flattened %d shape(s) into a single path", len(pieces))
        return serialize_svg(
            [
                {
                    "tag": "path",
                    "d": " ".join(pieces),
                    "fill": CURRENT_COLOR,
                    "fill-rule": "evenodd",
                }
            ],
            viewbox=document.viewbox,
        )
    except Exception:
        logger.exception("Error flattening icon, returning markup unchanged")
        return markup
