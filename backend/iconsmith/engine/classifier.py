"""Helper vs principal geometry.

Exported icon art often carries an invisible full-bounds backing rectangle
used for canvas alignment. It must never contribute path data or count
toward flatness.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from iconsmith.models.icon import RectNode, ShapeNode
from iconsmith.svg.elements import SUPPORTED_TAGS

logger = logging.getLogger(__name__)

_HELPER_FILLS = ("#ffffff", "white", "#fff")
_HELPER_KEYWORDS = ("helper", "background", "bg")
# Canvas size of the icon frame; a rect exactly this big is a backing plate
_HELPER_RECT_SIZE = 24.0


def is_helper(node: ShapeNode) -> bool:
    if isinstance(node, RectNode):
        if node.fill is not None and node.fill.strip().lower() in _HELPER_FILLS:
            return True
        if node.width == _HELPER_RECT_SIZE and node.height == _HELPER_RECT_SIZE:
            return True

    identity = node.identity_text
    return any(keyword in identity for keyword in _HELPER_KEYWORDS)


def is_principal(node: ShapeNode) -> bool:
    return node.tag in SUPPORTED_TAGS and not is_helper(node)


def drop_helpers(nodes: Sequence[ShapeNode]) -> list[ShapeNode]:
    return [n for n in nodes if not is_helper(n)]


def select_principal(nodes: Sequence[ShapeNode]) -> list[ShapeNode]:
    """Principal nodes, or every non-helper node when there are none.

    The fallback only avoids an empty icon; it does not make the result
    correct (a stray <g> will still be classified as nested geometry).
    """
    principal = [n for n in nodes if is_principal(n)]
    if principal:
        return principal

    fallback = drop_helpers(nodes)
    if fallback:
        logger.info("No principal icon elements, falling back to %d non-helper node(s)", len(fallback))
    return fallback
