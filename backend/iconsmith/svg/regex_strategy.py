"""Text-pattern SVG parsing: for deployments without structured parsing.

Matches self-closing primitive tags anywhere in the markup. Element order is
paths, then circles, then rects, then ellipse/line/polygon/polyline, which is
not document order. Nesting cannot be detected: every node has child_count 0.
"""

from __future__ import annotations

import logging
import re

from iconsmith.engine.classifier import drop_helpers
from iconsmith.models.icon import DEFAULT_VIEWBOX, IconDocument
from iconsmith.svg.elements import build_node

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_PATH_TAG_RE = re.compile(r"<path\b[^>]*/>")
_CIRCLE_TAG_RE = re.compile(r"<circle\b[^>]*/>")
_RECT_TAG_RE = re.compile(r"<rect\b[^>]*/>")
_OTHER_TAG_RE = re.compile(r"<(?:ellipse|line|polygon|polyline)\b[^>]*/>")
_TAG_NAME_RE = re.compile(r"<([\w:-]+)")
_ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# XML line-end handling then attribute-value normalization: each becomes one space
_WHITESPACE_RE = re.compile(r"\r\n?|[\t\n]")
_REFERENCE_RE = re.compile(r"&(?:#(\d+)|#[xX]([0-9a-fA-F]+)|(amp|lt|gt|quot|apos));")
_ENTITIES = {"amp": "&", "lt": "<", "gt": ">", "quot": '"', "apos": "'"}


class RegexParserStrategy:
    name = "regex"

    def parse(self, markup: str) -> IconDocument:
        viewbox = DEFAULT_VIEWBOX
        vb_match = _VIEWBOX_RE.search(markup)
        if vb_match and vb_match.group(1).strip():
            viewbox = vb_match.group(1).strip()

        tags: list[str] = []
        for pattern in (_PATH_TAG_RE, _CIRCLE_TAG_RE, _RECT_TAG_RE, _OTHER_TAG_RE):
            tags.extend(m.group(0) for m in pattern.finditer(markup))

        nodes = []
        for tag_text in tags:
            name = _TAG_NAME_RE.match(tag_text).group(1)
            nodes.append(build_node(name, extract_attrs(tag_text)))

        shapes = drop_helpers(nodes)
        logger.debug("Regex parse: %d tag(s), %d after helper filtering", len(nodes), len(shapes))
        return IconDocument(viewbox=viewbox, shapes=tuple(shapes))


def extract_attrs(tag_text: str) -> dict[str, str]:
    """Attributes of one tag string, values normalized as an XML parser would."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = _REFERENCE_RE.sub(_decode_reference, _WHITESPACE_RE.sub(" ", value))
    return attrs


def _decode_reference(m: re.Match[str]) -> str:
    if m.group(3):
        return _ENTITIES[m.group(3)]
    codepoint = int(m.group(1)) if m.group(1) else int(m.group(2), 16)
    if codepoint > 0x10FFFF:
        return m.group(0)
    return chr(codepoint)
