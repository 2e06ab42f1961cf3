"""Structured SVG parsing over lxml."""

from __future__ import annotations

import logging

from lxml import etree

from iconsmith.engine.classifier import drop_helpers
from iconsmith.models.icon import DEFAULT_VIEWBOX, IconDocument
from iconsmith.svg.elements import SvgParseError, build_node

logger = logging.getLogger(__name__)

_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class DomParserStrategy:
    """Reads the first <svg> element and its direct child elements."""

    name = "dom"

    def parse(self, markup: str) -> IconDocument:
        if not markup.strip():
            raise SvgParseError("empty markup")
        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
        try:
            root = etree.fromstring(markup.encode("utf-8"), parser=parser)
        except UnicodeEncodeError as e:
            raise SvgParseError(f"markup is not encodable as UTF-8: {e}") from e
        except etree.XMLSyntaxError as e:
            raise SvgParseError(f"malformed markup: {e}") from e

        svg = _find_svg(root)
        if svg is None:
            raise SvgParseError("no <svg> element found")

        viewbox = (svg.get("viewBox") or "").strip() or DEFAULT_VIEWBOX

        nodes = []
        for child in _element_children(svg):
            tag = etree.QName(child).localname
            child_count = len(_element_children(child))
            nodes.append(build_node(tag, _attributes(child), child_count))

        shapes = drop_helpers(nodes)
        logger.debug("DOM parse: %d child element(s), %d after helper filtering", len(nodes), len(shapes))
        return IconDocument(viewbox=viewbox, shapes=tuple(shapes))


def _find_svg(root: etree._Element) -> etree._Element | None:
    for element in root.iter(etree.Element):
        if etree.QName(element).localname == "svg":
            return element
    return None


def _element_children(element: etree._Element) -> list[etree._Element]:
    """Child elements only; processing instructions and entities are skipped."""
    return [c for c in element if isinstance(c.tag, str)]


def _attributes(element: etree._Element) -> dict[str, str]:
    """Attributes in document order, namespaced keys mapped back to prefix:name."""
    prefixes = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}
    prefixes[_XML_NAMESPACE] = "xml"

    attrs: dict[str, str] = {}
    for key, value in element.attrib.items():
        if key.startswith("{"):
            qname = etree.QName(key)
            prefix = prefixes.get(qname.namespace)
            key = f"{prefix}:{qname.localname}" if prefix else qname.localname
        attrs[key] = value
    return attrs
