"""Write clean SVG output from element definitions."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from iconsmith.models.icon import DEFAULT_VIEWBOX
from iconsmith.utils.math_helpers import format_number, parse_number


def serialize_svg(
    elements: list[dict[str, str]],
    viewbox: str = DEFAULT_VIEWBOX,
    root_attributes: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup; width/height follow the view box unless given."""
    parts = viewbox.split()
    root = {
        "xmlns": "http://www.w3.org/2000/svg",
        "viewBox": viewbox,
    }
    if len(parts) == 4:
        root["width"] = format_number(parse_number(parts[2]))
        root["height"] = format_number(parse_number(parts[3]))
    root.update(root_attributes or {})

    lines = [f"<svg {_attr_str(root)}>"]
    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        lines.append(f"  <{tag} {_attr_str(attrs)} />")
    lines.append("</svg>")
    return "\n".join(lines)


def _attr_str(attrs: dict[str, str]) -> str:
    return " ".join(f"{k}={quoteattr(v)}" for k, v in attrs.items())
