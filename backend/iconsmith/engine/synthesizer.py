"""Component synthesis: principal shapes + name → React component source.

Two renderings come from the same node list: the embeddable one carries the
size/className/ref/props template tokens and React prop names, the preview
one has fixed dimensions and plain SVG attributes for direct display.
"""

from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import escape

from iconsmith.engine.config import EngineConfig
from iconsmith.models.icon import (
    DEFAULT_VIEWBOX,
    ClassificationResult,
    IconDocument,
    ShapeNode,
    SynthesizedComponent,
)
from iconsmith.svg.jsx import style_to_object, to_jsx_name
from iconsmith.svg.paint import CURRENT_COLOR, normalize_paint

PLACEHOLDER_PATH = "M12 2L2 7l10 5 10-5-10-5zM2 17l10 5 10-5M2 12l10 5 10-5"
REASON_SYNTHESIS_FAILED = "synthesis failed"

# Indentation inside the generated `return (...)` block
_CHILD_INDENT = " " * 8
_ATTR_INDENT = " " * 10
_SVG_NS = "http://www.w3.org/2000/svg"
_PAINT_ATTRS = ("fill", "stroke")
_ATTR_ENTITIES = {'"': "&quot;"}


def _quote(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


def component_identifier(name: str, suffix: str = "Icon") -> str:
    """arrow-right → ArrowRightIcon."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-")) + suffix


def split_attribute_text(text: str) -> list[str]:
    """Split `a="x y" b={{ c: 1 }}` on spaces outside quotes and braces."""
    tokens: list[str] = []
    current: list[str] = []
    quote = ""
    depth = 0

    for char in text:
        if quote:
            current.append(char)
            if char == quote:
                quote = ""
        elif char in ("'", '"'):
            quote = char
            current.append(char)
        elif char == "{":
            depth += 1
            current.append(char)
        elif char == "}":
            depth = max(0, depth - 1)
            current.append(char)
        elif char.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def attribute_text(node: ShapeNode, jsx: bool = False) -> str:
    """Attributes in document order with fill/stroke folded to currentColor."""
    parts = []
    for key, value in node.attributes.items():
        if key in _PAINT_ATTRS:
            value = normalize_paint(value)
        if jsx:
            if key == "style":
                parts.append(f"style={style_to_object(value)}")
                continue
            key = to_jsx_name(key)
        parts.append(f'{key}="{_quote(value)}"')
    return " ".join(parts)


def format_element(node: ShapeNode, jsx: bool = False) -> str:
    """Paths get one attribute per line for readability; others one line."""
    text = attribute_text(node, jsx=jsx)
    if node.tag == "path":
        attrs = "".join(f"\n{_ATTR_INDENT}{token}" for token in split_attribute_text(text))
        return f"<path{attrs}\n{_CHILD_INDENT}/>"
    if not text:
        return f"<{node.tag} />"
    return f"<{node.tag} {text} />"


def render_children(nodes: Sequence[ShapeNode], jsx: bool = False) -> str:
    return f"\n{_CHILD_INDENT}".join(format_element(n, jsx=jsx) for n in nodes)


def render_embedded(viewbox: str, children: str) -> str:
    return (
        "<svg\n"
        "        width={size || 24}\n"
        "        height={size || 24}\n"
        f'        viewBox="{_quote(viewbox)}"\n'
        f'        fill="{CURRENT_COLOR}"\n'
        f'        xmlns="{_SVG_NS}"\n'
        "        className={className}\n"
        '        aria-hidden="true"\n'
        "        ref={ref}\n"
        "        {...props}\n"
        "      >\n"
        f"        {children}\n"
        "      </svg>"
    )


def render_preview(viewbox: str, children: str, size: int = 24) -> str:
    return (
        "<svg\n"
        f'        width="{size}"\n'
        f'        height="{size}"\n'
        f'        viewBox="{_quote(viewbox)}"\n'
        f'        fill="{CURRENT_COLOR}"\n'
        f'        xmlns="{_SVG_NS}"\n'
        '        aria-hidden="true"\n'
        "      >\n"
        f"        {children}\n"
        "      </svg>"
    )


def render_source(identifier: str, embedded: str, license_header: str, fallback: bool = False) -> str:
    """Full component module: header, typed props, memo, displayName, exports."""
    note = "Auto-generated icon component (fallback)" if fallback else "Auto-generated icon component"
    return (
        "/**\n"
        f" * {license_header}\n"
        " */\n"
        "\n"
        'import React, { memo } from "react";\n'
        "\n"
        'import type { IconProps } from "./types";\n'
        f"// {note}\n"
        f"export const {identifier}: React.NamedExoticComponent<IconProps> = memo(\n"
        f"  function {identifier}({{ size = 24, className, ref, ...props }}: IconProps) {{\n"
        "    return (\n"
        f"      {embedded}\n"
        "    );\n"
        "  },\n"
        ");\n"
        f'{identifier}.displayName = "{identifier}";\n'
        f"export {{ {identifier} as ReactComponent }};"
    )


def build_component(
    document: IconDocument,
    classification: ClassificationResult,
    name: str,
    config: EngineConfig | None = None,
) -> SynthesizedComponent:
    config = config or EngineConfig()
    identifier = component_identifier(name, config.component_suffix)
    embedded = render_embedded(document.viewbox, render_children(document.shapes, jsx=True))
    preview = render_preview(document.viewbox, render_children(document.shapes), config.preview_size)

    return SynthesizedComponent(
        component_identifier=identifier,
        source_definition=render_source(identifier, embedded, config.license_header),
        embedded_markup=embedded,
        preview_markup=preview,
        is_canonical=classification.is_canonical,
        classification=classification,
    )


def fallback_component(name: str, config: EngineConfig | None = None) -> SynthesizedComponent:
    """Renderable, compilable placeholder for input the engine choked on."""
    config = config or EngineConfig()
    identifier = component_identifier(name, config.component_suffix)
    glyph = f'<path d="{PLACEHOLDER_PATH}" />'
    embedded = render_embedded(DEFAULT_VIEWBOX, glyph)

    return SynthesizedComponent(
        component_identifier=identifier,
        source_definition=render_source(identifier, embedded, config.license_header, fallback=True),
        embedded_markup=embedded,
        preview_markup=render_preview(DEFAULT_VIEWBOX, glyph, config.preview_size),
        is_canonical=False,
        classification=ClassificationResult(diagnostic_reason=REASON_SYNTHESIS_FAILED),
    )
