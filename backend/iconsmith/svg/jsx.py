"""SVG attribute → React prop conversion for the embeddable rendering."""

from __future__ import annotations

import re

_RENAMED = {
    "class": "className",
    "xlink:href": "xlinkHref",
    "xml:space": "xmlSpace",
    "xmlns:xlink": "xmlnsXlink",
}
# Passed through to the DOM unchanged by React
_VERBATIM_PREFIXES = ("data-", "aria-")
_SEPARATOR_RE = re.compile(r"[-:]([a-z])")


def to_jsx_name(name: str) -> str:
    """stroke-width → strokeWidth, class → className, aria-* stays."""
    if name in _RENAMED:
        return _RENAMED[name]
    if name.startswith(_VERBATIM_PREFIXES):
        return name
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


def style_to_object(style: str) -> str:
    """CSS declarations → JSX style object: "fill-opacity: .5" → {{ fillOpacity: ".5" }}."""
    entries = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop, value = prop.strip(), value.strip()
        if not prop or not value:
            continue
        # Custom properties keep their name and need quoting as a key
        key = f'"{prop}"' if prop.startswith("--") else to_jsx_name(prop)
        value = value.replace("\\", "\\\\").replace('"', '\\"')
        entries.append(f'{key}: "{value}"')
    if not entries:
        return "{{}}"
    return "{{ " + ", ".join(entries) + " }}"
