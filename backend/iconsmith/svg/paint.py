"""Paint value rules shared by the classifier, evaluator and synthesizer."""

from __future__ import annotations

import re

CURRENT_COLOR = "currentColor"

_INVISIBLE = ("none", "transparent")
_ZERO_ALPHA_RE = re.compile(r"^rgba\(\s*0\s*,\s*0\s*,\s*0\s*,\s*0\s*\)$", re.IGNORECASE)
# Reference / function-valued colors are never folded to currentColor
_PRESERVED_PREFIXES = ("url(", "hsl(", "rgb(")


def is_visible_paint(value: str | None) -> bool:
    """True when a fill/stroke value actually paints something."""
    if value is None:
        return False
    text = value.strip()
    return bool(text) and text not in _INVISIBLE


def normalize_paint(value: str) -> str:
    """Fold a solid color to the current-color sentinel.

    none, transparent, zero-alpha rgba and url()/hsl()/rgb() values are left
    untouched so masks, gradients and invisible geometry survive.
    """
    text = value.strip()
    if text in _INVISIBLE or _ZERO_ALPHA_RE.match(text):
        return value
    if text.startswith(_PRESERVED_PREFIXES):
        return value
    return CURRENT_COLOR
