"""Number parsing/formatting for SVG attribute values. No engine imports."""

from __future__ import annotations

import math
import re

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_UNIT_SUFFIXES = ("px", "pt")


def parse_number(value: str | None, default: float = 0.0) -> float:
    """Parse an SVG length. Missing, unparsable or non-finite → default.

    A trailing px/pt unit is accepted: "24px" → 24.0.
    """
    if value is None:
        return default
    text = value.strip()
    for suffix in _UNIT_SUFFIXES:
        if text.endswith(suffix):
            text = text[: -len(suffix)].strip()
            break
    try:
        number = float(text)
    except ValueError:
        return default
    if not math.isfinite(number):
        return default
    return number


def parse_points(value: str | None) -> tuple[tuple[float, float], ...]:
    """Parse a polygon/polyline points list. A dangling odd coordinate is dropped."""
    if not value:
        return ()
    numbers = [float(n) for n in _NUMBER_RE.findall(value)]
    return tuple(zip(numbers[0::2], numbers[1::2]))


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate.

    4.0 → "4", -0.0 → "0", 0.1 + 0.2 → "0.30000000000000004".
    """
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
