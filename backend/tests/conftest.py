"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconsmith.engine.pipeline import IconEngine


# Sample SVGs as exported from a design tool

ARROW_RIGHT_SVG = (
    '<svg viewBox="0 0 24 24"><rect width="24" height="24" fill="#ffffff"/>'
    '<path d="M5 12h14" fill="#000000"/></svg>'
)

DIAGONAL_LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <line x1="4" y1="4" x2="20" y2="20" stroke="#000" stroke-width="2"/>
</svg>'''

TWO_PATHS_ONE_STROKED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M4 4h16v16H4z" fill="#111111"/>
  <path d="M8 12h8" stroke="#000"/>
</svg>'''

TWO_FILLED_SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2h8v8H2z" fill="#222"/>
  <circle cx="16" cy="16" r="4" fill="#222"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <rect id="bg" x="0" y="0" width="24" height="24" fill="#fafafa"/>
  <g fill="#000">
    <path d="M3 3h6v6H3z"/>
    <path d="M15 15h6v6h-6z"/>
  </g>
</svg>'''

STROKED_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="9" stroke="#333333" stroke-width="2" fill="none"/>
</svg>'''

# Stroke-based icon set style: paint declared on the root only
LUCIDE_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

MIXED_ORDER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <rect x="2" y="2" width="4" height="4" fill="#000"/>
  <circle cx="16" cy="16" r="3" fill="#000"/>
  <path d="M10 10h2v2h-2z" fill="#000"/>
</svg>'''

MALFORMED_SVG = '<svg viewBox="0 0 24 24"><path d="M5 12h14" fill="#000"'


@pytest.fixture
def engine() -> IconEngine:
    return IconEngine()


@pytest.fixture
def regex_engine() -> IconEngine:
    from iconsmith.engine.config import EngineConfig

    return IconEngine(config=EngineConfig(parser_mode="regex"))
