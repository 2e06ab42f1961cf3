"""End-to-end tests for the icon engine."""

from __future__ import annotations

from iconsmith.config import Settings
from iconsmith.engine.config import EngineConfig
from iconsmith.engine.flatness import REASON_EMPTY, REASON_NESTED, REASON_STROKES
from iconsmith.engine.pipeline import IconEngine, icon_fingerprint, synthesize
from iconsmith.engine.synthesizer import PLACEHOLDER_PATH
from iconsmith.models.icon import IconDocument, PathNode
from iconsmith.svg.parser import SvgParser
from tests.conftest import (
    ARROW_RIGHT_SVG,
    DIAGONAL_LINE_SVG,
    GROUPED_SVG,
    LUCIDE_CIRCLE_SVG,
    MALFORMED_SVG,
    STROKED_CIRCLE_SVG,
    TWO_FILLED_SHAPES_SVG,
    TWO_PATHS_ONE_STROKED_SVG,
)


class _ExplodingStrategy:
    name = "exploding"

    def parse(self, markup: str) -> IconDocument:
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_arrow_right(engine):
    component = engine.synthesize(ARROW_RIGHT_SVG, "arrow-right")
    assert component.component_identifier == "ArrowRightIcon"
    assert component.is_canonical
    assert component.classification.diagnostic_reason is None
    assert component.classification.shape_count == 1

    # Helper rect dropped, fill folded to currentColor
    assert "<rect" not in component.preview_markup
    assert "#ffffff" not in component.embedded_markup
    assert "#000000" not in component.embedded_markup
    assert '          fill="currentColor"' in component.embedded_markup
    assert '          d="M5 12h14"' in component.embedded_markup


def test_stroked_line_is_outlined_into_single_path(engine):
    document = engine.normalize(DIAGONAL_LINE_SVG)
    assert len(document.shapes) == 1
    path = document.shapes[0]
    assert isinstance(path, PathNode)
    assert path.d.count(" L ") == 3
    assert path.d.endswith(" Z")

    component = engine.synthesize(DIAGONAL_LINE_SVG, "slash")
    assert component.is_canonical
    assert not component.classification.has_unconverted_strokes
    assert "stroke" not in component.preview_markup
    assert 'fill-rule="evenodd"' in component.preview_markup
    assert 'fillRule="evenodd"' in component.embedded_markup


def test_stroked_circle_becomes_ring(engine):
    component = engine.synthesize(STROKED_CIRCLE_SVG, "ring")
    assert component.is_canonical
    assert "<circle" not in component.preview_markup
    assert "A 10 10 0 1 1" in component.preview_markup
    assert "A 8 8 0 1 0" in component.preview_markup


def test_stroked_path_is_not_outlined(engine):
    component = engine.synthesize(TWO_PATHS_ONE_STROKED_SVG, "box")
    assert not component.is_canonical
    assert component.classification.has_unconverted_strokes
    assert REASON_STROKES in component.classification.diagnostic_reason
    assert 'stroke="currentColor"' in component.preview_markup


def test_multiple_filled_elements(engine):
    component = engine.synthesize(TWO_FILLED_SHAPES_SVG, "pair")
    assert component.is_canonical
    assert component.classification.shape_count == 2


def test_nested_group(engine):
    component = engine.synthesize(GROUPED_SVG, "grid")
    assert not component.is_canonical
    assert component.classification.has_nested_geometry
    assert REASON_NESTED in component.classification.diagnostic_reason


def test_root_level_paint_is_not_inherited(engine):
    # Paint declared only on <svg> leaves the circle without a stroke of its own
    component = engine.synthesize(LUCIDE_CIRCLE_SVG, "circle")
    assert not component.is_canonical
    assert "<circle" in component.preview_markup


# ---------------------------------------------------------------------------
# Totality and determinism
# ---------------------------------------------------------------------------

def test_malformed_markup_never_raises(engine):
    component = engine.synthesize(MALFORMED_SVG, "broken")
    assert component.component_identifier == "BrokenIcon"
    assert not component.is_canonical
    assert component.classification.diagnostic_reason == REASON_EMPTY


def test_garbage_markup(engine):
    component = engine.synthesize("<<<>>>", "junk")
    assert not component.is_canonical


def test_unencodable_markup_is_still_parsed(engine):
    svg = '<svg viewBox="0 0 24 24"><path d="M5 12h14" fill="#000" data-x="\ud800"/></svg>'
    component = engine.synthesize(svg, "arrow-right")
    assert component.is_canonical
    assert component.classification.shape_count == 1
    assert PLACEHOLDER_PATH not in component.source_definition


def test_unexpected_fault_yields_fallback():
    engine = IconEngine(parser=SvgParser([_ExplodingStrategy()]))
    component = engine.synthesize(ARROW_RIGHT_SVG, "arrow-right")
    assert component.component_identifier == "ArrowRightIcon"
    assert not component.is_canonical
    assert PLACEHOLDER_PATH in component.source_definition


def test_idempotent(engine):
    first = engine.synthesize(TWO_PATHS_ONE_STROKED_SVG, "box")
    second = engine.synthesize(TWO_PATHS_ONE_STROKED_SVG, "box")
    assert first == second
    assert first.source_definition == second.source_definition


def test_independent_engines_agree():
    assert IconEngine().synthesize(DIAGONAL_LINE_SVG, "slash") == IconEngine().synthesize(DIAGONAL_LINE_SVG, "slash")


def test_regex_engine_matches_dom_engine(engine, regex_engine):
    for svg in (ARROW_RIGHT_SVG, DIAGONAL_LINE_SVG, STROKED_CIRCLE_SVG, TWO_FILLED_SHAPES_SVG):
        assert regex_engine.synthesize(svg, "icon") == engine.synthesize(svg, "icon")


def test_module_level_synthesize():
    assert synthesize(ARROW_RIGHT_SVG, "arrow-right").is_canonical


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------

class _CountingEngine(IconEngine):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def synthesize(self, markup, name):
        self.calls += 1
        return super().synthesize(markup, name)


def test_synthesize_many_preserves_order(engine):
    items = [(ARROW_RIGHT_SVG, "arrow-right"), (GROUPED_SVG, "grid")]
    results = engine.synthesize_many(items)
    assert [r.component_identifier for r in results] == ["ArrowRightIcon", "GridIcon"]
    assert [r.is_canonical for r in results] == [True, False]


def test_synthesize_many_uses_caller_cache():
    engine = _CountingEngine()
    cache = {}
    items = [(ARROW_RIGHT_SVG, "arrow-right"), (ARROW_RIGHT_SVG, "arrow-right"), (ARROW_RIGHT_SVG, "arrow-left")]

    first = engine.synthesize_many(items, cache=cache)
    assert engine.calls == 2
    assert len(cache) == 2

    second = engine.synthesize_many(items, cache=cache)
    assert engine.calls == 2
    assert first == second


def test_fingerprint():
    assert icon_fingerprint("<svg/>", "a") == icon_fingerprint("<svg/>", "a")
    assert icon_fingerprint("<svg/>", "a") != icon_fingerprint("<svg/>", "b")
    assert icon_fingerprint("x", "ab") != icon_fingerprint("bx", "a")


def test_parser_mode_from_settings():
    config = EngineConfig.from_settings(Settings(iconsmith_parser="regex"))
    assert config.parser_mode == "regex"
    assert IconEngine(config=config).parser.strategy_names == ["regex"]
    assert IconEngine().parser.strategy_names == ["dom", "regex"]
