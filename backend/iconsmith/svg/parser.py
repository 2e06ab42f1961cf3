"""SVG parser: facade over the lxml and text-pattern strategies.

Converts raw SVG markup → IconDocument holding the principal shapes. The
facade prefers structured parsing and falls back to the text strategy on a
structural problem; callers never learn which strategy ran. Parsing is
total: when every strategy fails the default empty document is returned.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Literal, Protocol

from iconsmith.engine.classifier import select_principal
from iconsmith.models.icon import IconDocument
from iconsmith.svg.dom_strategy import DomParserStrategy
from iconsmith.svg.elements import SvgParseError
from iconsmith.svg.regex_strategy import RegexParserStrategy

logger = logging.getLogger(__name__)

ParserMode = Literal["auto", "dom", "regex"]

# Not representable in XML or UTF-8 text
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


class ParserStrategy(Protocol):
    name: str

    def parse(self, markup: str) -> IconDocument:
        """Return the non-helper nodes; raise SvgParseError on bad structure."""
        ...


class SvgParser:
    """Runs strategies in order until one accepts the markup."""

    def __init__(self, strategies: Sequence[ParserStrategy]) -> None:
        if not strategies:
            raise ValueError("SvgParser needs at least one strategy")
        self.strategies = tuple(strategies)

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self.strategies]

    def parse(self, markup: str) -> IconDocument:
        markup = _LONE_SURROGATE_RE.sub("\ufffd", markup)
        for strategy in self.strategies:
            try:
                document = strategy.parse(markup)
            except SvgParseError as e:
                logger.warning("%s parser rejected markup, trying next strategy: %s", strategy.name, e)
                continue
            shapes = select_principal(document.shapes)
            logger.info("Parsed icon (%s): %d principal element(s), viewBox %r", strategy.name, len(shapes), document.viewbox)
            return IconDocument(viewbox=document.viewbox, shapes=tuple(shapes))

        logger.warning("No parser strategy accepted the markup, using empty document")
        return IconDocument()


def create_parser(mode: ParserMode = "auto") -> SvgParser:
    """Select strategies once, at construction.

    "auto" prefers lxml and keeps the text strategy as fallback; "regex" is
    for environments where structured parsing is unavailable; "dom" disables
    the fallback.
    """
    if mode == "regex":
        return SvgParser([RegexParserStrategy()])
    if mode == "dom":
        return SvgParser([DomParserStrategy()])
    if mode == "auto":
        return SvgParser([DomParserStrategy(), RegexParserStrategy()])
    raise ValueError(f"Unknown parser mode: {mode!r}")


def parse_svg(markup: str) -> IconDocument:
    """Parse with the default strategy order."""
    return create_parser().parse(markup)
