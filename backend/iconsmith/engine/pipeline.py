"""Engine orchestrator: markup + name → SynthesizedComponent.

parse → drop helpers → outline stroked primitives → evaluate flatness →
render. The engine holds no state between calls: identical (markup, name)
always yield an identical component.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable, MutableMapping

from iconsmith.config import settings
from iconsmith.engine.config import EngineConfig
from iconsmith.engine.flatness import evaluate
from iconsmith.engine.flatten import flatten
from iconsmith.engine.outliner import outline_node
from iconsmith.engine.synthesizer import build_component, fallback_component
from iconsmith.models.icon import IconDocument, SynthesizedComponent
from iconsmith.svg.parser import SvgParser, create_parser

logger = logging.getLogger(__name__)


class IconEngine:
    """Normalizes and classifies icons. Safe to share across threads."""

    def __init__(
        self,
        parser: SvgParser | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.parser = parser or create_parser(self.config.parser_mode)

    def normalize(self, markup: str) -> IconDocument:
        """Parsed principal shapes with stroked line/circle/rect outlined."""
        document = self.parser.parse(markup)
        shapes = tuple(outline_node(n) for n in document.shapes)
        return IconDocument(viewbox=document.viewbox, shapes=shapes)

    def synthesize(self, markup: str, name: str) -> SynthesizedComponent:
        """Never raises: an unexpected fault yields the placeholder component."""
        try:
            document = self.normalize(markup)
            classification = evaluate(document.shapes)
            if not classification.is_canonical:
                logger.info("Icon %r needs flattening: %s", name, classification.diagnostic_reason)
            return build_component(document, classification, name, self.config)
        except Exception:
            logger.exception("Error synthesizing icon %r, using fallback component", name)
            return fallback_component(name, self.config)

    def synthesize_many(
        self,
        items: Iterable[tuple[str, str]],
        cache: MutableMapping[str, SynthesizedComponent] | None = None,
    ) -> list[SynthesizedComponent]:
        """Synthesize (markup, name) pairs in order.

        The optional cache is owned by the caller and keyed by
        icon_fingerprint(); hits skip synthesis entirely.
        """
        results = []
        hits = 0
        for markup, name in items:
            if cache is None:
                results.append(self.synthesize(markup, name))
                continue
            key = icon_fingerprint(markup, name)
            component = cache.get(key)
            if component is None:
                component = self.synthesize(markup, name)
                cache[key] = component
            else:
                hits += 1
            results.append(component)

        logger.info("Synthesized %d icon(s) (%d cache hit(s))", len(results), hits)
        return results

    def flatten(self, markup: str) -> str:
        return flatten(markup, parser=self.parser)


def icon_fingerprint(markup: str, name: str) -> str:
    """Stable cache key for one (markup, name) pair."""
    digest = hashlib.sha256()
    digest.update(name.encode("utf-8"))
    digest.update(b"\x00")
    digest.update(markup.encode("utf-8"))
    return digest.hexdigest()


def create_engine() -> IconEngine:
    """Engine configured from application settings."""
    return IconEngine(config=EngineConfig.from_settings(settings))


_default_engine: IconEngine | None = None


def get_engine() -> IconEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = create_engine()
    return _default_engine


def synthesize(markup: str, name: str) -> SynthesizedComponent:
    """Module-level entry point using the settings-configured engine."""
    return get_engine().synthesize(markup, name)
