"""Engine configuration: parser choice and source template knobs."""

from __future__ import annotations

from dataclasses import dataclass

from iconsmith.config import Settings
from iconsmith.svg.parser import ParserMode


@dataclass(frozen=True)
class EngineConfig:
    """Held constant for the life of an engine, so output stays a pure
    function of (markup, name)."""

    # "auto" (lxml, text fallback), "dom" (lxml only), "regex" (text only)
    parser_mode: ParserMode = "auto"

    # Appended to the PascalCase name: arrow-right → ArrowRightIcon
    component_suffix: str = "Icon"

    # Comment block at the top of every generated component
    license_header: str = "(c) Copyright 2025. All rights reserved."

    # Fixed width/height of the preview rendering
    preview_size: int = 24

    @classmethod
    def from_settings(cls, settings: Settings) -> EngineConfig:
        return cls(
            parser_mode=settings.iconsmith_parser,
            license_header=settings.iconsmith_license_header,
        )
