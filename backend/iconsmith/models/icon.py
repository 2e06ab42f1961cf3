"""Icon document model: shape nodes, parsed documents, and engine results.

All models are frozen value objects: built once per normalization call and
never mutated afterwards.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VIEWBOX = "0 0 24 24"


class _Shape(BaseModel):
    """Fields shared by every shape variant."""

    model_config = ConfigDict(frozen=True)

    # Paint attributes; None means "unspecified", distinct from "none"
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None
    # Original attributes in document order (emission source)
    attributes: dict[str, str] = Field(default_factory=dict)
    # Number of child *elements* (a group disguised as a single node)
    child_count: int = 0

    @property
    def identity_text(self) -> str:
        """id + class text, lower-cased, for helper detection."""
        return " ".join(
            self.attributes.get(key, "") for key in ("id", "class")
        ).lower()


class PathNode(_Shape):
    tag: Literal["path"] = "path"
    d: str = ""


class LineNode(_Shape):
    tag: Literal["line"] = "line"
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0


class CircleNode(_Shape):
    tag: Literal["circle"] = "circle"
    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0


class RectNode(_Shape):
    tag: Literal["rect"] = "rect"
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class EllipseNode(_Shape):
    tag: Literal["ellipse"] = "ellipse"
    cx: float = 0.0
    cy: float = 0.0
    rx: float = 0.0
    ry: float = 0.0


class PolygonNode(_Shape):
    tag: Literal["polygon"] = "polygon"
    points: tuple[tuple[float, float], ...] = ()


class PolylineNode(_Shape):
    tag: Literal["polyline"] = "polyline"
    points: tuple[tuple[float, float], ...] = ()


class GenericNode(_Shape):
    """Any other direct child of <svg> (e.g. <g>). Only kept by the safety net."""

    tag: str


ShapeNode = (
    PathNode
    | LineNode
    | CircleNode
    | RectNode
    | EllipseNode
    | PolygonNode
    | PolylineNode
    | GenericNode
)


class IconDocument(BaseModel):
    """View box + principal shapes, in markup emission order."""

    model_config = ConfigDict(frozen=True)

    viewbox: str = DEFAULT_VIEWBOX
    shapes: tuple[ShapeNode, ...] = ()


class ClassificationResult(BaseModel):
    """Outcome of the flatness check."""

    model_config = ConfigDict(frozen=True)

    is_canonical: bool = False
    shape_count: int = 0
    has_unconverted_strokes: bool = False
    has_nested_geometry: bool = False
    diagnostic_reason: str | None = None


class SynthesizedComponent(BaseModel):
    """The engine's sole output type."""

    model_config = ConfigDict(frozen=True)

    component_identifier: str
    source_definition: str
    embedded_markup: str
    preview_markup: str
    is_canonical: bool = False
    classification: ClassificationResult = Field(default_factory=ClassificationResult)
