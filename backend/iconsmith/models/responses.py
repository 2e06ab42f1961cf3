"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconsmith.models.icon import SynthesizedComponent


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    parser_strategies: list[str] = Field(default_factory=list)


class BatchSynthesizeResponse(BaseModel):
    components: list[SynthesizedComponent] = Field(default_factory=list)
    canonical_count: int = 0


class FlattenResponse(BaseModel):
    svg: str
    changed: bool = False
