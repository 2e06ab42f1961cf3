"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SynthesizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
    name: str = Field(..., description="Kebab-case icon name, e.g. arrow-right")


class BatchSynthesizeRequest(BaseModel):
    icons: list[SynthesizeRequest] = Field(..., description="Icons to synthesize, in order")


class FlattenRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
