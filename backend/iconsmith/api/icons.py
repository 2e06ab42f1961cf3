"""POST /api/icons/*: component synthesis and flattening."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from iconsmith.dependencies import get_icon_engine
from iconsmith.engine.pipeline import IconEngine
from iconsmith.models.icon import SynthesizedComponent
from iconsmith.models.requests import BatchSynthesizeRequest, FlattenRequest, SynthesizeRequest
from iconsmith.models.responses import BatchSynthesizeResponse, FlattenResponse

router = APIRouter(prefix="/icons")


@router.post("/synthesize", response_model=SynthesizedComponent)
def synthesize_icon(
    req: SynthesizeRequest,
    engine: IconEngine = Depends(get_icon_engine),
) -> SynthesizedComponent:
    return engine.synthesize(req.svg, req.name)


@router.post("/batch", response_model=BatchSynthesizeResponse)
def synthesize_batch(
    req: BatchSynthesizeRequest,
    engine: IconEngine = Depends(get_icon_engine),
) -> BatchSynthesizeResponse:
    components = engine.synthesize_many((icon.svg, icon.name) for icon in req.icons)
    return BatchSynthesizeResponse(
        components=components,
        canonical_count=sum(1 for c in components if c.is_canonical),
    )


@router.post("/flatten", response_model=FlattenResponse)
def flatten_icon(
    req: FlattenRequest,
    engine: IconEngine = Depends(get_icon_engine),
) -> FlattenResponse:
    flattened = engine.flatten(req.svg)
    return FlattenResponse(svg=flattened, changed=flattened != req.svg)
