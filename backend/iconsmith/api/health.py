"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from iconsmith.dependencies import get_icon_engine
from iconsmith.engine.pipeline import IconEngine
from iconsmith.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(engine: IconEngine = Depends(get_icon_engine)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        parser_strategies=engine.parser.strategy_names,
    )
