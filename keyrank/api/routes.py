"""
API routes: keywords, config, health.
"""

from __future__ import annotations

import asyncio
import dataclasses

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from keyrank.rank import KeywordExtractor, TextRankConfig

from .models import (
    ConfigResponse,
    HealthResponse,
    KeywordHit,
    KeywordRequest,
    KeywordResponse,
)

router = APIRouter(prefix="/api", tags=["api"])


def _get_extractor(request: Request) -> KeywordExtractor:
    extractor = getattr(request.app.state, "extractor", None)
    if extractor is None:
        extractor = KeywordExtractor()
        request.app.state.extractor = extractor
    return extractor


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check."""
    return HealthResponse(status="ok")


@router.get("/config", response_model=ConfigResponse)
async def config(request: Request) -> ConfigResponse:
    """Default extraction parameters used when a request does not override them."""
    return ConfigResponse(**_get_extractor(request).config.to_dict())


@router.post("/keywords", response_model=KeywordResponse)
async def keywords(request: Request, body: KeywordRequest) -> KeywordResponse | JSONResponse:
    """Rank the keywords of the posted text."""
    base = _get_extractor(request)
    overrides = {
        name: value
        for name, value in (
            ("damping_factor", body.damping_factor),
            ("window_size", body.window_size),
            ("iterations", body.iterations),
            ("top_n", body.top_n),
        )
        if value is not None
    }
    try:
        if overrides:
            cfg: TextRankConfig = dataclasses.replace(base.config, **overrides)
            extractor = KeywordExtractor(cfg, cleaner=base.cleaner)
        else:
            extractor = base
    except ValueError as e:
        return JSONResponse(status_code=422, content={"detail": str(e)})

    result = await asyncio.to_thread(extractor.extract_with_scores, body.text)
    return KeywordResponse(
        keywords=[KeywordHit(keyword=word, score=s) for word, s in result.keywords],
        token_count=result.token_count,
        node_count=result.node_count,
    )
