"""
FastAPI application for the keyword API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_extractor
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the default extractor on startup."""
    app.state.extractor = build_extractor()
    yield


app = FastAPI(
    title="keyrank API",
    description="TextRank keyword extraction",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
