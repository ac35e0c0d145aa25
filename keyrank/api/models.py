"""
Request and response models for the keyword API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class KeywordRequest(BaseModel):
    """Request body for POST /api/keywords."""

    text: str = Field(..., description="Text to extract keywords from")
    damping_factor: Optional[float] = Field(None, ge=0.0, le=1.0)
    window_size: Optional[int] = Field(None, ge=1)
    iterations: Optional[int] = Field(None, ge=0, le=10000)
    top_n: Optional[int] = Field(None, ge=0, le=1000, description="Overrides the length-based keyword count")


class KeywordHit(BaseModel):
    """Single ranked keyword."""

    keyword: str
    score: float


class KeywordResponse(BaseModel):
    """Response for POST /api/keywords."""

    keywords: List[KeywordHit] = Field(default_factory=list)
    token_count: int = 0
    node_count: int = 0


class ConfigResponse(BaseModel):
    """Response for GET /api/config."""

    damping_factor: float
    window_size: int
    iterations: int
    top_n: Optional[int] = None
    min_keywords: int
    max_keywords: int
    tokenizer: str


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
