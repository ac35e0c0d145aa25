"""
Build the keyword extractor for the API (used in lifespan).
"""

from __future__ import annotations

import logging

from keyrank.rank import KeywordExtractor, TextRankConfig

logger = logging.getLogger(__name__)


def build_extractor() -> KeywordExtractor:
    """Load defaults from KEYRANK_* env vars; fall back to built-ins if they are invalid."""
    config = TextRankConfig.from_env()
    try:
        return KeywordExtractor(config)
    except ValueError as e:
        logger.warning("Invalid keyword config from environment, using defaults: %s", e)
        return KeywordExtractor(TextRankConfig())
