"""
Configuration for TextRank keyword extraction.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .scorer import DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS
from .selection import DEFAULT_MAX_KEYWORDS, DEFAULT_MIN_KEYWORDS
from .utils import SPLIT_PATTERNS

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]
ENV_PREFIX = "KEYRANK_"
DEFAULT_WINDOW_SIZE = 4


def load_env_file(path: Path | None = None) -> bool:
    """Load a .env file (project root by default) without overriding the environment."""
    env_file = path or ROOT / ".env"
    if env_file.exists():
        return load_dotenv(env_file)
    return False


def _get_env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s%s=%r", ENV_PREFIX, name, value)
        return default


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s%s=%r", ENV_PREFIX, name, value)
        return default


@dataclass
class TextRankConfig:
    """Settings for graph construction, scoring and keyword selection."""

    damping_factor: float = DEFAULT_DAMPING_FACTOR
    window_size: int = DEFAULT_WINDOW_SIZE
    iterations: int = DEFAULT_ITERATIONS
    top_n: Optional[int] = None
    min_keywords: int = DEFAULT_MIN_KEYWORDS
    max_keywords: int = DEFAULT_MAX_KEYWORDS
    tokenizer: str = "word"

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> "TextRankConfig":
        """Build a config from KEYRANK_* environment variables."""
        if load_dotenv_file:
            load_env_file()
        return cls(
            damping_factor=_get_env_float("DAMPING_FACTOR", DEFAULT_DAMPING_FACTOR),
            window_size=_get_env_int("WINDOW_SIZE", DEFAULT_WINDOW_SIZE),
            iterations=_get_env_int("ITERATIONS", DEFAULT_ITERATIONS),
            top_n=_get_env_int("TOP_N", None),
            min_keywords=_get_env_int("MIN_KEYWORDS", DEFAULT_MIN_KEYWORDS),
            max_keywords=_get_env_int("MAX_KEYWORDS", DEFAULT_MAX_KEYWORDS),
            tokenizer=os.getenv(ENV_PREFIX + "TOKENIZER", "word").strip().lower() or "word",
        )

    def validate(self) -> "TextRankConfig":
        if not 0.0 <= self.damping_factor <= 1.0:
            raise ValueError(f"damping_factor must be within [0, 1], got {self.damping_factor}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")
        if self.top_n is not None and self.top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {self.top_n}")
        if self.min_keywords < 0 or self.min_keywords > self.max_keywords:
            raise ValueError(
                f"keyword bounds must satisfy 0 <= min_keywords <= max_keywords, "
                f"got {self.min_keywords}..{self.max_keywords}"
            )
        if self.tokenizer not in SPLIT_PATTERNS:
            raise ValueError(
                f"unknown tokenizer {self.tokenizer!r}; expected one of {sorted(SPLIT_PATTERNS)}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
