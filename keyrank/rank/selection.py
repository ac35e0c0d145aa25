"""
Top-N keyword selection from a score table.
"""

from __future__ import annotations

from typing import List, Mapping, Tuple

DEFAULT_MIN_KEYWORDS = 5
DEFAULT_MAX_KEYWORDS = 20
WORDS_PER_KEYWORD = 5


def top_n_for(
    word_count: int,
    minimum: int = DEFAULT_MIN_KEYWORDS,
    maximum: int = DEFAULT_MAX_KEYWORDS,
    ratio: int = WORDS_PER_KEYWORD,
) -> int:
    """One keyword per ``ratio`` cleaned words, clamped to [minimum, maximum]."""
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must not exceed maximum ({maximum})")
    if ratio < 1:
        raise ValueError(f"ratio must be >= 1, got {ratio}")
    return max(minimum, min(maximum, word_count // ratio))


def select_top(scores: Mapping[str, float], top_n: int) -> List[Tuple[str, float]]:
    """
    Return the ``top_n`` highest-scoring (token, score) pairs.

    Equal scores keep the order of ``scores``, which for tables produced by
    the scorer is the order tokens first appeared in the text.
    """
    if top_n < 0:
        raise ValueError(f"top_n must be >= 0, got {top_n}")
    position = {token: i for i, token in enumerate(scores)}
    ranked = sorted(scores.items(), key=lambda kv: (-kv[1], position[kv[0]]))
    return ranked[:top_n]
