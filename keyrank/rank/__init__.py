"""
TextRank keyword extraction.

- Text cleaning (lower-casing, splitting, stopword removal)
- Word co-occurrence graph
- Damped PageRank-style scoring
- Top-N keyword selection
"""

from .config import TextRankConfig
from .extractor import KeywordExtractor, KeywordResult, extract_keywords
from .graph import CoOccurrenceGraph
from .scorer import RankScorer, score
from .selection import select_top, top_n_for
from .utils import STOPWORDS, TextCleaner, iter_tokens

__all__ = [
    "CoOccurrenceGraph",
    "RankScorer",
    "score",
    "select_top",
    "top_n_for",
    "STOPWORDS",
    "TextCleaner",
    "iter_tokens",
    "TextRankConfig",
    "KeywordExtractor",
    "KeywordResult",
    "extract_keywords",
]
