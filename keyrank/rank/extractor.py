"""
Keyword extraction pipeline: clean text, build the graph, score, select.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import TextRankConfig
from .graph import CoOccurrenceGraph
from .scorer import score
from .selection import select_top, top_n_for
from .utils import TextCleaner

logger = logging.getLogger(__name__)


@dataclass
class KeywordResult:
    """Ranked keywords for one piece of text."""

    keywords: List[Tuple[str, float]] = field(default_factory=list)
    token_count: int = 0
    node_count: int = 0
    edge_count: int = 0

    @property
    def words(self) -> List[str]:
        return [word for word, _ in self.keywords]


class KeywordExtractor:
    """
    TextRank keyword extractor.

    The cleaner and config are fixed at construction; every call to
    ``extract`` builds its own graph and score table.
    """

    def __init__(
        self,
        config: Optional[TextRankConfig] = None,
        cleaner: Optional[TextCleaner] = None,
    ) -> None:
        self.config = (config or TextRankConfig()).validate()
        self.cleaner = cleaner or TextCleaner.named(self.config.tokenizer)

    def top_n(self, token_count: int) -> int:
        if self.config.top_n is not None:
            return self.config.top_n
        return top_n_for(
            token_count,
            minimum=self.config.min_keywords,
            maximum=self.config.max_keywords,
        )

    def rank_tokens(self, tokens: List[str]) -> KeywordResult:
        """Rank an already-cleaned token sequence."""
        cfg = self.config
        graph = CoOccurrenceGraph.build(tokens, cfg.window_size)
        scores = score(graph, cfg.damping_factor, cfg.iterations)
        top_n = self.top_n(len(tokens))
        keywords = select_top(scores, top_n)

        logger.debug(
            "Built %r from %d tokens; keeping top %d", graph, len(tokens), top_n
        )
        if scores:
            logger.debug(
                "Score range %.4f..%.4f", min(scores.values()), max(scores.values())
            )

        return KeywordResult(
            keywords=keywords,
            token_count=len(tokens),
            node_count=len(graph),
            edge_count=graph.edge_count,
        )

    def extract_with_scores(self, text: str) -> KeywordResult:
        tokens = self.cleaner.clean(text or "")
        logger.debug("Tokens after stopword removal: %s", tokens)
        if not tokens:
            return KeywordResult()
        return self.rank_tokens(tokens)

    def extract(self, text: str) -> List[str]:
        """Return the top keywords for ``text``, highest score first."""
        return self.extract_with_scores(text).words


def extract_keywords(text: str, config: Optional[TextRankConfig] = None) -> List[str]:
    """Convenience wrapper around ``KeywordExtractor(config).extract(text)``."""
    return KeywordExtractor(config).extract(text)
