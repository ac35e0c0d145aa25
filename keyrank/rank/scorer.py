"""
Damped random-walk (PageRank-style) scoring over a co-occurrence graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .graph import CoOccurrenceGraph

DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_ITERATIONS = 100


def _check_params(damping_factor: float, iterations: int) -> None:
    if not 0.0 <= damping_factor <= 1.0:
        raise ValueError(f"damping_factor must be within [0, 1], got {damping_factor}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")


def score(
    graph: CoOccurrenceGraph,
    damping_factor: float = DEFAULT_DAMPING_FACTOR,
    iterations: int = DEFAULT_ITERATIONS,
) -> Dict[str, float]:
    """
    Run a fixed number of synchronous TextRank rounds.

    Every node starts at 1.0. Each round builds a fresh table:

        new[n] = (1 - d) + d * sum(old[m] / degree(m) for m in neighbors(n))

    All lookups read the previous round's table, so the result does not
    depend on node iteration order. Isolated nodes settle at ``1 - d``.

    Args:
        graph: Graph to score; not modified.
        damping_factor: Probability of following an edge, in [0, 1].
        iterations: Number of rounds; 0 returns the initial uniform table.

    Returns:
        Mapping of token -> score, in graph node order.
    """
    _check_params(damping_factor, iterations)

    adjacency = graph.adjacency()
    degrees = {node: len(nbrs) for node, nbrs in adjacency.items()}
    scores: Dict[str, float] = {node: 1.0 for node in adjacency}
    base = 1.0 - damping_factor

    for _ in range(iterations):
        updated: Dict[str, float] = {}
        for node, nbrs in adjacency.items():
            rank_sum = sum(scores[m] / degrees[m] for m in nbrs)
            updated[node] = base + damping_factor * rank_sum
        scores = updated

    return scores


@dataclass
class RankScorer:
    """Holds scoring parameters so the same settings can score many graphs."""

    damping_factor: float = DEFAULT_DAMPING_FACTOR
    iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self) -> None:
        _check_params(self.damping_factor, self.iterations)

    def score(self, graph: CoOccurrenceGraph) -> Dict[str, float]:
        return score(graph, self.damping_factor, self.iterations)
