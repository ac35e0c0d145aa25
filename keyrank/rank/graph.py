"""
Word co-occurrence graph for TextRank.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple


class CoOccurrenceGraph:
    """
    Undirected, unweighted graph of tokens that appear near each other.

    Nodes and neighbours keep first-insertion order so that scoring and
    tie-breaking are reproducible. Repeated co-occurrence does not add
    weight: an edge either exists or it does not.
    """

    def __init__(self) -> None:
        # dict-as-ordered-set for neighbours
        self._adjacency: Dict[str, Dict[str, None]] = {}

    @classmethod
    def build(cls, tokens: Sequence[str], window_size: int) -> "CoOccurrenceGraph":
        """
        Link every token to the tokens that follow it within the window.

        Token ``i`` is connected to every ``j`` with ``i < j < i + window_size``.
        Every token becomes a node, so ``window_size == 1`` gives a graph of
        isolated nodes.
        """
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")

        graph = cls()
        n = len(tokens)
        for i, token in enumerate(tokens):
            graph.add_node(token)
            for j in range(i + 1, min(i + window_size, n)):
                graph.add_edge(token, tokens[j])
        return graph

    def add_node(self, token: str) -> None:
        if token not in self._adjacency:
            self._adjacency[token] = {}

    def add_edge(self, a: str, b: str) -> None:
        """Add an undirected edge; self-edges and duplicates are no-ops."""
        self.add_node(a)
        self.add_node(b)
        if a == b:
            return
        self._adjacency[a][b] = None
        self._adjacency[b][a] = None

    @property
    def nodes(self) -> Tuple[str, ...]:
        return tuple(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adjacency.values()) // 2

    def neighbors(self, token: str) -> Tuple[str, ...]:
        return tuple(self._adjacency[token])

    def degree(self, token: str) -> int:
        return len(self._adjacency[token])

    def adjacency(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only snapshot of the adjacency lists."""
        return MappingProxyType({node: tuple(nbrs) for node, nbrs in self._adjacency.items()})

    def __contains__(self, token: object) -> bool:
        return token in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"CoOccurrenceGraph(nodes={len(self)}, edges={self.edge_count})"
