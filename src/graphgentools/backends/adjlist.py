from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar

import networkx as nx

T = TypeVar("T")
M = TypeVar("M")


class AdjListGraph(Generic[T, M]):
    """
    Arena-backed adjacency list.

    Nodes are dense indices 0..n-1 and serve as their own handles.
    Edges live in one list of (source, target, weight); out_edges[u] holds the
    ids of edges leaving u (and, when undirected, the ids of edges entering u).
    Parallel edges are allowed.
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self._node_weights: List[T] = []
        self._edges: List[Tuple[int, int, M]] = []
        self._out_edges: List[List[int]] = []

    @classmethod
    def with_capacity(cls, nodes: int, edges: int, *, directed: bool = True) -> "AdjListGraph[T, M]":
        # Python lists grow on demand; the hint is accepted for interface parity.
        return cls(directed=directed)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjListGraph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"

    # --- mutation ---

    def add_node(self, weight: T) -> int:
        self._node_weights.append(weight)
        self._out_edges.append([])
        return len(self._node_weights) - 1

    def add_edge(self, source: int, target: int, weight: M) -> int:
        n = len(self._node_weights)
        if not (0 <= source < n and 0 <= target < n):
            raise IndexError(f"edge ({source}, {target}) refers to a missing node (n={n})")
        eid = len(self._edges)
        self._edges.append((source, target, weight))
        self._out_edges[source].append(eid)
        if not self.directed and source != target:
            self._out_edges[target].append(eid)
        return eid

    # --- capability set ---

    def node_count(self) -> int:
        return len(self._node_weights)

    def edge_count(self) -> int:
        return len(self._edges)

    def is_directed(self) -> bool:
        return self.directed

    def node_identifiers(self) -> Iterator[int]:
        return iter(range(len(self._node_weights)))

    def edges(self, node: int) -> Iterator[Tuple[int, int]]:
        for eid in self._out_edges[node]:
            s, t, _w = self._edges[eid]
            if s == node:
                yield s, t
            else:
                yield t, s

    def edge_references(self) -> Iterator[Tuple[int, int]]:
        for s, t, _w in self._edges:
            yield s, t

    def to_index(self, node: int) -> int:
        return node

    def from_index(self, index: int) -> int:
        return index

    # --- inspection ---

    def node_weights(self) -> List[T]:
        return list(self._node_weights)

    def edge_list(self) -> List[Tuple[int, int]]:
        """Edges as (source, target) in insertion order."""
        return [(s, t) for s, t, _w in self._edges]

    def weighted_edge_list(self) -> List[Tuple[int, int, M]]:
        return list(self._edges)

    def neighbors(self, node: int) -> List[int]:
        return [t for _s, t in self.edges(node)]

    def to_networkx(self) -> nx.Graph:
        """
        Copy into a networkx multigraph (MultiDiGraph if directed).
        Payloads are stored under the "weight" attribute.
        """
        G = nx.MultiDiGraph() if self.directed else nx.MultiGraph()
        for i, w in enumerate(self._node_weights):
            G.add_node(i, weight=w)
        for s, t, w in self._edges:
            G.add_edge(s, t, weight=w)
        return G
