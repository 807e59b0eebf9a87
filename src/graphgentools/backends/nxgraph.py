from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Type

import networkx as nx

WEIGHT_ATTR = "weight"


class NetworkXBackend:
    """
    GraphBackend over a networkx graph.

    Node keys are assigned 0, 1, 2, ... in insertion order and double as
    handles; payloads go into the WEIGHT_ATTR attribute of nodes and edges.
    Works with Graph, DiGraph, MultiGraph and MultiDiGraph.
    """

    def __init__(self, graph: Optional[nx.Graph] = None, *, weight_attr: str = WEIGHT_ATTR) -> None:
        self.graph = nx.DiGraph() if graph is None else graph
        self.weight_attr = weight_attr
        self._keys: List[Hashable] = list(self.graph.nodes())
        self._index: Dict[Hashable, int] = {key: i for i, key in enumerate(self._keys)}

    @classmethod
    def with_capacity(
        cls,
        nodes: int,
        edges: int,
        *,
        graph_type: Type[nx.Graph] = nx.DiGraph,
        weight_attr: str = WEIGHT_ATTR,
    ) -> "NetworkXBackend":
        # networkx stores dicts of dicts; there is nothing to preallocate.
        return cls(graph_type(), weight_attr=weight_attr)

    def __repr__(self) -> str:
        return (
            f"NetworkXBackend({type(self.graph).__name__}, "
            f"nodes={self.graph.number_of_nodes()}, edges={self.graph.number_of_edges()})"
        )

    def add_node(self, weight) -> Hashable:
        key = len(self._keys)
        if key in self._index:
            raise ValueError(f"node key {key!r} is already taken in the wrapped graph")
        self.graph.add_node(key, **{self.weight_attr: weight})
        self._keys.append(key)
        self._index[key] = key
        return key

    def add_edge(self, source: Hashable, target: Hashable, weight) -> Hashable:
        if self.graph.is_multigraph():
            k = self.graph.add_edge(source, target, **{self.weight_attr: weight})
            return (source, target, k)
        self.graph.add_edge(source, target, **{self.weight_attr: weight})
        return (source, target)

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def node_identifiers(self) -> Iterator[Hashable]:
        return iter(self.graph.nodes())

    def edges(self, node: Hashable) -> Iterator[Tuple[Hashable, Hashable]]:
        # out_edges for directed graphs; for undirected graphs G.edges(node)
        # already yields (node, nbr) for every incident edge.
        if self.graph.is_directed():
            return iter(self.graph.out_edges(node))
        return iter(self.graph.edges(node))

    def edge_references(self) -> Iterator[Tuple[Hashable, Hashable]]:
        return iter(self.graph.edges())

    def to_index(self, node: Hashable) -> int:
        return self._index[node]

    def from_index(self, index: int) -> Hashable:
        return self._keys[index]
