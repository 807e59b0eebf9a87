"""The graph capability set required by the generators."""
from __future__ import annotations

from typing import Hashable, Iterable, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")
M = TypeVar("M")

NodeHandle = Hashable
EdgeRef = Tuple[NodeHandle, NodeHandle]


@runtime_checkable
class GraphBackend(Protocol[T, M]):
    """
    Minimal mutable graph interface.

    Node handles are opaque to the generators; they only ever travel through
    to_index / from_index. edges(node) reports edges oriented out of node;
    an undirected backend reports every incident edge with node as source.
    """

    @classmethod
    def with_capacity(cls, nodes: int, edges: int) -> "GraphBackend[T, M]":
        ...

    def add_node(self, weight: T) -> NodeHandle:
        ...

    def add_edge(self, source: NodeHandle, target: NodeHandle, weight: M) -> Hashable:
        ...

    def node_count(self) -> int:
        ...

    def node_identifiers(self) -> Iterable[NodeHandle]:
        ...

    def edges(self, node: NodeHandle) -> Iterable[EdgeRef]:
        ...

    def edge_references(self) -> Iterable[EdgeRef]:
        ...

    def to_index(self, node: NodeHandle) -> int:
        ...

    def from_index(self, index: int) -> NodeHandle:
        ...

    def is_directed(self) -> bool:
        ...
