"""Binomial tree construction by recursive doubling over any GraphBackend."""
from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional, Sequence, Set, Tuple, TypeVar

from graphgentools.backends.adjlist import AdjListGraph
from graphgentools.backends.protocol import GraphBackend
from graphgentools.generators.errors import InvalidInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M")

GraphFactory = Callable[[int, int], GraphBackend]

EDGE_GUARDS = ("hashed", "scan")
EDGE_GUARD = os.environ.get("GRAPHGEN_EDGE_GUARD", "hashed")


def _none() -> None:
    return None


def num_binomial_nodes(order: int) -> int:
    """2**order, after checking that order is a non-negative int."""
    if isinstance(order, bool) or not isinstance(order, int):
        raise InvalidInputError(f"order must be an int, got {type(order).__name__}")
    if order < 0:
        raise InvalidInputError(f"order must be non-negative, got {order}")
    return 1 << order


def _check_weights(order: int, num_nodes: int, weights: Optional[Sequence]) -> None:
    if weights is not None and len(weights) > num_nodes:
        raise InvalidInputError(
            f"got {len(weights)} weights for an order-{order} binomial tree "
            f"with {num_nodes} nodes"
        )


def populate_nodes(
    graph: GraphBackend,
    order: int,
    weights: Optional[Sequence[T]],
    default_node_weight: Callable[[], T],
) -> None:
    """
    Insert 2**order nodes in index order.

    Node i gets weights[i] when available, otherwise a fresh
    default_node_weight(). The length of weights is checked before the
    first insertion so that a rejected call leaves the graph untouched.
    """
    num_nodes = num_binomial_nodes(order)
    _check_weights(order, num_nodes, weights)
    n_given = 0 if weights is None else len(weights)
    for i in range(num_nodes):
        if i < n_given:
            graph.add_node(weights[i])
        else:
            graph.add_node(default_node_weight())


def has_edge(graph: GraphBackend, source: int, target: int) -> bool:
    """
    True iff an edge with exactly the ordered index pair (source, target)
    exists. Scans every outgoing edge of every node: O(|E|) per call.
    """
    for node in graph.node_identifiers():
        for s, t in graph.edges(node):
            if graph.to_index(s) == source and graph.to_index(t) == target:
                return True
    return False


class _ScanGuard:
    def __init__(self, graph: GraphBackend) -> None:
        self.graph = graph

    def __contains__(self, pair: Tuple[int, int]) -> bool:
        return has_edge(self.graph, pair[0], pair[1])

    def add(self, pair: Tuple[int, int]) -> None:
        pass


class _HashedGuard:
    """
    Set of ordered index pairs kept in step with the graph. On undirected
    backends both orientations are recorded, matching what has_edge sees.
    """

    def __init__(self, graph: GraphBackend) -> None:
        self.directed = graph.is_directed()
        self.pairs: Set[Tuple[int, int]] = set()
        for node in graph.node_identifiers():
            for s, t in graph.edges(node):
                self.pairs.add((graph.to_index(s), graph.to_index(t)))

    def __contains__(self, pair: Tuple[int, int]) -> bool:
        return pair in self.pairs

    def add(self, pair: Tuple[int, int]) -> None:
        self.pairs.add(pair)
        if not self.directed:
            self.pairs.add((pair[1], pair[0]))


def resolve_edge_guard(edge_guard: Optional[str] = None) -> str:
    """Return the guard name to use, falling back to GRAPHGEN_EDGE_GUARD."""
    name = EDGE_GUARD if edge_guard is None else edge_guard
    if name not in EDGE_GUARDS:
        raise ValueError(f"unknown edge guard {name!r}; expected one of {EDGE_GUARDS}")
    return name


def _make_guard(graph: GraphBackend, edge_guard: Optional[str]):
    if resolve_edge_guard(edge_guard) == "hashed":
        return _HashedGuard(graph)
    return _ScanGuard(graph)


def _snapshot(graph: GraphBackend) -> List[Tuple[int, int]]:
    return [(graph.to_index(s), graph.to_index(t)) for s, t in graph.edge_references()]


def build_edges(
    graph: GraphBackend,
    order: int,
    default_edge_weight: Callable[[], M],
    bidirectional: bool = False,
    *,
    edge_guard: Optional[str] = None,
) -> None:
    """
    Connect 2**order populated nodes into a binomial tree.

    Round r (offset n = 2**r) copies every edge present before the round,
    shifted by n, then joins root 0 to root n. With bidirectional=True each
    inserted pair is followed by its reverse. Pairs already present are
    skipped, and default_edge_weight() is only called for edges actually
    inserted.
    """
    guard = _make_guard(graph, edge_guard)
    logger.debug("building order-%d binomial tree edges with %s guard", order, type(guard).__name__)

    inserted = 0

    def insert(source: int, target: int) -> None:
        nonlocal inserted
        if (source, target) in guard:
            return
        graph.add_edge(graph.from_index(source), graph.from_index(target), default_edge_weight())
        guard.add((source, target))
        inserted += 1

    n = 1
    for rnd in range(order):
        for source, target in _snapshot(graph):
            insert(source + n, target + n)
            if bidirectional:
                insert(target + n, source + n)
        insert(0, n)
        if bidirectional:
            insert(n, 0)
        logger.debug("round %d (offset %d): %d edges inserted so far", rnd + 1, n, inserted)
        n *= 2


def build_binomial_tree(
    order: int,
    weights: Optional[Sequence[T]] = None,
    default_node_weight: Callable[[], T] = _none,
    default_edge_weight: Callable[[], M] = _none,
    bidirectional: bool = False,
    *,
    graph_factory: GraphFactory = AdjListGraph.with_capacity,
    edge_guard: Optional[str] = None,
) -> GraphBackend:
    """
    Build a binomial tree of the given order.

    Arguments:
      order:               tree has 2**order nodes and 2**order - 1 edges
                           (twice that when bidirectional).
      weights:             payloads for nodes 0..len(weights)-1; must not
                           exceed 2**order entries.
      default_node_weight: zero-arg callable, called once per node without a
                           supplied weight, in index order.
      default_edge_weight: zero-arg callable, called once per inserted edge.
      bidirectional:       also insert (v, u) for every (u, v).
      graph_factory:       callable(num_nodes, num_edges) returning an empty
                           GraphBackend.
      edge_guard:          "hashed" or "scan"; defaults to GRAPHGEN_EDGE_GUARD.

    Raises InvalidInputError on too many weights, a negative order, or a
    factory that returns a non-empty graph. Nothing is built in those cases.
    """
    guard_name = resolve_edge_guard(edge_guard)
    num_nodes = num_binomial_nodes(order)
    _check_weights(order, num_nodes, weights)

    num_edges = num_nodes - 1
    graph = graph_factory(num_nodes, 2 * num_edges if bidirectional else num_edges)
    if graph.node_count() != 0:
        # Doubling copies whatever edges exist, so it needs a blank graph.
        raise InvalidInputError(
            f"graph_factory returned a graph with {graph.node_count()} nodes; expected an empty graph"
        )
    logger.debug("binomial tree: order=%d nodes=%d bidirectional=%s", order, num_nodes, bidirectional)

    populate_nodes(graph, order, weights, default_node_weight)
    build_edges(graph, order, default_edge_weight, bidirectional, edge_guard=guard_name)
    return graph
