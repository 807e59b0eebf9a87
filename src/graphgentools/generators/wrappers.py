"""networkx-returning front ends for the binomial tree builder."""
from __future__ import annotations

from functools import partial
from typing import Any, Optional, Sequence

import networkx as nx

from graphgentools.backends.nxgraph import NetworkXBackend
from graphgentools.generators.binomial_tree import build_binomial_tree

# 2**60 nodes is far beyond anything networkx can hold; refuse early.
MAX_ORDER = 60


def _check_order(order: int) -> None:
    if isinstance(order, int) and order >= MAX_ORDER:
        raise OverflowError(f"An order of {order} exceeds the max allowable size")


def _build(order: int, weights: Optional[Sequence[Any]], bidirectional: bool, graph_type) -> nx.Graph:
    _check_order(order)
    backend = build_binomial_tree(
        order,
        weights,
        bidirectional=bidirectional,
        graph_factory=partial(NetworkXBackend.with_capacity, graph_type=graph_type),
    )
    G = backend.graph
    G.graph["name"] = "binomial_tree"
    G.graph["order"] = order
    return G


def binomial_tree_graph(
    order: int,
    weights: Optional[Sequence[Any]] = None,
    multigraph: bool = True,
) -> nx.Graph:
    """
    Undirected binomial tree of the given order.

    Nodes are 0..2**order-1; node i carries weights[i] (or None past the end
    of weights) under the "weight" attribute. Edge payloads are None.
    Returns a MultiGraph, or a Graph when multigraph=False.
    """
    graph_type = nx.MultiGraph if multigraph else nx.Graph
    return _build(order, weights, False, graph_type)


def directed_binomial_tree_graph(
    order: int,
    weights: Optional[Sequence[Any]] = None,
    bidirectional: bool = False,
    multigraph: bool = True,
) -> nx.DiGraph:
    """
    Directed binomial tree with edges pointing away from root 0.

    With bidirectional=True every edge (u, v) is paired with (v, u).
    Returns a MultiDiGraph, or a DiGraph when multigraph=False.
    """
    graph_type = nx.MultiDiGraph if multigraph else nx.DiGraph
    return _build(order, weights, bidirectional, graph_type)
