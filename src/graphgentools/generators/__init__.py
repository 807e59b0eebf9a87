from .errors import InvalidInputError
from .binomial_tree import (
    EDGE_GUARDS,
    build_binomial_tree,
    build_edges,
    populate_nodes,
    has_edge,
    num_binomial_nodes,
    resolve_edge_guard,
)
from .wrappers import MAX_ORDER, binomial_tree_graph, directed_binomial_tree_graph

__all__ = [
    "InvalidInputError",
    "EDGE_GUARDS",
    "build_binomial_tree",
    "build_edges",
    "populate_nodes",
    "has_edge",
    "num_binomial_nodes",
    "resolve_edge_guard",
    "MAX_ORDER",
    "binomial_tree_graph",
    "directed_binomial_tree_graph",
]
