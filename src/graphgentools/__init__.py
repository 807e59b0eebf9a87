"""
graphgentools: parametric graph generators (binomial trees) that build into any
backend exposing a small graph capability set, plus networkx front ends, tree
checks and drawing helpers.
"""

import logging

from .generators.errors import InvalidInputError
from .generators.binomial_tree import (
    build_binomial_tree,
    populate_nodes,
    build_edges,
    has_edge,
    num_binomial_nodes,
)
from .generators.wrappers import MAX_ORDER, binomial_tree_graph, directed_binomial_tree_graph

# Graph backends
from .backends import GraphBackend, AdjListGraph, NetworkXBackend

# Shared utilities
from .utils.trees import binomial_tree_edges, is_tree_edges, depth_profile, is_binomial_tree
from .viz.draw import draw_binomial_tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Generators
    "InvalidInputError",
    "build_binomial_tree",
    "populate_nodes",
    "build_edges",
    "has_edge",
    "num_binomial_nodes",
    "MAX_ORDER",
    "binomial_tree_graph",
    "directed_binomial_tree_graph",
    # Backends
    "GraphBackend",
    "AdjListGraph",
    "NetworkXBackend",
    # Utils
    "binomial_tree_edges",
    "is_tree_edges",
    "depth_profile",
    "is_binomial_tree",
    # Viz
    "draw_binomial_tree",
]
