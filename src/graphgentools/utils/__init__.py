from .trees import binomial_tree_edges, is_tree_edges, depth_profile, is_binomial_tree

__all__ = [
    "binomial_tree_edges",
    "is_tree_edges",
    "depth_profile",
    "is_binomial_tree",
]
