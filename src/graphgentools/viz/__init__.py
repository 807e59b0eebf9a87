from .layouts import tree_layout
from .draw import draw_binomial_tree

__all__ = [
    "tree_layout",
    "draw_binomial_tree",
]
