from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx

from graphgentools.generators.wrappers import directed_binomial_tree_graph
from .layouts import tree_layout


def draw_binomial_tree(
    order: int,
    *,
    bidirectional: bool = False,
    node_size: int = 140,
    edge_width: float = 1.2,
    with_labels: bool = True,
    max_nodes_to_draw: int = 600,
    ax=None,
    save_path: str | None = None,
):
    """
    Draw the order-k binomial tree with root 0 on top.

    If ax is given, draws into it and leaves showing/saving to the caller.
    Otherwise opens a new figure and either saves it to save_path (PNG)
    or shows it.

    Returns the networkx graph that was drawn.
    """
    G = directed_binomial_tree_graph(order, bidirectional=bidirectional, multigraph=False)

    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(max(6, order * 2), max(4, order * 1.2)))
    ax.set_title(f"B_{order}   |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}")
    ax.set_axis_off()

    if G.number_of_nodes() <= max_nodes_to_draw:
        nx.draw_networkx(
            G,
            pos=tree_layout(G),
            ax=ax,
            with_labels=with_labels,
            node_size=node_size,
            width=edge_width,
            arrows=not bidirectional,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    if own_fig:
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, dpi=200)
            plt.close(fig)
        else:
            plt.show()

    return G
