"""Tests for graphgentools.viz (Agg backend, no display)."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import networkx as nx  # noqa: E402
import pytest  # noqa: E402

from graphgentools.generators.wrappers import directed_binomial_tree_graph  # noqa: E402
from graphgentools.viz.draw import draw_binomial_tree  # noqa: E402
from graphgentools.viz.layouts import tree_layout  # noqa: E402


def test_tree_layout_layers_by_depth():
    G = directed_binomial_tree_graph(3, multigraph=False)
    pos = tree_layout(G)
    assert set(pos) == set(G.nodes())
    assert pos[0][1] == 0.0
    # children of the root sit one layer down
    for child in (1, 2, 4):
        assert pos[child][1] == -1.0
    assert pos[7][1] == -3.0


def test_tree_layout_missing_root():
    G = directed_binomial_tree_graph(2, multigraph=False)
    with pytest.raises(ValueError, match="root 9"):
        tree_layout(G, root=9)


def test_tree_layout_empty():
    assert tree_layout(nx.Graph()) == {}


def test_tree_layout_non_tree_falls_back():
    pos = tree_layout(nx.cycle_graph(4))
    assert set(pos) == {0, 1, 2, 3}


def test_draw_saves_png(tmp_path):
    out = tmp_path / "b3.png"
    G = draw_binomial_tree(3, save_path=str(out))
    assert out.exists()
    assert G.number_of_edges() == 7


def test_draw_into_axis():
    fig, ax = plt.subplots()
    G = draw_binomial_tree(2, bidirectional=True, ax=ax)
    assert G.number_of_edges() == 6
    assert ax.get_title().startswith("B_2")
    plt.close(fig)
