"""Tests for graphgentools.generators.wrappers."""
import networkx as nx
import pytest

from graphgentools.generators.errors import InvalidInputError
from graphgentools.generators.wrappers import (
    MAX_ORDER,
    binomial_tree_graph,
    directed_binomial_tree_graph,
)
from graphgentools.utils.trees import binomial_tree_edges


# --- undirected ---

def test_undirected_default_is_multigraph():
    G = binomial_tree_graph(3)
    assert isinstance(G, nx.MultiGraph)
    assert G.number_of_nodes() == 8
    assert G.number_of_edges() == 7
    assert nx.is_tree(nx.Graph(G))


def test_undirected_simple_graph():
    G = binomial_tree_graph(4, multigraph=False)
    assert type(G) is nx.Graph
    assert nx.is_tree(G)
    assert G.graph == {"name": "binomial_tree", "order": 4}


def test_undirected_weights():
    G = binomial_tree_graph(2, weights=["a", "b", "c"])
    assert [G.nodes[i]["weight"] for i in range(4)] == ["a", "b", "c", None]


def test_undirected_too_many_weights():
    with pytest.raises(InvalidInputError):
        binomial_tree_graph(1, weights=[1, 2, 3])


# --- directed ---

def test_directed_edges_point_away_from_root():
    G = directed_binomial_tree_graph(4, multigraph=False)
    assert type(G) is nx.DiGraph
    assert sorted(G.edges()) == sorted(binomial_tree_edges(4))
    assert nx.is_arborescence(G)


def test_directed_bidirectional():
    G = directed_binomial_tree_graph(4, bidirectional=True)
    assert isinstance(G, nx.MultiDiGraph)
    assert G.number_of_edges() == 30
    for u, v in G.edges():
        assert G.has_edge(v, u)


def test_order_ceiling():
    with pytest.raises(OverflowError):
        binomial_tree_graph(MAX_ORDER)
    with pytest.raises(OverflowError):
        directed_binomial_tree_graph(MAX_ORDER + 1)


def test_negative_order():
    with pytest.raises(InvalidInputError):
        directed_binomial_tree_graph(-1)
