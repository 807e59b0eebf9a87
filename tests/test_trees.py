"""Tests for graphgentools.utils.trees."""
from math import comb

import pytest

from graphgentools.generators.binomial_tree import build_binomial_tree
from graphgentools.utils.trees import (
    binomial_tree_edges,
    depth_profile,
    is_binomial_tree,
    is_tree_edges,
)


# --- reference edges ---

def test_reference_edges_order_zero():
    assert binomial_tree_edges(0) == []


def test_reference_edges_order_three():
    assert binomial_tree_edges(3) == [(0, 1), (0, 2), (2, 3), (0, 4), (4, 5), (4, 6), (6, 7)]


def test_reference_edges_negative():
    with pytest.raises(ValueError):
        binomial_tree_edges(-2)


# --- is_tree_edges ---

def test_is_tree_single_vertex():
    assert is_tree_edges([], 1) is True


def test_is_tree_empty_graph():
    assert is_tree_edges([], 0) is False


def test_is_tree_path():
    assert is_tree_edges([(0, 1), (1, 2), (2, 3)], 4) is True


def test_is_tree_cycle():
    assert is_tree_edges([(0, 1), (1, 2), (2, 0)], 3) is False


def test_is_tree_disconnected():
    assert is_tree_edges([(0, 1), (2, 3), (3, 2), (0, 1)], 5) is False


def test_is_tree_mirrored_edges():
    assert is_tree_edges([(0, 1), (1, 0), (1, 2), (2, 1)], 3) is True


def test_is_tree_out_of_range():
    assert is_tree_edges([(0, 5)], 2) is False


# --- depth profile ---

@pytest.mark.parametrize("order", range(0, 7))
def test_depth_profile_is_binomial(order):
    edges = binomial_tree_edges(order)
    assert depth_profile(edges, 2 ** order) == [comb(order, d) for d in range(order + 1)]


def test_depth_profile_built_tree_bidirectional():
    g = build_binomial_tree(4, bidirectional=True)
    assert depth_profile(g.edge_list(), 16) == [1, 4, 6, 4, 1]


def test_depth_profile_other_root():
    # path 0-1-2 seen from the middle
    assert depth_profile([(0, 1), (1, 2)], 3, root=1) == [1, 2]


# --- is_binomial_tree ---

@pytest.mark.parametrize("order", range(0, 6))
def test_built_trees_pass_check(order):
    assert is_binomial_tree(build_binomial_tree(order).edge_list(), order)
    g = build_binomial_tree(order, bidirectional=True)
    assert is_binomial_tree(g.edge_list(), order, bidirectional=True)


def test_check_rejects_duplicates():
    edges = binomial_tree_edges(2) + [(0, 1)]
    assert is_binomial_tree(edges, 2) is False


def test_check_rejects_missing_mirror():
    edges = binomial_tree_edges(2)
    assert is_binomial_tree(edges, 2, bidirectional=True) is False


def test_check_rejects_other_tree():
    # a path on 4 vertices is a tree but not B_2
    assert is_binomial_tree([(0, 1), (1, 2), (2, 3)], 2) is False
