from __future__ import annotations

from collections import deque

import networkx as nx


def tree_layout(G: nx.Graph, root=0, *, width: float = 1.0, level_gap: float = 1.0):
    """
    Layered layout for a rooted tree:
      - y = -depth * level_gap (root on top)
      - leaves get evenly spaced x, parents sit over the midpoint of their children

    Direction is ignored, so bidirectional and multi-edge trees work too.
    Falls back to spring_layout if G is not a tree.
    Raises ValueError if root is not a node of a non-empty G.
    """
    U = nx.Graph(G.to_undirected(as_view=True)) if G.is_directed() else nx.Graph(G)
    if U.number_of_nodes() == 0:
        return {}
    if root not in U:
        raise ValueError(f"root {root!r} is not a node of the graph")
    if not nx.is_tree(U):
        return nx.spring_layout(U, seed=7)

    children = {root: []}
    depth = {root: 0}
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in sorted(U.neighbors(u)):
            if v not in depth:
                depth[v] = depth[u] + 1
                children[u].append(v)
                children[v] = []
                queue.append(v)

    xs = {}
    next_leaf = [0]

    def place(u):
        if not children[u]:
            xs[u] = float(next_leaf[0])
            next_leaf[0] += 1
            return
        for c in children[u]:
            place(c)
        xs[u] = 0.5 * (xs[children[u][0]] + xs[children[u][-1]])

    place(root)
    span = max(next_leaf[0] - 1, 1)
    return {u: (width * xs[u] / span, -level_gap * depth[u]) for u in xs}
