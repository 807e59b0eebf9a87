from __future__ import annotations

from collections import defaultdict, deque


def binomial_tree_edges(order: int) -> list[tuple[int, int]]:
    """Reference (parent, child) edges of the order-k binomial tree.

    Labels follow the doubling construction: B_k is B_{k-1} on 0..2**(k-1)-1
    plus a copy shifted by 2**(k-1), joined root to root.  The parent of
    node i > 0 is therefore i with its lowest set bit cleared, and the
    children of the root are 1, 2, 4, ..., 2**(k-1).  Edges are sorted by
    child.
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    return [(i & (i - 1), i) for i in range(1, 1 << order)]


def _undirected_adjacency(
    edges: list[tuple[int, int]],
) -> tuple[dict[int, set[int]], int]:
    """Adjacency sets with direction dropped; also returns the number of
    distinct undirected edges (a pair and its mirror count once)."""
    adj: dict[int, set[int]] = defaultdict(set)
    seen: set[tuple[int, int]] = set()
    for u, v in edges:
        key = (u, v) if u < v else (v, u)
        seen.add(key)
        adj[u].add(v)
        adj[v].add(u)
    return adj, len(seen)


def is_tree_edges(edges: list[tuple[int, int]], n: int) -> bool:
    """Check whether *edges* form a spanning tree of vertices 0..n-1.

    Direction is ignored and an edge together with its mirror counts once,
    so a bidirectional tree is still a tree.

    Semantics for degenerate cases:
      - n == 0                -> False
      - n == 1, no edges      -> True
    """
    if n <= 0:
        return False
    if any(not (0 <= u < n and 0 <= v < n) or u == v for u, v in edges):
        return False
    adj, m = _undirected_adjacency(edges)
    if m != n - 1:
        return False

    visited: set[int] = set()
    stack = [0]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        for nbr in adj[node]:
            if nbr not in visited:
                stack.append(nbr)
    return len(visited) == n


def depth_profile(edges: list[tuple[int, int]], n: int, root: int = 0) -> list[int]:
    """Number of vertices at each BFS depth from *root*, ignoring direction.

    For the order-k binomial tree this is C(k, 0), C(k, 1), ..., C(k, k).
    Vertices unreachable from *root* are not counted.
    """
    adj, _m = _undirected_adjacency(edges)
    depth = {root: 0}
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in sorted(adj[u]):
            if v not in depth and 0 <= v < n:
                depth[v] = depth[u] + 1
                queue.append(v)
    counts = [0] * (max(depth.values()) + 1)
    for d in depth.values():
        counts[d] += 1
    return counts


def is_binomial_tree(
    edges: list[tuple[int, int]],
    order: int,
    *,
    bidirectional: bool = False,
) -> bool:
    """True iff *edges* is exactly the order-k binomial tree on 0..2**k-1.

    Unidirectional: every edge points from parent to child, once.
    Bidirectional: each of those edges plus its reverse, once each.
    Duplicated ordered pairs make the check fail.
    """
    pairs = set(edges)
    if len(pairs) != len(edges):
        return False
    expected = set(binomial_tree_edges(order))
    if bidirectional:
        expected |= {(v, u) for u, v in expected}
    return pairs == expected
