"""
Binomial trees B_k for k=0..8, built with both duplicate-edge guards.

For each order, print node/edge counts, the depth profile (which should read
C(k,0), ..., C(k,k)) and the build time of each guard.
"""
from __future__ import annotations

import time
from math import comb

from graphgentools.generators.binomial_tree import build_binomial_tree
from graphgentools.utils.trees import depth_profile, is_binomial_tree


def main(max_order: int = 8) -> None:
    print(f"{'k':>3} {'|V|':>6} {'|E|':>6}  {'scan s':>8} {'hashed s':>8}  depths")
    for k in range(max_order + 1):
        timings = {}
        for guard in ("scan", "hashed"):
            t0 = time.perf_counter()
            g = build_binomial_tree(k, edge_guard=guard)
            timings[guard] = time.perf_counter() - t0
        edges = g.edge_list()
        assert is_binomial_tree(edges, k)
        prof = depth_profile(edges, g.node_count())
        assert prof == [comb(k, d) for d in range(k + 1)]
        print(
            f"{k:>3} {g.node_count():>6} {g.edge_count():>6}  "
            f"{timings['scan']:>8.4f} {timings['hashed']:>8.4f}  {prof}"
        )


if __name__ == "__main__":
    main()
