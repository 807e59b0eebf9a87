"""
Draw B_0..B_4 side by side, or save them as PNGs.

Usage:
  python examples/draw_binomial.py            # show
  python examples/draw_binomial.py out/tree   # writes out/tree_B0.png, ...
"""
from __future__ import annotations

import sys

import matplotlib.pyplot as plt

from graphgentools.viz.draw import draw_binomial_tree


def main() -> None:
    save_prefix = sys.argv[1] if len(sys.argv) > 1 else None
    if save_prefix:
        for k in range(5):
            draw_binomial_tree(k, save_path=f"{save_prefix}_B{k}.png")
            print(f"wrote {save_prefix}_B{k}.png")
        return

    fig, axes = plt.subplots(1, 5, figsize=(20, 4))
    for k, ax in enumerate(axes):
        draw_binomial_tree(k, ax=ax, node_size=80, with_labels=k < 4)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
