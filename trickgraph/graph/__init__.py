"""Graph layer for inspecting combos as networkx graphs."""

from .path_graph import ComboPathGraph

__all__ = [
    "ComboPathGraph",
]
