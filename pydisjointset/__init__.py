from pydisjointset.DisjointSet import DisjointSet, InvalidSizeError, OutOfRangeError
from pydisjointset.graph import (
    connected_components,
    is_connected_graph,
    kruskal_mst
)
from pydisjointset.plotting import (
    forest_layout,
    plot_disjoint_set_forest,
    show_forest
)

__all__ = [
    "DisjointSet",
    "InvalidSizeError",
    "OutOfRangeError",
    "connected_components",
    "is_connected_graph",
    "kruskal_mst",
    "forest_layout",
    "plot_disjoint_set_forest",
    "show_forest",
]
