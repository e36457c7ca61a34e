import logging
import numpy as np
from typing import Iterable, List, Tuple, Union
from pydisjointset.DisjointSet import DisjointSet


def _as_weighted_edges(edges: Union[np.ndarray, Iterable]) -> List[Tuple[int, int, float]]:
    """Normalise an edge list or an (m, 3) array to ``(u, v, w)`` tuples."""

    arr = np.asarray(list(edges) if not isinstance(edges, np.ndarray) else edges, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError("edges must have shape (m, 3) as (u, v, weight)")
    if not np.all(arr[:, :2] == np.floor(arr[:, :2])):
        raise ValueError("edge endpoints must be integers")
    return [(int(u), int(v), float(w)) for u, v, w in arr]


def connected_components(n: int, edges: Iterable[Tuple[int, int]]) -> Tuple[int, np.ndarray]:
    """Label the connected components of an undirected graph on ``0..n``.

    Parameters
    ----------
    n : int
        Largest vertex identifier.
    edges : Iterable[Tuple[int, int]]
        Undirected edges.

    Returns
    -------
    Tuple[int, np.ndarray]
        The number of components and an (n + 1,) label array. Labels are
        numbered ``0..k-1`` in order of first appearance.

    """

    dsu = DisjointSet(n)
    for u, v in edges:
        dsu.union_by_rank(u, v)

    roots = dsu.labels()
    _, first, inverse = np.unique(roots, return_index=True, return_inverse=True)
    # renumber so the component of vertex 0 is 0, the next new one 1, ...
    order = np.argsort(first)
    relabel = np.empty_like(order)
    relabel[order] = np.arange(len(order))
    return dsu.num_components, relabel[inverse.reshape(-1)]


def is_connected_graph(n: int, edges: Iterable[Tuple[int, int]]) -> bool:
    """Check whether every vertex of ``0..n`` is reachable from every other."""

    dsu = DisjointSet(n)
    for u, v in edges:
        dsu.union_by_rank(u, v)
    return dsu.num_components == 1


def kruskal_mst(
    n: int, edges: Union[np.ndarray, Iterable[Tuple[int, int, float]]]
) -> Tuple[List[Tuple[int, int, float]], float]:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    Parameters
    ----------
    n : int
        Largest vertex identifier.
    edges : np.ndarray or Iterable[Tuple[int, int, float]]
        Weighted undirected edges as ``(u, v, w)`` triples or an (m, 3) array.

    Returns
    -------
    Tuple[List[Tuple[int, int, float]], float]
        Accepted edges in acceptance order and their total weight.

    """

    weighted = _as_weighted_edges(edges)
    dsu = DisjointSet(n)
    mst: List[Tuple[int, int, float]] = []
    total = 0.0

    for u, v, w in sorted(weighted, key=lambda e: e[2]):
        if dsu.union_by_rank(u, v):
            mst.append((u, v, w))
            total += w

    logging.debug("Kruskal accepted %d of %d edges", len(mst), len(weighted))
    if dsu.num_components > 1:
        logging.info(
            "Graph is disconnected; returning a spanning forest of %d components",
            dsu.num_components,
        )
    return mst, total
