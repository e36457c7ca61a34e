import numpy as np
import pytest
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components as scipy_components
from scipy.sparse.csgraph import minimum_spanning_tree
from pydisjointset.DisjointSet import OutOfRangeError
from pydisjointset.graph import connected_components, is_connected_graph, kruskal_mst


def test_connected_components_labels_in_first_appearance_order():
    count, labels = connected_components(5, [(4, 5), (1, 2), (2, 3)])
    assert count == 3
    assert labels.tolist() == [0, 1, 1, 1, 2, 2]


def test_connected_components_matches_scipy():
    rng = np.random.default_rng(3)
    n = 60
    edges = rng.integers(0, n + 1, size=(45, 2))
    graph = coo_matrix((np.ones(len(edges)), (edges[:, 0], edges[:, 1])), shape=(n + 1, n + 1))
    expected_count, expected = scipy_components(graph, directed=False)

    count, labels = connected_components(n, edges)
    assert count == expected_count
    for u in range(n + 1):
        for v in range(u + 1, n + 1):
            assert (labels[u] == labels[v]) == (expected[u] == expected[v])


def test_is_connected_graph():
    assert is_connected_graph(0, [])
    assert is_connected_graph(3, [(0, 1), (1, 2), (2, 3)])
    assert not is_connected_graph(3, [(0, 1), (2, 3)])


def test_kruskal_small_graph():
    edges = [(0, 1, 4.0), (0, 2, 1.0), (1, 2, 2.0), (1, 3, 5.0), (2, 3, 8.0)]
    mst, total = kruskal_mst(3, edges)
    assert mst == [(0, 2, 1.0), (1, 2, 2.0), (1, 3, 5.0)]
    assert total == pytest.approx(8.0)


def test_kruskal_accepts_array_input():
    edges = np.array([[0, 1, 2.5], [1, 2, 1.5], [0, 2, 3.0]])
    mst, total = kruskal_mst(2, edges)
    assert len(mst) == 2
    assert total == pytest.approx(4.0)


def test_kruskal_disconnected_returns_forest():
    mst, total = kruskal_mst(4, [(0, 1, 1.0), (2, 3, 2.0)])
    assert len(mst) == 2
    assert total == pytest.approx(3.0)


def test_kruskal_empty():
    assert kruskal_mst(3, []) == ([], 0.0)


def test_kruskal_matches_scipy():
    rng = np.random.default_rng(21)
    n = 30
    pts = rng.random((n + 1, 2))
    edges = []
    for u in range(n + 1):
        for v in range(u + 1, n + 1):
            edges.append((u, v, float(np.linalg.norm(pts[u] - pts[v]))))

    _, total = kruskal_mst(n, edges)

    dense = np.zeros((n + 1, n + 1))
    for u, v, w in edges:
        dense[u, v] = w
    assert total == pytest.approx(minimum_spanning_tree(dense).sum())


def test_kruskal_rejects_bad_edges():
    with pytest.raises(ValueError):
        kruskal_mst(3, [(0, 1)])
    with pytest.raises(ValueError):
        kruskal_mst(3, [(0.5, 1, 1.0)])
    with pytest.raises(OutOfRangeError):
        kruskal_mst(3, [(0, 4, 1.0)])
