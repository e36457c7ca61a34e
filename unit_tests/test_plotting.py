import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import plotly.graph_objects as go
import pytest
from pydisjointset.DisjointSet import DisjointSet
from pydisjointset.plotting import forest_layout, plot_disjoint_set_forest


@pytest.fixture
def dsu():
    d = DisjointSet(5)
    d.union_by_rank(0, 1)
    d.union_by_rank(2, 1)
    d.union_by_rank(4, 5)
    return d


def test_forest_layout_depths(dsu):
    pos = forest_layout(dsu)
    assert set(pos) == set(range(6))
    for root in dsu.roots():
        assert pos[root][1] == 0.0
    assert pos[0][1] == -1.0
    assert pos[2][1] == -1.0
    # parent centred above its children
    assert pos[1][0] == pytest.approx((pos[0][0] + pos[2][0]) / 2)


def test_forest_layout_does_not_compress():
    d = DisjointSet(3)
    for i in range(3):
        d.union_by_size(i, i + 1)
    before = d.parent.copy()
    pos = forest_layout(d)
    assert (d.parent == before).all()
    assert pos[0][1] == -3.0


def test_plot_matplotlib(dsu):
    fig, ax = plt.subplots()
    result = plot_disjoint_set_forest(dsu, ax=ax)
    assert result is ax
    assert len(ax.lines) == 3
    plt.close(fig)


def test_plot_plotly(dsu):
    fig = plot_disjoint_set_forest(dsu)
    assert isinstance(fig, go.Figure)
    # three parent edges plus the marker trace
    assert len(fig.data) == 4


def test_plot_plotly_reuses_figure(dsu):
    fig = go.Figure()
    out = plot_disjoint_set_forest(dsu, fig=fig, show_labels=False)
    assert out is fig
