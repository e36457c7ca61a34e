import matplotlib.pyplot as plt
from pydisjointset.DisjointSet import DisjointSet
from typing import Any, Dict, List, Optional, Tuple
from matplotlib.axes import Axes
import numpy as np
import plotly.graph_objects as go


def forest_layout(dsu: DisjointSet) -> Dict[int, Tuple[float, float]]:
    """
    Compute 2D positions for the parent forest of a disjoint set.

    Roots are placed left to right, each child one level below its parent
    (``y = -depth``), leaves packed on consecutive integer ``x`` positions and
    every inner node centred over its children. The raw parent array is read
    as is, so no paths are compressed.

    Parameters
    ----------
    dsu : DisjointSet
        The structure to lay out.

    Returns
    -------
    Dict[int, Tuple[float, float]]
        Element mapped to its (x, y) position.
    """

    parent = dsu.parent
    children: Dict[int, List[int]] = {i: [] for i in range(len(parent))}
    for i, p in enumerate(parent.tolist()):
        if p != i:
            children[p].append(i)

    pos: Dict[int, Tuple[float, float]] = {}
    next_x = 0.0
    for root in dsu.roots():
        # iterative post-order so chains deeper than the recursion limit work
        stack = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            kids = children[node]
            if not kids:
                pos[node] = (next_x, -float(depth))
                next_x += 1.0
            elif expanded:
                xs = [pos[c][0] for c in kids]
                pos[node] = ((min(xs) + max(xs)) / 2.0, -float(depth))
            else:
                stack.append((node, depth, True))
                for c in reversed(kids):
                    stack.append((c, depth + 1, False))
    return pos


def _forest_edges(dsu: DisjointSet) -> List[Tuple[int, int]]:
    return [(i, p) for i, p in enumerate(dsu.parent.tolist()) if p != i]


def plot_disjoint_set_forest(
    dsu: DisjointSet,
    title: str = "Disjoint Set Forest",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 8,
    marker_color: Any = "black",
    root_color: Any = "red",
    line_width: float = 1.0,
    line_color: Any = "grey",
    show_labels: bool = True,
):
    """
    Visualise the parent pointers of a disjoint set using either Matplotlib
    or Plotly.

    Parameters
    ----------
    dsu : DisjointSet
        Structure whose forest is drawn.
    title : str, optional
        Title of the plot. Default is "Disjoint Set Forest".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis to plot on. If provided, Matplotlib is used.
    marker_size : float, optional
        Size of the element markers. Default is 8.
    marker_color : Any, optional
        Color of non‑root elements. Default is "black".
    root_color : Any, optional
        Color of representatives. Default is "red".
    line_width : float, optional
        Width of parent edges. Default is 1.0.
    line_color : Any, optional
        Color of parent edges. Default is "grey".
    show_labels : bool, optional
        Annotate each element with its identifier. Default is True.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    pos = forest_layout(dsu)
    roots = set(dsu.roots())
    nodes = sorted(pos)
    xy = np.array([pos[i] for i in nodes])
    colors = [root_color if i in roots else marker_color for i in nodes]

    if ax is not None:
        ax.set_title(title)
        for child, par in _forest_edges(dsu):
            (x0, y0), (x1, y1) = pos[child], pos[par]
            ax.plot([x0, x1], [y0, y1], color=line_color, linewidth=line_width, zorder=1)
        ax.scatter(xy[:, 0], xy[:, 1], c=colors, s=marker_size**2, zorder=2)
        if show_labels:
            for i in nodes:
                ax.annotate(str(i), pos[i], textcoords="offset points", xytext=(0, 6), ha="center")
        ax.set_axis_off()
        return ax

    return _plot_disjoint_set_forest_plotly(
        dsu, pos, title, fig, xy, nodes, colors,
        marker_size, line_width, line_color, show_labels
    )


def _plot_disjoint_set_forest_plotly(
    dsu: DisjointSet,
    pos: Dict[int, Tuple[float, float]],
    title: str,
    fig: Optional[go.Figure],
    xy: np.ndarray,
    nodes: List[int],
    colors: List[Any],
    marker_size: float,
    line_width: float,
    line_color: Any,
    show_labels: bool,
):
    """
    Internal helper to render a disjoint set forest using Plotly.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

    for child, par in _forest_edges(dsu):
        (x0, y0), (x1, y1) = pos[child], pos[par]
        fig.add_trace(go.Scatter(
            x=[x0, x1], y=[y0, y1],
            mode='lines',
            line=dict(color=line_color, width=line_width),
            showlegend=False
        ))

    fig.add_trace(go.Scatter(
        x=xy[:, 0], y=xy[:, 1],
        mode='markers+text' if show_labels else 'markers',
        text=[str(i) for i in nodes] if show_labels else None,
        textposition='top center',
        marker=dict(size=marker_size, color=colors),
        name='Elements'
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig


def show_forest(dsu: DisjointSet, **kwargs) -> Axes:
    """Draw ``dsu`` on a fresh Matplotlib figure and display it."""

    _, ax = plt.subplots()
    plot_disjoint_set_forest(dsu, ax=ax, **kwargs)
    plt.show()
    return ax
