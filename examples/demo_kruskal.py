from sklearn.datasets import make_blobs
import matplotlib.pyplot as plt
import numpy as np
from pydisjointset import kruskal_mst

data, _ = make_blobs(
        n_samples=60,
        centers=3,
        cluster_std=0.60,
        random_state=0,
        shuffle=False,
    )

n = len(data) - 1
edges = [
    (u, v, float(np.linalg.norm(data[u] - data[v])))
    for u in range(n + 1)
    for v in range(u + 1, n + 1)
]
mst, total = kruskal_mst(n, edges)

fig, ax = plt.subplots()
ax.set_title(f"Minimum spanning tree (weight {total:.2f})")
for u, v, _ in mst:
    ax.plot(data[[u, v], 0], data[[u, v], 1], color="b", linewidth=1.0)

ax.scatter(
    data[:, 0],
    data[:, 1],
    color="k",
    marker=".",
    s=10,
)

plt.show()
