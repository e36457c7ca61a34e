import numpy as np
from pydisjointset import DisjointSet, plot_disjoint_set_forest

rng = np.random.default_rng(0)
dsu = DisjointSet(24, size_policy="size")
for u, v in rng.integers(0, 25, size=(14, 2)):
    dsu.union_by_size(u, v)

fig = plot_disjoint_set_forest(dsu, title=f"{dsu.num_components} components")
fig.show()
