"""
Disjoint Set module
===================

A *disjoint‑set forest* (Union‑Find) maintains a partition of the integer
universe ``0..n`` into non‑overlapping sets.  Every set is stored as a tree
of parent pointers whose root is the set's *representative*; two elements
share a set exactly when they share a root.

Two optimisations keep the trees shallow:

* **path compression** during :meth:`DisjointSet.find`, which repoints every
  visited node straight at its root; and
* a **merge policy** during union, either by *rank* (an upper bound on tree
  height) or by *size* (exact set cardinality).

Together they give the classical inverse‑Ackermann amortised bound per
operation.  The parent, rank and size mappings are kept as ``int64`` numpy
arrays indexed by element.
"""

import logging
import operator
import numpy as np
from typing import Dict, Iterator, List, Literal


class InvalidSizeError(ValueError):
    """Raised when a disjoint set is created with a negative universe size."""


class OutOfRangeError(IndexError):
    """Raised when an element identifier lies outside ``[0, n]``."""


class DisjointSet:
    """
    Union‑Find over the elements ``0..n`` with path compression and union by
    rank or by size.

    Only one union strategy should be used per instance: ``rank`` is kept
    accurate by :meth:`union_by_rank` and ``size`` by :meth:`union_by_size`.
    """

    def __init__(
        self,
        n: int,
        size_policy: Literal["index", "size"] = "index",
        default_strategy: Literal["rank", "size"] = "rank",
    ):
        """
        Create ``n + 1`` singleton sets.

        Parameters
        ----------
        n : int
            Largest element identifier. The universe is ``0..n`` inclusive.
        size_policy : {"index", "size"}, optional
            How :meth:`union_by_size` picks the surviving root. ``"index"``
            keeps the root with the larger index, ``"size"`` keeps the root of
            the larger set. Default is "index".
        default_strategy : {"rank", "size"}, optional
            Union strategy used by :meth:`union`. Default is "rank".

        Raises
        ------
        InvalidSizeError
            If ``n`` is negative.
        """

        n = operator.index(n)
        if n < 0:
            raise InvalidSizeError(f"universe size must be ≥ 0, got {n}")
        if size_policy not in {"index", "size"}:
            raise ValueError("size_policy must be 'index' or 'size'")
        if default_strategy not in {"rank", "size"}:
            raise ValueError("default_strategy must be 'rank' or 'size'")

        self.n = n
        self.size_policy = size_policy
        self.default_strategy = default_strategy

        self._parent = np.arange(n + 1, dtype=np.int64)
        self._rank = np.zeros(n + 1, dtype=np.int64)
        self._size = np.ones(n + 1, dtype=np.int64)
        self._num_components = n + 1

        # first strategy used on this instance, for mixing warnings
        self._strategy: Literal["rank", "size", None] = None
        self._warned_mixing = False

    @property
    def universe_size(self) -> int:
        """The ``n`` this structure was created with."""
        return self.n

    @property
    def num_components(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._num_components

    @property
    def parent(self) -> np.ndarray:
        """Read‑only view of the parent array."""
        return self._readonly(self._parent)

    @property
    def rank(self) -> np.ndarray:
        """Read‑only view of the rank array (meaningful at roots only)."""
        return self._readonly(self._rank)

    @property
    def size(self) -> np.ndarray:
        """Read‑only view of the size array (exact at roots only)."""
        return self._readonly(self._size)

    @staticmethod
    def _readonly(arr: np.ndarray) -> np.ndarray:
        view = arr.view()
        view.flags.writeable = False
        return view

    def _check(self, node: int) -> int:
        """
        Validate an element identifier and return it as a plain ``int``.

        Parameters
        ----------
        node : int
            Element identifier.

        Returns
        -------
        int
            The validated identifier.

        Raises
        ------
        OutOfRangeError
            If ``node`` is not in ``[0, n]``.
        TypeError
            If ``node`` is not an integer.
        """

        node = operator.index(node)
        if node < 0 or node > self.n:
            raise OutOfRangeError(f"element {node} outside [0, {self.n}]")
        return node

    def _note_strategy(self, strategy: Literal["rank", "size"]) -> None:
        if self._strategy is None:
            self._strategy = strategy
        elif self._strategy != strategy and not self._warned_mixing:
            self._warned_mixing = True
            logging.warning(
                "Mixing union_by_%s with union_by_%s on one DisjointSet; "
                "rank and size bookkeeping will be inconsistent.",
                strategy,
                self._strategy,
            )

    def find(self, node: int) -> int:
        """
        Find the representative of the set containing ``node``.

        Every node on the path from ``node`` to the root is repointed
        directly at the root.

        Parameters
        ----------
        node : int
            Element to look up.

        Returns
        -------
        int
            The root of ``node``'s set.
        """

        node = self._check(node)
        return self._find(node)

    def _find(self, node: int) -> int:
        parent = self._parent
        root = node
        while parent[root] != root:
            root = int(parent[root])

        # compress
        while parent[node] != root:
            nxt = int(parent[node])
            parent[node] = root
            node = nxt
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """
        Merge the sets of ``u`` and ``v``, attaching the lower‑rank root
        under the higher‑rank one. On a tie ``v``'s root survives and its
        rank grows by one.

        Parameters
        ----------
        u : int
            First element.
        v : int
            Second element.

        Returns
        -------
        bool
            True if two sets were merged, False if already joined.
        """

        u, v = self._check(u), self._check(v)
        self._note_strategy("rank")

        ur = self._find(u)
        vr = self._find(v)
        if ur == vr:
            return False

        if self._rank[ur] < self._rank[vr]:
            self._parent[ur] = vr
        elif self._rank[ur] > self._rank[vr]:
            self._parent[vr] = ur
        else:
            self._parent[ur] = vr
            self._rank[vr] += 1

        self._num_components -= 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """
        Merge the sets of ``u`` and ``v`` and accumulate the absorbed set's
        size into the surviving root.

        With ``size_policy="index"`` the root with the smaller index goes
        under the root with the larger index. With ``size_policy="size"`` the
        smaller set goes under the larger one, and ``v``'s root survives a
        tie.

        Parameters
        ----------
        u : int
            First element.
        v : int
            Second element.

        Returns
        -------
        bool
            True if two sets were merged, False if already joined.
        """

        u, v = self._check(u), self._check(v)
        self._note_strategy("size")

        ur = self._find(u)
        vr = self._find(v)
        if ur == vr:
            return False

        if self.size_policy == "index":
            child, root = (ur, vr) if ur < vr else (vr, ur)
        elif self._size[ur] > self._size[vr]:
            child, root = vr, ur
        else:
            child, root = ur, vr

        self._parent[child] = root
        self._size[root] += self._size[child]
        self._num_components -= 1
        return True

    def union(self, u: int, v: int) -> bool:
        """Merge ``u`` and ``v`` with the instance's ``default_strategy``."""

        if self.default_strategy == "size":
            return self.union_by_size(u, v)
        return self.union_by_rank(u, v)

    def is_component(self, u: int, v: int) -> bool:
        """
        Check whether ``u`` and ``v`` belong to the same set.

        Parameters
        ----------
        u : int
            First element.
        v : int
            Second element.

        Returns
        -------
        bool
            True if both elements share a root.
        """

        u, v = self._check(u), self._check(v)
        return self._find(u) == self._find(v)

    def component_size(self, node: int) -> int:
        """
        Size of ``node``'s set as recorded at its root.

        Only exact when the instance is merged with :meth:`union_by_size`.
        """

        return int(self._size[self.find(node)])

    def roots(self) -> List[int]:
        """Return the current representatives in ascending order."""

        return np.flatnonzero(self._parent == np.arange(self.n + 1)).tolist()

    def labels(self) -> np.ndarray:
        """
        Map every element to its representative.

        Returns
        -------
        np.ndarray
            Array of shape (n + 1,) with ``labels[i] == find(i)``.
        """

        return np.array([self._find(i) for i in range(self.n + 1)], dtype=np.int64)

    def components(self) -> Dict[int, List[int]]:
        """
        Group elements by representative.

        Returns
        -------
        Dict[int, List[int]]
            Root mapped to the ascending list of its members.
        """

        groups: Dict[int, List[int]] = {}
        for i in range(self.n + 1):
            groups.setdefault(self._find(i), []).append(i)
        return groups

    def __contains__(self, node) -> bool:
        try:
            node = operator.index(node)
        except TypeError:
            return False
        return 0 <= node <= self.n

    def __iter__(self) -> Iterator[List[int]]:
        return iter(self.components().values())

    def __len__(self) -> int:
        return self.n + 1

    def __repr__(self) -> str:
        return (
            f"DisjointSet(n={self.n}, components={self._num_components}, "
            f"size_policy={self.size_policy!r})"
        )
