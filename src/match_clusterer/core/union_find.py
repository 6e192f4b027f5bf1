"""
Disjoint-set partitioner over match indices.
Author: Rowel Facunla
"""

import numpy as np

from .exceptions import InvariantError


class UnionFind:
    """
    Union-find over the indices ``1..n`` of the current block.

    Each slot of the buffer holds either a parent index (> 0) or, for a
    root, the negated size of its set. The buffer is kept between blocks
    and only reallocated when a larger block arrives.
    """

    def __init__(self, capacity: int = 0):
        self._uf = np.full(capacity + 1, -1, dtype=np.int64)
        self.size = 0

    @property
    def capacity(self) -> int:
        return len(self._uf) - 1

    def reset(self, n: int):
        """Make every index in ``1..n`` a singleton set."""
        if n < 0:
            raise InvariantError(f"UnionFind size must be non-negative, got {n}")
        if n + 1 > len(self._uf):
            self._uf = np.full(max(n + 1, 2 * len(self._uf)), -1, dtype=np.int64)
        else:
            self._uf[:n + 1] = -1
        self.size = n

    def _check(self, a: int):
        if a < 1 or a > self.size:
            raise InvariantError(f"Index {a} outside [1, {self.size}]")

    def find(self, a: int) -> int:
        """Return the root of the set containing ``a``, compressing the path."""
        self._check(a)
        uf = self._uf
        if uf[a] < 0:
            return a

        root = a
        while uf[root] > 0:
            root = int(uf[root])

        j = a
        while uf[j] != root:
            k = int(uf[j])
            uf[j] = root
            j = k
        return root

    def union(self, a: int, b: int):
        """
        Merge the sets rooted at ``a`` and ``b``.

        Both arguments must be roots; call ``find`` first.
        """
        self._check(a)
        self._check(b)
        if a == b:
            return
        uf = self._uf
        if uf[a] >= 0 or uf[b] >= 0:
            raise InvariantError(f"union() called on non-root index ({a}, {b})")

        # more negative means larger
        if uf[a] < uf[b]:
            uf[a] += uf[b]
            uf[b] = a
        else:
            uf[b] += uf[a]
            uf[a] = b

    def set_size(self, a: int) -> int:
        """Number of indices in the set containing ``a``."""
        return int(-self._uf[self.find(a)])

    def is_root(self, a: int) -> bool:
        self._check(a)
        return bool(self._uf[a] < 0)


__all__ = ['UnionFind']
