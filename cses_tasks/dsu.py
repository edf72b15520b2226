"""Disjoint-set union and the road problems built on it."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "DisjointSet",
    "building_roads",
    "road_construction",
    "road_reparation",
]


class DisjointSet:
    """Union-find over the elements ``0 .. n-1`` with path compression.

    ``components`` holds the number of separate sets and ``largest`` the size
    of the biggest one.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._rank = [0] * n
        self.components = n
        self.largest = 1 if n else 0

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise ValueError(f"element {u} is out of range")

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def _attach(self, child: int, root: int) -> None:
        self._parent[child] = root
        self._size[root] += self._size[child]
        self.components -= 1
        self.largest = max(self.largest, self._size[root])

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b`` by size; return whether they were apart."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] <= self._size[b]:
            self._attach(a, b)
        else:
            self._attach(b, a)
        return True

    def union_by_rank(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b`` by rank; return whether they were apart."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._attach(a, b)
        elif self._rank[b] < self._rank[a]:
            self._attach(b, a)
        else:
            self._attach(a, b)
            self._rank[b] += 1
        return True

    def component_size(self, u: int) -> int:
        """Return the number of elements in the set holding ``u``."""
        return self._size[self.find(u)]


def _joined(n: int, roads: Iterable[tuple[int, int]]) -> DisjointSet:
    cities = DisjointSet(n)
    for u, v in roads:
        cities.union(u - 1, v - 1)
    return cities


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return new roads (1-based city pairs) that make all ``n`` cities connected.

    As few roads as possible are added, each joining neighbouring city numbers.
    """
    cities = _joined(n, roads)
    added = []
    for i in range(1, n):
        if cities.union(i - 1, i):
            added.append((i, i + 1))
    return added


def road_construction(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """After each new road, report the number of components and the largest one."""
    cities = DisjointSet(n)
    report = []
    for u, v in roads:
        cities.union(u - 1, v - 1)
        report.append((cities.components, cities.largest))
    return report


def road_reparation(n: int, roads: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the cheapest cost of repairs connecting all cities, or None.

    Each road is ``(u, v, cost)`` with 1-based cities.
    """
    cities = DisjointSet(n)
    total = 0
    for u, v, cost in sorted(roads, key=lambda road: road[2]):
        if cities.union(u - 1, v - 1):
            total += cost
    if cities.components > 1:
        return None
    return total