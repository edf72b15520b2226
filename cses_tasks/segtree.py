"""Maximum segment tree that hands out capacity from the leftmost slot."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["MaxSegmentTree", "hotel_queries"]


class MaxSegmentTree:
    """Capacities kept in a segment tree of maxima."""

    def __init__(self, capacities: Iterable[int]) -> None:
        values = list(capacities)
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        tree = [0] * (2 * size)
        tree[size : size + self._n] = values
        for node in range(size - 1, 0, -1):
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, index: int) -> int:
        """Return the capacity left at ``index``."""
        position = range(self._n)[index]
        return self._tree[self._size + position]

    def allocate(self, need: int) -> int | None:
        """Take ``need`` from the leftmost slot that has enough; return its index.

        Returns None, changing nothing, when no slot has enough.
        """
        if need < 1:
            raise ValueError("the amount requested must be positive")
        tree = self._tree
        if tree[1] < need:
            return None
        node = 1
        while node < self._size:
            node = 2 * node if tree[2 * node] >= need else 2 * node + 1
        position = node - self._size
        tree[node] -= need
        node //= 2
        while node:
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
            node //= 2
        return position


def hotel_queries(hotels: Iterable[int], groups: Iterable[int]) -> list[int]:
    """Assign each group to the first hotel with enough free rooms.

    Returns 1-based hotel numbers, with 0 for a group that found no hotel.
    """
    tree = MaxSegmentTree(hotels)
    assigned = []
    for group in groups:
        position = tree.allocate(group)
        assigned.append(0 if position is None else position + 1)
    return assigned