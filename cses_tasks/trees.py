"""Problems on rooted and unrooted trees, with binary-lifting ancestor queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "AncestorTable",
    "company_boss_queries",
    "company_lca_queries",
    "distance_queries",
    "planet_queries",
    "subordinate_counts",
    "tree_diameter",
    "max_distances",
    "distance_sums",
    "tree_matching",
]

Edge = tuple[int, int]


def _tree(
    n: int, edges: Iterable[Edge], root: int = 1
) -> tuple[list[list[int]], list[int], list[int]]:
    """Check that ``edges`` form a tree on 1..n.

    Returns the adjacency lists, the breadth-first order from ``root`` and the
    parent of every node (0 for the root and the unused slot 0).
    """
    if n < 1:
        raise ValueError("a tree must have at least one node")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, not {len(edges)}")
    if not 1 <= root <= n:
        raise ValueError(f"root {root} is outside 1..{n}")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)

    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[root] = True
    order = [root]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)
    if len(order) != n:
        raise ValueError("the edges do not connect every node")
    return adj, order, parent


def _boss_edges(n: int, bosses: Iterable[int]) -> list[Edge]:
    """Turn the bosses of employees 2..n into tree edges."""
    bosses = list(bosses)
    if len(bosses) != n - 1:
        raise ValueError(f"expected {n - 1} bosses, got {len(bosses)}")
    return [(boss, employee) for employee, boss in enumerate(bosses, start=2)]


def _distances(adj: list[list[int]], start: int) -> list[int]:
    dist = [-1] * len(adj)
    dist[start] = 0
    queue = [start]
    for u in queue:
        for v in adj[u]:
            if dist[v] < 0:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _farthest(dist: list[int]) -> int:
    return max(range(1, len(dist)), key=dist.__getitem__)


class AncestorTable:
    """Binary-lifting table over a tree on nodes 1..n rooted at ``root``."""

    def __init__(self, n: int, edges: Iterable[Edge], root: int = 1) -> None:
        _, order, parent = _tree(n, edges, root)
        self.n = n
        self.root = root
        depth = [0] * (n + 1)
        for u in order[1:]:
            depth[u] = depth[parent[u]] + 1
        self._depth = depth
        jumps = [parent]
        while (1 << len(jumps)) <= n:
            previous = jumps[-1]
            jumps.append([previous[previous[v]] for v in range(n + 1)])
        self._jumps = jumps

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise ValueError(f"node {node} is outside 1..{self.n}")

    def depth(self, node: int) -> int:
        """Return the number of edges between ``node`` and the root."""
        self._check(node)
        return self._depth[node]

    def ancestor(self, node: int, k: int) -> int | None:
        """Return the ancestor ``k`` levels above ``node``, or None if there is none."""
        self._check(node)
        if k < 0:
            raise ValueError("k must not be negative")
        if k > self._depth[node]:
            return None
        for level in range(k.bit_length()):
            if k >> level & 1:
                node = self._jumps[level][node]
        return node

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        lifted = self.ancestor(u, self._depth[u] - self._depth[v])
        assert lifted is not None
        u = lifted
        if u == v:
            return u
        for table in reversed(self._jumps):
            if table[u] != table[v]:
                u, v = table[u], table[v]
        return self._jumps[0][u]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between ``u`` and ``v``."""
        meet = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[meet]


def company_boss_queries(
    n: int, bosses: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """Answer each ``(employee, k)`` with the boss ``k`` levels up, or None.

    ``bosses`` lists the direct boss of employees 2..n; employee 1 is the head.
    """
    table = AncestorTable(n, _boss_edges(n, bosses))
    return [table.ancestor(employee, k) for employee, k in queries]


def company_lca_queries(
    n: int, bosses: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer each ``(a, b)`` with the lowest common boss of the two employees."""
    table = AncestorTable(n, _boss_edges(n, bosses))
    return [table.lca(a, b) for a, b in queries]


def distance_queries(
    n: int, edges: Iterable[Edge], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer each ``(a, b)`` with the number of edges between the two nodes."""
    table = AncestorTable(n, edges)
    return [table.distance(a, b) for a, b in queries]


def planet_queries(
    teleporters: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer each ``(planet, k)`` with where ``k`` teleports from ``planet`` lead.

    ``teleporters[i]`` is the destination of planet ``i + 1``.
    """
    targets = list(teleporters)
    n = len(targets)
    if any(not 1 <= t <= n for t in targets):
        raise ValueError(f"teleporter destinations must lie in 1..{n}")
    queries = list(queries)
    for planet, k in queries:
        if not 1 <= planet <= n:
            raise ValueError(f"planet {planet} is outside 1..{n}")
        if k < 0:
            raise ValueError("k must not be negative")

    longest = max((k.bit_length() for _, k in queries), default=0)
    jumps = [[0, *targets]]
    while len(jumps) < longest:
        previous = jumps[-1]
        jumps.append([previous[previous[p]] for p in range(n + 1)])

    answers = []
    for planet, k in queries:
        for level in range(k.bit_length()):
            if k >> level & 1:
                planet = jumps[level][planet]
        answers.append(planet)
    return answers


def subordinate_counts(n: int, bosses: Iterable[int]) -> list[int]:
    """Return, for employees 1..n, how many employees each one has below them."""
    _, order, parent = _tree(n, _boss_edges(n, bosses))
    below = [0] * (n + 1)
    for u in reversed(order[1:]):
        below[parent[u]] += below[u] + 1
    return below[1:]


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Return the largest number of edges between two nodes of the tree."""
    adj, _, _ = _tree(n, edges)
    far = _farthest(_distances(adj, 1))
    return max(_distances(adj, far)[1:])


def max_distances(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return, for nodes 1..n, the distance to the farthest node."""
    adj, _, _ = _tree(n, edges)
    a = _farthest(_distances(adj, 1))
    from_a = _distances(adj, a)
    b = _farthest(from_a)
    from_b = _distances(adj, b)
    return [max(x, y) for x, y in zip(from_a[1:], from_b[1:])]


def distance_sums(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return, for nodes 1..n, the sum of distances to every other node."""
    _, order, parent = _tree(n, edges)
    size = [1] * (n + 1)
    depth = [0] * (n + 1)
    for u in order[1:]:
        depth[u] = depth[parent[u]] + 1
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]
    sums = [0] * (n + 1)
    sums[order[0]] = sum(depth)
    for u in order[1:]:
        sums[u] = sums[parent[u]] + n - 2 * size[u]
    return sums[1:]


def tree_matching(n: int, edges: Iterable[Edge]) -> int:
    """Return the size of a maximum matching: most edges sharing no node."""
    _, order, parent = _tree(n, edges)
    matched = [False] * (n + 1)
    pairs = 0
    for u in reversed(order[1:]):
        p = parent[u]
        if not matched[u] and not matched[p]:
            matched[u] = matched[p] = True
            pairs += 1
    return pairs