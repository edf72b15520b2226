"""Shortest and longest route problems on weighted graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import heappop, heappush

MOD = 1_000_000_007

__all__ = [
    "find_negative_cycle",
    "flight_discount",
    "flight_routes",
    "high_score",
    "investigation",
    "shortest_routes",
    "all_pairs_shortest",
    "shortest_route_queries",
]

WeightedEdge = tuple[int, int, int]


def _edges(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    """Check that every edge joins nodes in 1..n and return them as a list."""
    if n < 1:
        raise ValueError("there must be at least one node")
    checked = []
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")
        checked.append((u, v, w))
    return checked


def _adjacency(
    n: int, edges: Sequence[WeightedEdge], *, reverse: bool = False
) -> list[list[tuple[int, int]]]:
    """Build 1-based weighted adjacency lists, slot 0 left unused."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        if reverse:
            adj[v].append((u, w))
        else:
            adj[u].append((v, w))
    return adj


def _require_non_negative(edges: Sequence[WeightedEdge]) -> None:
    if any(w < 0 for _, _, w in edges):
        raise ValueError("edge weights must not be negative")


def _dijkstra(adj: list[list[tuple[int, int]]], source: int) -> list[int | None]:
    """Return the distance from ``source`` to every node, None where unreachable."""
    dist: list[int | None] = [None] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            candidate = d + w
            known = dist[v]
            if known is None or candidate < known:
                dist[v] = candidate
                heappush(heap, (candidate, v))
    return dist


def _reachable(adj: list[list[tuple[int, int]]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v, _ in adj[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def find_negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Return a cycle of negative total weight, or None if there is none.

    The cycle follows the edges ``(u, v, weight)`` and starts and ends in the
    same node, which therefore appears twice.
    """
    edges = _edges(n, edges)
    dist = [0] * (n + 1)
    parent = [0] * (n + 1)
    for _ in range(n - 1):
        changed = False
        for u, v, w in edges:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                changed = True
        if not changed:
            break

    for u, v, w in edges:
        if dist[u] + w < dist[v]:
            parent[v] = u
            node = v
            for _ in range(n):
                node = parent[node]
            cycle = [node]
            step = parent[node]
            while step != node:
                cycle.append(step)
                step = parent[step]
            cycle.append(node)
            cycle.reverse()
            return cycle
    return None


def flight_discount(n: int, flights: Iterable[WeightedEdge]) -> int | None:
    """Return the cheapest price from city 1 to city ``n`` with one flight at half price.

    The discounted flight costs its price halved and rounded down. Returns
    None when city ``n`` cannot be reached.
    """
    flights = _edges(n, flights)
    _require_non_negative(flights)
    from_start = _dijkstra(_adjacency(n, flights), 1)
    to_end = _dijkstra(_adjacency(n, flights, reverse=True), n)
    best: int | None = None
    for u, v, w in flights:
        head, tail = from_start[u], to_end[v]
        if head is None or tail is None:
            continue
        price = head + w // 2 + tail
        if best is None or price < best:
            best = price
    return best


def flight_routes(n: int, flights: Iterable[WeightedEdge], k: int) -> list[int]:
    """Return the ``k`` cheapest route prices from city 1 to city ``n``, ascending.

    Routes may visit a city more than once. Fewer prices come back when
    there are fewer than ``k`` routes.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    flights = _edges(n, flights)
    _require_non_negative(flights)
    adj = _adjacency(n, flights)
    visits = [0] * (n + 1)
    heap = [(0, 1)]
    prices: list[int] = []
    while heap and len(prices) < k:
        d, u = heappop(heap)
        if visits[u] >= k:
            continue
        visits[u] += 1
        if u == n:
            prices.append(d)
        for v, w in adj[u]:
            if visits[v] < k:
                heappush(heap, (d + w, v))
    return prices


def high_score(n: int, tunnels: Iterable[WeightedEdge]) -> int | None:
    """Return the highest score on a route from room 1 to room ``n``.

    Returns None when the score can be made arbitrarily large; raises
    ValueError when room ``n`` cannot be reached at all.
    """
    tunnels = _edges(n, tunnels)
    forward = _reachable(_adjacency(n, tunnels), 1)
    backward = _reachable(_adjacency(n, tunnels, reverse=True), n)

    best: list[int | None] = [None] * (n + 1)
    best[1] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in tunnels:
            here, there = best[u], best[v]
            if here is not None and (there is None or here + w > there):
                best[v] = here + w
                changed = True
        if not changed:
            break

    for u, v, w in tunnels:
        if u not in forward or u not in backward:
            continue
        here, there = best[u], best[v]
        if here is not None and (there is None or here + w > there):
            return None

    score = best[n]
    if score is None:
        raise ValueError(f"room {n} cannot be reached from room 1")
    return score


def investigation(
    n: int, flights: Iterable[WeightedEdge]
) -> tuple[int, int, int, int] | None:
    """Describe the cheapest routes from city 1 to city ``n``.

    Returns ``(price, routes, fewest, most)``: the cheapest price, the number
    of cheapest routes modulo 10**9+7, and the fewest and most flights on
    such a route. Returns None when city ``n`` cannot be reached.
    """
    flights = _edges(n, flights)
    if any(w < 1 for _, _, w in flights):
        raise ValueError("flight prices must be positive")
    adj = _adjacency(n, flights)
    dist = _dijkstra(adj, 1)
    if dist[n] is None:
        return None

    routes = [0] * (n + 1)
    fewest = [n] * (n + 1)
    most = [0] * (n + 1)
    routes[1], fewest[1] = 1, 0
    reached = sorted((u for u in range(1, n + 1) if dist[u] is not None), key=dist.__getitem__)
    for u in reached:
        for v, w in adj[u]:
            if dist[v] == dist[u] + w:
                routes[v] = (routes[v] + routes[u]) % MOD
                fewest[v] = min(fewest[v], fewest[u] + 1)
                most[v] = max(most[v], most[u] + 1)
    return dist[n], routes[n], fewest[n], most[n]


def shortest_routes(n: int, flights: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the cheapest price from city 1 to each city 1..n, None if unreachable."""
    flights = _edges(n, flights)
    _require_non_negative(flights)
    return _dijkstra(_adjacency(n, flights), 1)[1:]


def all_pairs_shortest(n: int, roads: Iterable[WeightedEdge]) -> list[list[int | None]]:
    """Return the shortest distance between every pair of cities on two-way roads.

    Entry ``[a - 1][b - 1]`` is the distance from city ``a`` to city ``b``,
    or None when there is no route.
    """
    roads = _edges(n, roads)
    _require_non_negative(roads)
    dist: list[list[int | None]] = [[None] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, w in roads:
        a, b = u - 1, v - 1
        if dist[a][b] is None or w < dist[a][b]:
            dist[a][b] = dist[b][a] = w

    for k, via in enumerate(dist):
        for row in dist:
            first = row[k]
            if first is None:
                continue
            for j, second in enumerate(via):
                if second is None:
                    continue
                total = first + second
                if row[j] is None or total < row[j]:
                    row[j] = total
    return dist


def shortest_route_queries(
    n: int, roads: Iterable[WeightedEdge], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """Answer each ``(a, b)`` query with the shortest distance, None if no route."""
    dist = all_pairs_shortest(n, roads)
    answers = []
    for a, b in queries:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) refers to a city outside 1..{n}")
        answers.append(dist[a - 1][b - 1])
    return answers