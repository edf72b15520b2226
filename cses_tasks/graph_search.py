"""Traversal problems on graphs: colouring, ordering, reachability and cycles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

MOD = 1_000_000_007

__all__ = [
    "build_teams",
    "course_schedule",
    "flight_routes_check",
    "game_routes",
    "longest_flight_route",
    "message_route",
    "round_trip",
    "round_trip_directed",
]

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge], *, directed: bool) -> list[list[int]]:
    """Build 1-based adjacency lists, slot 0 left unused."""
    if n < 0:
        raise ValueError("the number of nodes must not be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def _in_degrees(adj: list[list[int]]) -> list[int]:
    degree = [0] * len(adj)
    for targets in adj:
        for v in targets:
            degree[v] += 1
    return degree


def _reachable(adj: list[list[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in adj[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def _close_cycle(v: int, u: int, parent: list[int]) -> list[int]:
    """Return the cycle v -> ... -> u -> v found along the parent links."""
    back = [u]
    while back[-1] != v:
        back.append(parent[back[-1]])
    back.reverse()
    back.append(v)
    return back


def build_teams(n: int, friendships: Iterable[Edge]) -> list[int] | None:
    """Split pupils into teams 1 and 2 so that no friends share a team.

    Returns each pupil's team, or None if no such split exists.
    """
    adj = _adjacency(n, friendships, directed=False)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if not team[v]:
                    team[v] = 3 - team[u]
                    queue.append(v)
    if any(team[u] == team[v] for u in range(1, n + 1) for v in adj[u]):
        return None
    return team[1:]


def course_schedule(n: int, requirements: Iterable[Edge]) -> list[int] | None:
    """Return an order of courses respecting every ``(before, after)`` pair, or None."""
    adj = _adjacency(n, requirements, directed=True)
    degree = _in_degrees(adj)
    queue = deque(u for u in range(1, n + 1) if degree[u] == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            degree[v] -= 1
            if degree[v] == 0:
                queue.append(v)
    return order if len(order) == n else None


def flight_routes_check(n: int, flights: Iterable[Edge]) -> tuple[int, int] | None:
    """Check that every city can reach every other one.

    Returns None if so, otherwise a pair ``(a, b)`` such that ``b`` cannot be
    reached from ``a``.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    flights = list(flights)
    forward = _adjacency(n, flights, directed=True)
    backward = _adjacency(n, ((v, u) for u, v in flights), directed=True)

    reached = _reachable(forward, 1)
    for city in range(2, n + 1):
        if city not in reached:
            return 1, city
    reached = _reachable(backward, 1)
    for city in range(2, n + 1):
        if city not in reached:
            return city, 1
    return None


def game_routes(n: int, teleporters: Iterable[Edge]) -> int:
    """Count routes from level 1 to level ``n`` in an acyclic game, modulo 10**9+7."""
    if n < 1:
        raise ValueError("there must be at least one level")
    adj = _adjacency(n, teleporters, directed=True)
    degree = _in_degrees(adj)
    ways = [0] * (n + 1)
    ways[1] = 1
    queue = deque(u for u in range(1, n + 1) if degree[u] == 0)
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            ways[v] = (ways[v] + ways[u]) % MOD
            degree[v] -= 1
            if degree[v] == 0:
                queue.append(v)
    return ways[n]


def longest_flight_route(n: int, flights: Iterable[Edge]) -> list[int] | None:
    """Return a route from city 1 to city ``n`` visiting the most cities, or None.

    The flights must form an acyclic graph.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    adj = _adjacency(n, flights, directed=True)
    degree = _in_degrees(adj)
    parent = [0] * (n + 1)

    # First peel away every city that cannot be reached from city 1.
    queue = deque(u for u in range(2, n + 1) if degree[u] == 0)
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            degree[v] -= 1
            if degree[v] == 0 and v != 1:
                parent[v] = u
                queue.append(v)
    if parent[n]:
        return None

    queue = deque([1])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            degree[v] -= 1
            if degree[v] == 0:
                parent[v] = u
                queue.append(v)
    if not parent[n]:
        return None

    route = []
    city = n
    while city:
        route.append(city)
        city = parent[city]
    route.reverse()
    return route


def message_route(n: int, connections: Iterable[Edge]) -> list[int] | None:
    """Return a shortest route from computer 1 to computer ``n``, or None.

    Among equally short routes, each step comes from the lowest-numbered
    computer one hop closer to the start.
    """
    if n < 1:
        raise ValueError("there must be at least one computer")
    adj = _adjacency(n, connections, directed=False)
    parent = {1: 0}
    frontier = [1]
    while frontier and n not in parent:
        following = []
        for u in sorted(frontier):
            for v in adj[u]:
                if v not in parent:
                    parent[v] = u
                    following.append(v)
        frontier = following
    if n not in parent:
        return None
    route = []
    node = n
    while node:
        route.append(node)
        node = parent[node]
    route.reverse()
    return route


def round_trip(n: int, roads: Iterable[Edge]) -> list[int] | None:
    """Return a round trip over distinct undirected roads, or None.

    The trip starts and ends in the same city, which therefore appears twice.
    """
    adj = _adjacency(n, roads, directed=False)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if v == parent[u]:
                    continue
                if visited[v]:
                    return _close_cycle(v, u, parent)
                visited[v] = True
                parent[v] = u
                stack.append((v, iter(adj[v])))
                break
            else:
                stack.pop()
    return None


def round_trip_directed(n: int, flights: Iterable[Edge]) -> list[int] | None:
    """Return a round trip following directed flights, or None.

    The trip starts and ends in the same city, which therefore appears twice.
    """
    adj = _adjacency(n, flights, directed=True)
    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = on_path[v] = True
                    parent[v] = u
                    stack.append((v, iter(adj[v])))
                    break
                if on_path[v]:
                    return _close_cycle(v, u, parent)
            else:
                on_path[u] = False
                stack.pop()
    return None