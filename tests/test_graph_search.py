import pytest

from cses_tasks.graph_search import (
    build_teams,
    course_schedule,
    flight_routes_check,
    game_routes,
    longest_flight_route,
    message_route,
    round_trip,
    round_trip_directed,
)


def _edge_set(edges, directed):
    result = set(edges)
    if not directed:
        result |= {(v, u) for u, v in edges}
    return result


def _is_route(route, edges, directed):
    allowed = _edge_set(edges, directed)
    return all((a, b) in allowed for a, b in zip(route, route[1:]))


def _check_cycle(cycle, edges, directed, minimum):
    assert cycle[0] == cycle[-1]
    inner = cycle[:-1]
    assert len(inner) == len(set(inner))
    assert len(cycle) >= minimum
    assert _is_route(cycle, edges, directed)


def _reaches(n, edges, a, b):
    seen = {a}
    stack = [a]
    while stack:
        u = stack.pop()
        for x, y in edges:
            if x == u and y not in seen:
                seen.add(y)
                stack.append(y)
    return b in seen


def _all_paths(edges, start, end):
    if start == end:
        return [[end]]
    return [[start] + rest for x, y in edges if x == start for rest in _all_paths(edges, y, end)]


# build_teams

def test_build_teams_worked_example():
    assert build_teams(5, [(1, 2), (1, 3), (4, 5)]) == [1, 2, 2, 1, 2]


def test_build_teams_separates_friends():
    edges = [(1, 2), (2, 3), (3, 4), (4, 1), (5, 6), (6, 7)]
    teams = build_teams(7, edges)
    assert set(teams) <= {1, 2}
    assert all(teams[u - 1] != teams[v - 1] for u, v in edges)


def test_build_teams_odd_cycle_is_impossible():
    assert build_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_build_teams_lonely_pupils_all_in_first_team():
    assert build_teams(4, []) == [1, 1, 1, 1]


def test_build_teams_rejects_unknown_pupil():
    with pytest.raises(ValueError):
        build_teams(2, [(1, 3)])


# course_schedule

def test_course_schedule_worked_example():
    assert course_schedule(5, [(1, 2), (3, 1), (4, 5)]) == [3, 4, 1, 5, 2]


def test_course_schedule_respects_requirements():
    edges = [(6, 1), (1, 3), (2, 3), (3, 5), (4, 5), (6, 4)]
    order = course_schedule(6, edges)
    assert sorted(order) == list(range(1, 7))
    position = {course: i for i, course in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_course_schedule_cycle_is_impossible():
    assert course_schedule(3, [(1, 2), (2, 3), (3, 1)]) is None


# flight_routes_check

def test_flight_routes_check_strongly_connected():
    assert flight_routes_check(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_flight_routes_check_reports_unreachable_pair():
    edges = [(1, 2), (2, 3), (3, 1), (1, 4), (3, 4)]
    a, b = flight_routes_check(4, edges)
    assert a != b
    assert not _reaches(4, edges, a, b)


def test_flight_routes_check_forward_gap_starts_at_one():
    edges = [(2, 1), (3, 1)]
    a, b = flight_routes_check(3, edges)
    assert a == 1
    assert not _reaches(3, edges, a, b)


def test_flight_routes_check_single_city():
    assert flight_routes_check(1, []) is None


# game_routes

def test_game_routes_worked_example():
    assert game_routes(4, [(1, 2), (2, 4), (1, 3), (3, 4), (1, 4)]) == 3


def test_game_routes_matches_path_enumeration():
    edges = [(1, 2), (1, 3), (2, 3), (2, 4), (3, 4), (3, 5), (4, 5), (4, 6), (5, 6), (1, 6)]
    assert game_routes(6, edges) == len(_all_paths(edges, 1, 6))


def test_game_routes_unreachable_end():
    assert game_routes(3, [(1, 2), (3, 2)]) == 0


# longest_flight_route

def test_longest_flight_route_worked_example():
    edges = [(1, 2), (2, 5), (1, 3), (3, 4), (4, 5)]
    assert longest_flight_route(5, edges) == [1, 3, 4, 5]


def test_longest_flight_route_unreachable():
    assert longest_flight_route(4, [(1, 2), (3, 4)]) is None


# message_route

def test_message_route_worked_example():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    assert message_route(5, edges) == [1, 4, 5]


def test_message_route_disconnected():
    assert message_route(4, [(1, 2), (3, 4)]) is None


# round_trip

def test_round_trip_finds_valid_cycle():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]
    _check_cycle(round_trip(5, edges), edges, directed=False, minimum=4)


def test_round_trip_in_later_component():
    edges = [(1, 2), (3, 4), (4, 5), (5, 6), (6, 3)]
    cycle = round_trip(6, edges)
    _check_cycle(cycle, edges, directed=False, minimum=4)
    assert set(cycle) == {3, 4, 5, 6}


def test_round_trip_tree_has_none():
    assert round_trip(5, [(1, 2), (1, 3), (3, 4), (3, 5)]) is None


# round_trip_directed

def test_round_trip_directed_finds_valid_cycle():
    edges = [(1, 3), (2, 1), (2, 4), (3, 2), (3, 4)]
    _check_cycle(round_trip_directed(4, edges), edges, directed=True, minimum=3)


def test_round_trip_directed_ignores_cross_edges():
    edges = [(1, 2), (1, 3), (3, 2), (4, 5), (5, 6), (6, 4)]
    cycle = round_trip_directed(6, edges)
    _check_cycle(cycle, edges, directed=True, minimum=3)
    assert set(cycle) == {4, 5, 6}


def test_round_trip_directed_acyclic_has_none():
    assert round_trip_directed(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) is None


def test_round_trip_directed_rejects_unknown_city():
    with pytest.raises(ValueError):
        round_trip_directed(2, [(0, 1)])