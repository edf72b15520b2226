import pytest

from cses_tasks.cli import main, solve
from cses_tasks.counting import array_descriptions
from cses_tasks.dsu import DisjointSet
from cses_tasks.grid import count_rooms
from cses_tasks.optimisation import book_shop
from cses_tasks.segtree import hotel_queries
from cses_tasks.shortest_paths import investigation, shortest_route_queries
from cses_tasks.trees import company_boss_queries, max_distances

ROOMS = "5 8\n########\n#..#...#\n####.#.#\n#..#...#\n########\n"
LABYRINTH = "5 8\n########\n#.A#...#\n#.##.#B#\n#......#\n########\n"
MONSTERS = "5 8\n########\n#M..A..#\n#.#.M#.#\n#M#..#..\n#.######\n"
MOVES = {"U": (-1, 0), "R": (0, 1), "D": (1, 0), "L": (0, -1)}


def _locate(rows, mark):
    for r, row in enumerate(rows):
        if mark in row:
            return r, row.index(mark)
    raise AssertionError(mark)


def _walk(rows, start, path):
    r, c = start
    for letter in path:
        dr, dc = MOVES[letter]
        r, c = r + dr, c + dc
        assert rows[r][c] != "#"
    return r, c


def test_array_description_matches_library():
    out = solve("array-description", "3 5\n2 0 2\n")
    assert out == str(array_descriptions([2, 0, 2], 5))


def test_book_shop_matches_library():
    out = solve("book_shop", "4 10\n4 8 5 3\n5 12 8 1\n")
    assert out == str(book_shop([4, 8, 5, 3], [5, 12, 8, 1], 10))


def test_building_roads_connects_everything():
    out = solve("building-roads", "4 2\n1 2\n3 4\n")
    lines = out.splitlines()
    added = [tuple(map(int, line.split())) for line in lines[1:]]
    assert int(lines[0]) == len(added)
    cities = DisjointSet(4)
    for u, v in [(1, 2), (3, 4), *added]:
        cities.union(u - 1, v - 1)
    assert cities.components == 1
    assert out == "1\n2 3"


def test_counting_rooms_matches_library():
    rows = ROOMS.split()[2:]
    assert solve("counting-rooms", ROOMS) == str(count_rooms(rows))


def test_course_schedule_respects_requirements():
    requirements = [(1, 2), (3, 1), (4, 5)]
    out = solve("course-schedule", "5 3\n1 2\n3 1\n4 5\n")
    order = list(map(int, out.split()))
    assert sorted(order) == [1, 2, 3, 4, 5]
    for a, b in requirements:
        assert order.index(a) < order.index(b)


def test_course_schedule_cycle_is_impossible():
    assert solve("course-schedule", "2 2\n1 2\n2 1\n") == "IMPOSSIBLE"


def test_cycle_finding_reports_negative_cycle():
    edges = [(1, 2, 1), (2, 4, 1), (3, 1, 1), (4, 1, -3), (4, 3, -2)]
    text = "4 5\n" + "\n".join(f"{u} {v} {w}" for u, v, w in edges)
    lines = solve("cycle-finding", text).splitlines()
    assert lines[0] == "YES"
    cycle = list(map(int, lines[1].split()))
    assert cycle[0] == cycle[-1]
    weight = {}
    for u, v, w in edges:
        weight[u, v] = min(w, weight.get((u, v), w))
    assert sum(weight[a, b] for a, b in zip(cycle, cycle[1:])) < 0


def test_cycle_finding_without_negative_cycle():
    assert solve("cycle-finding", "3 2\n1 2 4\n2 3 5\n") == "NO"


def test_hotel_queries_matches_library():
    out = solve("hotel-queries", "3 5\n3 2 4\n1 4 3 2 1\n")
    assert out.split() == [str(h) for h in hotel_queries([3, 2, 4], [1, 4, 3, 2, 1])]


def test_investigation_matches_library():
    flights = [(1, 4, 5), (1, 2, 4), (2, 4, 5), (1, 3, 2), (3, 4, 3)]
    text = "4 5\n" + "\n".join(f"{u} {v} {w}" for u, v, w in flights)
    out = solve("investigation", text)
    assert tuple(map(int, out.split())) == investigation(4, flights)


def test_investigation_unreachable_raises():
    with pytest.raises(ValueError):
        solve("investigation", "3 1\n1 2 4\n")


def test_labyrinth_path_leads_to_b():
    lines = solve("labyrinth", LABYRINTH).splitlines()
    rows = LABYRINTH.split()[2:]
    assert lines[0] == "YES"
    assert int(lines[1]) == len(lines[2])
    assert _walk(rows, _locate(rows, "A"), lines[2]) == _locate(rows, "B")


def test_labyrinth_blocked():
    assert solve("labyrinth", "3 3\nA#.\n###\n..B\n") == "NO"


def test_monsters_escape_reaches_border():
    lines = solve("monsters", MONSTERS).splitlines()
    rows = MONSTERS.split()[2:]
    assert lines[0] == "YES"
    assert int(lines[1]) == len(lines[2])
    r, c = _walk(rows, _locate(rows, "A"), lines[2])
    assert r in (0, len(rows) - 1) or c in (0, len(rows[0]) - 1)


def test_monsters_enclosed():
    assert solve("monsters", "3 3\n###\n#A#\n###\n") == "NO"


def test_company_queries_print_minus_one():
    queries = [(4, 1), (4, 3), (4, 2)]
    out = solve("company-queries", "5 3\n1 1 3 3\n4 1\n4 3\n4 2\n")
    expected = company_boss_queries(5, [1, 1, 3, 3], queries)
    assert out.splitlines() == ["-1" if a is None else str(a) for a in expected]
    assert "-1" in out.splitlines()


def test_shortest_routes_ii_matches_library():
    roads = [(1, 2, 5), (1, 3, 9), (2, 3, 3)]
    queries = [(1, 2), (2, 1), (1, 3), (1, 4), (3, 2)]
    text = "4 3 5\n1 2 5\n1 3 9\n2 3 3\n1 2\n2 1\n1 3\n1 4\n3 2\n"
    expected = shortest_route_queries(4, roads, queries)
    assert solve("shortest-routes-ii", text).splitlines() == [
        "-1" if d is None else str(d) for d in expected
    ]


def test_round_trip_is_a_cycle():
    roads = {(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)}
    lines = solve("round-trip", "5 6\n1 3\n1 2\n5 3\n1 5\n2 4\n4 5\n").splitlines()
    trip = list(map(int, lines[1].split()))
    assert int(lines[0]) == len(trip)
    assert trip[0] == trip[-1]
    assert len(trip) >= 4
    for a, b in zip(trip, trip[1:]):
        assert (a, b) in roads or (b, a) in roads


def test_round_trip_on_a_tree_is_impossible():
    assert solve("round-trip", "3 2\n1 2\n2 3\n") == "IMPOSSIBLE"


def test_tree_distances_matches_library():
    edges = [(1, 2), (1, 3), (3, 4), (3, 5)]
    out = solve("tree-distances", "5\n1 2\n1 3\n3 4\n3 5\n")
    assert out.split() == [str(d) for d in max_distances(5, edges)]


def test_unknown_task_raises():
    with pytest.raises(ValueError, match="unknown task"):
        solve("no-such-task", "1")


def test_short_input_raises():
    with pytest.raises(ValueError, match="ended too early"):
        solve("book-shop", "2 10\n1 2\n")


def test_non_integer_raises():
    with pytest.raises(ValueError, match="expected an integer"):
        solve("array-description", "x 5\n")


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        solve("counting-rooms", "2 3\n...\n..\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "rooms.txt"
    path.write_text(ROOMS, encoding="utf-8")
    assert main(["counting-rooms", str(path)]) == 0
    assert capsys.readouterr().out.strip() == solve("counting-rooms", ROOMS)


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("2", encoding="utf-8")
    assert main(["book-shop", str(path)]) == 1
    assert "error" in capsys.readouterr().err