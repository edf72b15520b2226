"""Command-line front end: read a task's input text and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from .counting import array_descriptions
from .dsu import building_roads
from .graph_search import course_schedule, round_trip
from .grid import count_rooms, labyrinth_path, monsters_escape
from .optimisation import book_shop
from .segtree import hotel_queries
from .shortest_paths import find_negative_cycle, investigation, shortest_route_queries
from .trees import company_boss_queries, max_distances

__all__ = ["TASKS", "solve", "main"]


class _Reader:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("the input ended too early") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def rows(self, count: int, width: int) -> list[tuple[int, ...]]:
        return [tuple(self.numbers(width)) for _ in range(count)]

    def grid(self) -> list[str]:
        height, width = self.numbers(2)
        lines = [self.word() for _ in range(height)]
        if any(len(line) != width for line in lines):
            raise ValueError(f"every grid row must have {width} cells")
        return lines


def _joined(values) -> str:
    return " ".join(str(value) for value in values)


def _array_description(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    return str(array_descriptions(reader.numbers(n), m))


def _book_shop(reader: _Reader) -> str:
    n, budget = reader.numbers(2)
    prices = reader.numbers(n)
    pages = reader.numbers(n)
    return str(book_shop(prices, pages, budget))


def _building_roads(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    added = building_roads(n, reader.rows(m, 2))
    return "\n".join([str(len(added)), *(f"{a} {b}" for a, b in added)])


def _counting_rooms(reader: _Reader) -> str:
    return str(count_rooms(reader.grid()))


def _course_schedule(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    order = course_schedule(n, reader.rows(m, 2))
    return "IMPOSSIBLE" if order is None else _joined(order)


def _cycle_finding(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    cycle = find_negative_cycle(n, reader.rows(m, 3))
    return "NO" if cycle is None else f"YES\n{_joined(cycle)}"


def _hotel_queries(reader: _Reader) -> str:
    hotels, groups = reader.numbers(2)
    return _joined(hotel_queries(reader.numbers(hotels), reader.numbers(groups)))


def _investigation(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    result = investigation(n, reader.rows(m, 3))
    if result is None:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return _joined(result)


def _path_answer(path: str | None) -> str:
    return "NO" if path is None else f"YES\n{len(path)}\n{path}"


def _labyrinth(reader: _Reader) -> str:
    return _path_answer(labyrinth_path(reader.grid()))


def _monsters(reader: _Reader) -> str:
    return _path_answer(monsters_escape(reader.grid()))


def _company_queries(reader: _Reader) -> str:
    n, q = reader.numbers(2)
    bosses = reader.numbers(n - 1)
    answers = company_boss_queries(n, bosses, reader.rows(q, 2))
    return "\n".join("-1" if a is None else str(a) for a in answers)


def _shortest_routes(reader: _Reader) -> str:
    n, m, q = reader.numbers(3)
    roads = reader.rows(m, 3)
    answers = shortest_route_queries(n, roads, reader.rows(q, 2))
    return "\n".join("-1" if a is None else str(a) for a in answers)


def _round_trip(reader: _Reader) -> str:
    n, m = reader.numbers(2)
    trip = round_trip(n, reader.rows(m, 2))
    return "IMPOSSIBLE" if trip is None else f"{len(trip)}\n{_joined(trip)}"


def _tree_distances(reader: _Reader) -> str:
    n = reader.number()
    return _joined(max_distances(n, reader.rows(n - 1, 2)))


TASKS: dict[str, Callable[[_Reader], str]] = {
    "array-description": _array_description,
    "book-shop": _book_shop,
    "building-roads": _building_roads,
    "counting-rooms": _counting_rooms,
    "course-schedule": _course_schedule,
    "cycle-finding": _cycle_finding,
    "hotel-queries": _hotel_queries,
    "investigation": _investigation,
    "labyrinth": _labyrinth,
    "monsters": _monsters,
    "company-queries": _company_queries,
    "shortest-routes-ii": _shortest_routes,
    "round-trip": _round_trip,
    "tree-distances": _tree_distances,
}


def solve(task: str, text: str) -> str:
    """Parse ``text`` as the input of ``task`` and return the answer text."""
    name = task.strip().lower().replace("_", "-")
    try:
        handler = TASKS[name]
    except KeyError:
        raise ValueError(f"unknown task {task!r}") from None
    return handler(_Reader(text))


def main(argv: list[str] | None = None) -> int:
    """Run one task on a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Solve a task from its input text.")
    parser.add_argument("task", choices=sorted(TASKS), help="the task to solve")
    parser.add_argument("input", nargs="?", help="input file; standard input if omitted")
    args = parser.parse_args(argv)

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        print(solve(args.task, text))
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())