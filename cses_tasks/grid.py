"""Breadth-first search problems on character grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

__all__ = ["count_rooms", "labyrinth_path", "monsters_escape"]

_STEPS = (("U", -1, 0), ("R", 0, 1), ("D", 1, 0), ("L", 0, -1))

Cell = tuple[int, int]


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def _find(rows: list[str], mark: str) -> Cell:
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c >= 0:
            return r, c
    raise ValueError(f"the grid has no {mark!r} cell")


def _neighbours(cell: Cell, height: int, width: int) -> Iterator[tuple[str, Cell]]:
    r, c = cell
    for letter, dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < height and 0 <= nc < width:
            yield letter, (nr, nc)


def _trace(parents: dict[Cell, tuple[Cell, str]], start: Cell, end: Cell) -> str:
    letters = []
    cell = end
    while cell != start:
        cell, letter = parents[cell]
        letters.append(letter)
    return "".join(reversed(letters))


def count_rooms(grid: Sequence[str]) -> int:
    """Count the connected areas of floor (``.``) cells."""
    rows = _rows(grid)
    floor = {(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "."}
    rooms = 0
    while floor:
        rooms += 1
        queue = deque([floor.pop()])
        while queue:
            r, c = queue.popleft()
            for _, dr, dc in _STEPS:
                neighbour = (r + dr, c + dc)
                if neighbour in floor:
                    floor.remove(neighbour)
                    queue.append(neighbour)
    return rooms


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest move string (U, R, D, L) from ``A`` to ``B``, or None."""
    rows = _rows(grid)
    start, end = _find(rows, "A"), _find(rows, "B")
    height, width = len(rows), len(rows[0])
    parents: dict[Cell, tuple[Cell, str]] = {start: (start, "")}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return _trace(parents, start, end)
        for letter, (nr, nc) in _neighbours(cell, height, width):
            if (nr, nc) not in parents and rows[nr][nc] in ".AB":
                parents[nr, nc] = (cell, letter)
                queue.append((nr, nc))
    return None


def monsters_escape(grid: Sequence[str]) -> str | None:
    """Return a move string leading ``A`` to the border ahead of every ``M``, or None.

    Walls are ``#``. A cell may be entered only if no monster can reach it
    at the same time or sooner.
    """
    rows = _rows(grid)
    start = _find(rows, "A")
    height, width = len(rows), len(rows[0])

    def passable(cell: Cell) -> bool:
        return rows[cell[0]][cell[1]] != "#"

    danger: dict[Cell, int] = {}
    queue: deque[Cell] = deque()
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == "M":
                danger[r, c] = 0
                queue.append((r, c))
    while queue:
        cell = queue.popleft()
        for _, neighbour in _neighbours(cell, height, width):
            if neighbour not in danger and passable(neighbour):
                danger[neighbour] = danger[cell] + 1
                queue.append(neighbour)

    parents: dict[Cell, tuple[Cell, str]] = {start: (start, "")}
    walk: deque[tuple[Cell, int]] = deque([(start, 0)])
    while walk:
        cell, time = walk.popleft()
        r, c = cell
        if r in (0, height - 1) or c in (0, width - 1):
            return _trace(parents, start, cell)
        for letter, neighbour in _neighbours(cell, height, width):
            if (
                neighbour not in parents
                and passable(neighbour)
                and danger.get(neighbour, float("inf")) > time + 1
            ):
                parents[neighbour] = (cell, letter)
                walk.append((neighbour, time + 1))
    return None