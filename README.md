# cses-tasks

Solved algorithmic tasks from the classic problem set: counting and
optimisation dynamic programming, disjoint sets, grid searches, a max
segment tree, graph traversal, shortest paths and tree queries. Everything
is plain Python with no runtime dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

Each task is a function that takes ordinary Python values and returns the
answer. Counting tasks return results modulo 1 000 000 007.

```python
from cses_tasks.counting import (
    coin_combinations_ordered,
    coin_combinations_unordered,
    dice_combinations,
    two_sets_count,
)
from cses_tasks.optimisation import edit_distance, longest_increasing_subsequence

dice_combinations(3)                          # 4
coin_combinations_ordered([2, 3, 5], 9)       # 8
coin_combinations_unordered([2, 3, 5], 9)     # 3
two_sets_count(7)                             # 4
edit_distance("LOVE", "MOVIE")                # 2
longest_increasing_subsequence([7, 3, 5, 3, 6, 2, 9, 8])  # 4
```

The modules are grouped by technique:

| Module | Contents |
| --- | --- |
| `cses_tasks.counting` | `array_descriptions`, `coin_combinations_ordered`, `coin_combinations_unordered`, `tower_count`, `dice_combinations`, `grid_paths`, `two_sets_count` |
| `cses_tasks.optimisation` | `book_shop`, `edit_distance`, `longest_increasing_subsequence`, `minimum_coins`, `distinct_money_sums`, `max_project_reward`, `rectangle_cuts`, `removal_game`, `removing_digits` |
| `cses_tasks.dsu` | `DisjointSet`, `building_roads`, `road_construction`, `road_reparation` |
| `cses_tasks.grid` | `count_rooms`, `labyrinth_path`, `monsters_escape` |
| `cses_tasks.segtree` | `MaxSegmentTree`, `hotel_queries` |
| `cses_tasks.graph_search` | `build_teams`, `course_schedule`, `flight_routes_check`, `game_routes`, `longest_flight_route`, `message_route`, `round_trip`, `round_trip_directed` |
| `cses_tasks.shortest_paths` | `find_negative_cycle`, `flight_discount`, `flight_routes`, `high_score`, `investigation`, `shortest_routes`, `all_pairs_shortest`, `shortest_route_queries` |
| `cses_tasks.trees` | `AncestorTable`, `company_boss_queries`, `company_lca_queries`, `distance_queries`, `planet_queries`, `subordinate_counts`, `tree_diameter`, `max_distances`, `distance_sums`, `tree_matching` |

Nodes in graph and tree tasks are numbered from 1, as in the problem
statements. Where a task has no answer (an impossible schedule, an
unreachable destination, no cycle) the function returns `None`. For
`high_score`, `None` means the score can grow without bound, and a
`ValueError` is raised when the last room cannot be reached at all. Invalid
input, such as a node outside `1..n` or edges that do not form a tree, raises
`ValueError`.

The reusable structures can be used on their own:

```python
from cses_tasks.dsu import DisjointSet

sets = DisjointSet(5)
sets.union(0, 1)               # True: the sets were separate
sets.union(1, 2)               # True
sets.find(0) == sets.find(2)   # True
sets.component_size(2)         # 3
sets.components                # 3

from cses_tasks.segtree import MaxSegmentTree

rooms = MaxSegmentTree([3, 2, 4, 1, 5, 5, 2, 6])
rooms.allocate(4)              # 2: index of the first slot with 4 free
rooms[2]                       # 0
```

`AncestorTable(n, edges, root=1)` answers `depth`, `ancestor`, `lca` and
`distance` queries on a tree by binary lifting.

## Command line

The `cses-tasks` command reads a task's input in the judge's text format,
from a file or from standard input, and prints the answer in the judge's
output format:

```
cses-tasks course-schedule input.txt
cses-tasks --help
```

From Python, `cses_tasks.cli.solve(task, text)` does the same with a string
of input and returns the output text. On bad input the command prints an
error and exits with status 1.

## What the command does not do

The command line covers only these tasks: `array-description`, `book-shop`,
`building-roads`, `company-queries`, `counting-rooms`, `course-schedule`,
`cycle-finding`, `hotel-queries`, `investigation`, `labyrinth`, `monsters`,
`round-trip`, `shortest-routes-ii` and `tree-distances`. Every other task
is available only as a library function.