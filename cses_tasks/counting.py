"""Counting problems whose answers are taken modulo 1_000_000_007."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

__all__ = [
    "MOD",
    "array_descriptions",
    "coin_combinations_ordered",
    "coin_combinations_unordered",
    "tower_count",
    "dice_combinations",
    "grid_paths",
    "two_sets_count",
]


def _check_coins(coins: Iterable[int]) -> list[int]:
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    return coins


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def array_descriptions(values: Sequence[int], m: int) -> int:
    """Count the ways to fill the zeros of ``values`` with numbers in 1..m.

    Neighbouring numbers may differ by at most one.
    """
    values = list(values)
    if not values:
        raise ValueError("the array must not be empty")
    if m < 1:
        raise ValueError("the upper bound must be at least 1")
    if any(not 0 <= value <= m for value in values):
        raise ValueError("known values must lie between 1 and the upper bound")

    # Padded by one slot on each side so that neighbours never fall off.
    ways = [0] * (m + 2)
    first, *rest = values
    if first:
        ways[first] = 1
    else:
        ways[1 : m + 1] = [1] * m

    for value in rest:
        spread = [0] * (m + 2)
        for x in (range(1, m + 1) if value == 0 else (value,)):
            spread[x] = (ways[x - 1] + ways[x] + ways[x + 1]) % MOD
        ways = spread
    return sum(ways) % MOD


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    coins = _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in coins if coin <= total) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``."""
    coins = _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for coin in coins:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def tower_count(n: int) -> int:
    """Count the towers of height ``n`` and width 2 built from rectangular blocks."""
    if n < 1:
        raise ValueError("tower height must be at least 1")
    split, joined = 1, 1
    for _ in range(n - 1):
        split, joined = (4 * split + joined) % MOD, (split + 2 * joined) % MOD
    return (split + joined) % MOD


def dice_combinations(total: int) -> int:
    """Count the ordered dice throws whose faces sum to ``total``."""
    return coin_combinations_ordered(range(1, 7), total)


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell.

    Cells marked ``*`` are traps and may not be entered.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    above = [0] * width
    for r, row in enumerate(rows):
        current: list[int] = []
        left = 0
        for c, (cell, up) in enumerate(zip(row, above)):
            if cell == "*":
                value = 0
            elif r == 0 and c == 0:
                value = 1
            else:
                value = (up + left) % MOD
            current.append(value)
            left = value
        above = current
    return above[-1]


def two_sets_count(n: int) -> int:
    """Count the ways to split 1..n into two sets of equal sum."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for k in range(1, n + 1):
        for s in range(half, k - 1, -1):
            ways[s] = (ways[s] + ways[s - k]) % MOD
    return ways[half] * pow(2, MOD - 2, MOD) % MOD