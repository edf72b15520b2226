"""Optimisation problems solved by dynamic programming and greedy search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

__all__ = [
    "book_shop",
    "edit_distance",
    "longest_increasing_subsequence",
    "minimum_coins",
    "distinct_money_sums",
    "max_project_reward",
    "rectangle_cuts",
    "removal_game",
    "removing_digits",
]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages that can be bought without exceeding ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for b in range(budget, price - 1, -1):
            best[b] = max(best[b], best[b - price] + value)
    return best[budget]


def edit_distance(s: str, t: str) -> int:
    """Return the minimum number of insertions, deletions and replacements."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        current = [i]
        for j, b in enumerate(t, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def minimum_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or None if impossible."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must not be negative")
    unreachable = target + 1
    best = [0] + [unreachable] * target
    for coin in coins:
        for total in range(coin, target + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return None if best[target] == unreachable else best[target]


def distinct_money_sums(coins: Iterable[int]) -> list[int]:
    """Return, in increasing order, every sum made by a non-empty set of coins."""
    sums = {0}
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        sums |= {s + coin for s in sums}
    sums.discard(0)
    return sorted(sums)


def max_project_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the best total reward from non-overlapping projects.

    Each project is ``(start, end, reward)``; a project may begin only after
    the previous one has ended, on a later day.
    """
    items = []
    for start, end, reward in projects:
        if start > end:
            raise ValueError("a project cannot end before it starts")
        items.append((end, start, reward))
    items.sort()
    ends = [end for end, _, _ in items]
    best: list[int] = []
    for end, start, reward in items:
        earlier = bisect_left(ends, start)
        taken = reward + (best[earlier - 1] if earlier else 0)
        best.append(max(best[-1], taken) if best else taken)
    return best[-1] if best else 0


def rectangle_cuts(width: int, height: int) -> int:
    """Return the fewest straight cuts that split a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("rectangle sides must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for w in range(1, width + 1):
        for h in range(1, height + 1):
            if w == h:
                continue
            options = [cuts[i][h] + cuts[w - i][h] for i in range(1, w // 2 + 1)]
            options += [cuts[w][j] + cuts[w][h - j] for j in range(1, h // 2 + 1)]
            cuts[w][h] = 1 + min(options)
    return cuts[width][height]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's best score when both take from either end."""
    values = list(values)
    if not values:
        return 0
    n = len(values)
    # diff[j] holds the best score lead of the player to move on values[i..j].
    diff = [0] * n
    for i in reversed(range(n)):
        diff[i] = values[i]
        for j in range(i + 1, n):
            diff[j] = max(values[i] - diff[j], values[j] - diff[j - 1])
    return (sum(values) + diff[-1]) // 2


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach zero, each subtracting a digit of the number."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for k in range(1, n + 1):
        steps[k] = 1 + min(steps[k - int(d)] for d in str(k) if d != "0")
    return steps[n]