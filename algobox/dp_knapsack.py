"""Knapsack-style dynamic programming.

Covers 0-1 and unbounded knapsacks, coin change, subset sums, rod cutting,
egg dropping and matrix-chain ordering.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

__all__ = [
    "MODULUS",
    "knapsack",
    "count_coin_ways",
    "min_coins",
    "has_subset_sum",
    "can_partition",
    "min_subset_sum_difference",
    "count_subsets_with_sum",
    "count_subsets_with_difference",
    "perfect_sum",
    "target_sum_ways",
    "rod_cutting",
    "super_egg_drop",
    "matrix_chain_cost",
]

MODULUS = 1_000_000_007


def _non_negative(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError(f"{what} must be non-negative")
    return items


def _positive(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if any(value <= 0 for value in items):
        raise ValueError(f"{what} must be positive")
    return items


def _check_target(total: int, what: str = "total") -> None:
    if total < 0:
        raise ValueError(f"{what} must be non-negative, got {total}")


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the largest total value of items whose weights fit in capacity.

    Each item is taken at most once.
    """
    weight_list = _non_negative(weights, "weights")
    value_list = list(values)
    if len(weight_list) != len(value_list):
        raise ValueError("weights and values differ in length")
    _check_target(capacity, "capacity")
    best = [0] * (capacity + 1)
    for weight, value in zip(weight_list, value_list):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def count_coin_ways(coins: Iterable[int], amount: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to amount."""
    coin_list = _positive(coins, "coins")
    _check_target(amount, "amount")
    ways = [1] + [0] * amount
    for coin in coin_list:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> Optional[int]:
    """Return the fewest coins summing to amount, or None if no combination does."""
    coin_list = _positive(coins, "coins")
    _check_target(amount, "amount")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for coin in coin_list:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return None if fewest[amount] >= unreachable else fewest[amount]


def _reachable_sums(values: list[int], limit: int) -> list[bool]:
    reachable = [True] + [False] * limit
    for value in values:
        for total in range(limit, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable


def has_subset_sum(values: Iterable[int], total: int) -> bool:
    """Tell whether some subset of the non-negative values adds up to total."""
    items = _non_negative(values, "values")
    _check_target(total)
    return _reachable_sums(items, total)[total]


def can_partition(values: Iterable[int]) -> bool:
    """Tell whether the values split into two groups of equal sum."""
    items = _non_negative(values, "values")
    total = sum(items)
    if total % 2:
        return False
    return _reachable_sums(items, total // 2)[total // 2]


def min_subset_sum_difference(values: Iterable[int]) -> int:
    """Return the smallest possible difference between the sums of two groups."""
    items = _non_negative(values, "values")
    total = sum(items)
    reachable = _reachable_sums(items, total // 2)
    best = max(index for index, ok in enumerate(reachable) if ok)
    return total - 2 * best


def _count_subsets(values: list[int], total: int, modulus: Optional[int] = None) -> int:
    # Zeros double the count of every positive sum but never of the empty sum.
    counts = [1] + [0] * total
    for value in values:
        for target in range(total, 0, -1):
            if value <= target:
                counts[target] += counts[target - value]
                if modulus is not None:
                    counts[target] %= modulus
    return counts[total]


def count_subsets_with_sum(values: Iterable[int], total: int) -> int:
    """Count the subsets of the values (by position) that add up to total.

    A sum of zero always counts exactly one subset, the empty one.
    """
    items = _non_negative(values, "values")
    _check_target(total)
    return _count_subsets(items, total)


def count_subsets_with_difference(values: Iterable[int], diff: int) -> int:
    """Count the splits into two groups whose sums differ by diff (first minus second)."""
    items = _non_negative(values, "values")
    total = sum(items)
    if diff > total or (total - diff) % 2:
        return 0
    return _count_subsets(items, (total - diff) // 2)


def perfect_sum(values: Iterable[int], total: int) -> int:
    """Count the subsets adding up to total, modulo 1_000_000_007."""
    items = _non_negative(values, "values")
    _check_target(total)
    return _count_subsets(items, total, MODULUS)


def target_sum_ways(values: Iterable[int], target: int) -> int:
    """Count the ways to sign each value + or - so that they add up to target."""
    items = _non_negative(values, "values")
    total = sum(items)
    zeros = items.count(0)
    if target > total or (total - target) % 2:
        return 0
    nonzero = [value for value in items if value]
    return 2**zeros * _count_subsets(nonzero, (total - target) // 2)


def rod_cutting(prices: Iterable[int]) -> int:
    """Return the best price for a rod of length len(prices).

    prices[i] is the price of a piece of length i + 1.
    """
    price_list = list(prices)
    length = len(price_list)
    best = [0] * (length + 1)
    for piece, price in enumerate(price_list, 1):
        for rod in range(piece, length + 1):
            best[rod] = max(best[rod], best[rod - piece] + price)
    return best[length]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that find the critical floor in the worst case."""
    if eggs < 1:
        raise ValueError(f"need at least one egg, got {eggs}")
    _check_target(floors, "floors")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for height in range(2, floors + 1):
            current[height] = 1 + min(
                max(current[height - floor], previous[floor - 1])
                for floor in range(1, height + 1)
            )
        previous = current
    return previous[floors]


def matrix_chain_cost(dims: Iterable[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix i has shape dims[i] x dims[i + 1].
    """
    sizes = _positive(dims, "dimensions")
    if len(sizes) < 2:
        raise ValueError("at least two dimensions are needed")
    count = len(sizes) - 1
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for first in range(count - span):
            last = first + span
            cost[first][last] = min(
                cost[first][split]
                + cost[split + 1][last]
                + sizes[first] * sizes[split + 1] * sizes[last + 1]
                for split in range(first, last)
            )
    return cost[0][count - 1]