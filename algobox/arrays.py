"""Counting pairs in integer arrays and a few small string checks."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Optional

__all__ = [
    "count_gcd_pairs",
    "count_pairs_with_sum",
    "first_unbalanced_pair",
    "is_palindrome",
    "full_name",
]


def count_gcd_pairs(values: Iterable[int]) -> int:
    """Count index pairs i < j with gcd(a_i, 2*a_j) > 1 or gcd(a_j, 2*a_i) > 1."""
    return sum(
        1
        for a, b in combinations(list(values), 2)
        if math.gcd(a, 2 * b) > 1 or math.gcd(b, 2 * a) > 1
    )


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count index pairs i < j whose values add up to target."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in values:
        pairs += seen[target - value]
        seen[value] += 1
    return pairs


def first_unbalanced_pair(text: Sequence[str]) -> Optional[tuple[int, int]]:
    """Return the 1-based positions of the first two adjacent differing characters.

    Returns None when every character is the same.
    """
    for index, (current, following) in enumerate(zip(text, text[1:]), 1):
        if current != following:
            return index, index + 1
    return None


def is_palindrome(text: Sequence[str]) -> bool:
    """Tell whether text reads the same backwards."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))


def full_name(name: str, surname: str) -> str:
    """Join a name and a surname with one space."""
    return f"{name} {surname}"