"""Comparison and counting sorts over sequences of comparable items.

Every function returns a new sorted list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "shell_sort",
    "quick_sort",
    "counting_sort",
    "next_comb_gap",
    "comb_sort",
    "heap_sort",
    "dutch_flag_sort",
]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    result = list(items)
    for done in range(len(result)):
        swapped = False
        for j in range(len(result) - done - 1):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by shifting each item left into its place."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with gapped insertion passes, halving the gap each round."""
    result = list(items)
    gap = len(result) // 2
    while gap >= 1:
        for j in range(gap, len(result)):
            i = j - gap
            while i >= 0 and not result[i + gap] > result[i]:
                result[i], result[i + gap] = result[i + gap], result[i]
                i -= gap
        gap //= 2
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    start, end = low, high
    while start < end:
        while start <= high and values[start] <= pivot:
            start += 1
        while values[end] > pivot:
            end -= 1
        if start < end:
            values[start], values[end] = values[end], values[start]
    values[low], values[end] = values[end], values[low]
    return end


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first item of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by tallying each value."""
    values = list(items)
    if not values:
        return []
    if any(value < 0 for value in values):
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def next_comb_gap(gap: int) -> int:
    """Shrink a comb-sort gap by the factor 1.3, never below 1."""
    return max(gap * 10 // 13, 1)


def comb_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by comparing items a shrinking gap apart."""
    result = list(items)
    size = len(result)
    gap = size
    swapped = True
    while gap != 1 or swapped:
        gap = next_comb_gap(gap)
        swapped = False
        for i in range(size - gap):
            if result[i] > result[i + gap]:
                result[i], result[i + gap] = result[i + gap], result[i]
                swapped = True
    return result


def _sift_down(values: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and values[child] > values[largest]:
                largest = child
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    size = len(result)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, index)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def dutch_flag_sort(items: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in a single pass."""
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        value = result[mid]
        if value == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"value {value!r} is not 0, 1 or 2")
    return result