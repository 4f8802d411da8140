"""Dynamic programming over strings and sequences.

Covers common subsequences and substrings, palindromes, supersequences,
interleaving and increasing subsequences.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "longest_common_subsequence",
    "lcs_string",
    "longest_common_substring",
    "longest_palindromic_subsequence",
    "min_deletions_to_palindrome",
    "min_insertions_to_palindrome",
    "longest_repeating_subsequence",
    "shortest_common_supersequence_length",
    "shortest_common_supersequence",
    "is_interleave",
    "longest_increasing_subsequence",
    "min_palindrome_partitions",
]


def _lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, left in enumerate(a, 1):
        row, above = table[i], table[i - 1]
        for j, right in enumerate(b, 1):
            if left == right:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def longest_common_subsequence(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest subsequence common to a and b."""
    return _lcs_table(a, b)[len(a)][len(b)]


def lcs_string(a: str, b: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest contiguous run common to a and b."""
    best = 0
    previous = [0] * (len(b) + 1)
    for left in a:
        current = [0] * (len(b) + 1)
        for j, right in enumerate(b, 1):
            if left == right:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(text: Sequence[Any]) -> int:
    """Return the length of the longest subsequence that reads the same backwards."""
    return longest_common_subsequence(text, text[::-1])


def min_deletions_to_palindrome(text: Sequence[Any]) -> int:
    """Return the fewest deletions that leave a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: Sequence[Any]) -> int:
    """Return the fewest insertions that make a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def longest_repeating_subsequence(text: Sequence[Any]) -> int:
    """Return the length of the longest subsequence occurring twice at distinct positions."""
    size = len(text)
    table = [[0] * (size + 1) for _ in range(size + 1)]
    for i in range(1, size + 1):
        for j in range(1, size + 1):
            if i != j and text[i - 1] == text[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[size][size]


def shortest_common_supersequence_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the shortest sequence holding both a and b as subsequences."""
    return len(a) + len(b) - longest_common_subsequence(a, b)


def shortest_common_supersequence(a: str, b: str) -> str:
    """Return one shortest string holding both a and b as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            picked.append(b[j - 1])
            j -= 1
        else:
            picked.append(a[i - 1])
            i -= 1
    picked.extend(reversed(a[:i]))
    picked.extend(reversed(b[:j]))
    return "".join(reversed(picked))


def is_interleave(a: str, b: str, c: str) -> bool:
    """Tell whether c is made by interleaving all of a and all of b, keeping their orders."""
    if len(a) + len(b) != len(c):
        return False
    reachable = [True] + [False] * len(b)
    for j in range(1, len(b) + 1):
        reachable[j] = reachable[j - 1] and b[j - 1] == c[j - 1]
    for i in range(1, len(a) + 1):
        reachable[0] = reachable[0] and a[i - 1] == c[i - 1]
        for j in range(1, len(b) + 1):
            from_b = reachable[j - 1] and b[j - 1] == c[i + j - 1]
            from_a = reachable[j] and a[i - 1] == c[i + j - 1]
            reachable[j] = from_a or from_b
    return reachable[len(b)]


def longest_increasing_subsequence(values: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in values:
        spot = bisect_left(tails, value)
        if spot == len(tails):
            tails.append(value)
        else:
            tails[spot] = value
    return len(tails)


def min_palindrome_partitions(text: Sequence[Any]) -> int:
    """Return the fewest cuts that split text into palindromes."""
    size = len(text)
    if size == 0:
        return 0
    palindrome = [[False] * size for _ in range(size)]
    for start in range(size - 1, -1, -1):
        for end in range(start, size):
            palindrome[start][end] = text[start] == text[end] and (
                end - start < 2 or palindrome[start + 1][end - 1]
            )
    cuts = [0] * size
    for end in range(1, size):
        if palindrome[0][end]:
            continue
        cuts[end] = 1 + min(
            cuts[start - 1] for start in range(1, end + 1) if palindrome[start][end]
        )
    return cuts[size - 1]