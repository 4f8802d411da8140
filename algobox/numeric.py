"""Small numeric routines: Fibonacci, combinations, primes, geometry and more."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

__all__ = [
    "PI_APPROX",
    "RootKind",
    "QuadraticRoots",
    "fibonacci",
    "fibonacci_recursive",
    "fibonacci_memo",
    "factorial",
    "n_cr",
    "is_leap_year",
    "sieve",
    "circle_area",
    "circle_circumference",
    "quadratic_roots",
    "max_subarray_sum",
    "add",
    "multiply",
]

PI_APPROX = 3.142


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number iteratively."""
    _check_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    _check_non_negative(n)
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


@lru_cache(maxsize=None)
def _fib_cached(n: int) -> int:
    if n <= 1:
        return n
    return _fib_cached(n - 1) + _fib_cached(n - 2)


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number by memoised recursion."""
    _check_non_negative(n)
    return _fib_cached(n)


def factorial(n: int) -> int:
    """Return n!."""
    _check_non_negative(n)
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def n_cr(n: int, r: int) -> int:
    """Return the number of ways to choose r objects out of n."""
    if not 0 <= r <= n:
        raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")
    return factorial(n) // (factorial(n - r) * factorial(r))


def is_leap_year(year: int) -> bool:
    """Tell whether a year is a Gregorian leap year."""
    return (year % 100 != 0 and year % 4 == 0) or year % 400 == 0


def sieve(n: int) -> list[int]:
    """Return all primes up to and including n."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return [number for number, prime in enumerate(is_prime) if prime]


def circle_area(radius: float) -> float:
    """Return the area of a circle, using pi as 3.142."""
    return PI_APPROX * radius * radius


def circle_circumference(radius: float) -> float:
    """Return the circumference of a circle, using pi as 3.142."""
    return 2 * PI_APPROX * radius


class RootKind(Enum):
    """How the roots of a quadratic equation turn out."""

    REAL = "real"
    REPEATED = "repeated"
    IMAGINARY = "imaginary"


@dataclass(frozen=True)
class QuadraticRoots:
    """The kind of roots of a quadratic and the real roots found."""

    kind: RootKind
    roots: tuple[float, ...]


def quadratic_roots(a: float, b: float, c: float) -> QuadraticRoots:
    """Solve a*x**2 + b*x + c = 0 over the reals."""
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    disc = b * b - 4 * a * c
    deno = 2 * a
    if disc > 0:
        root = math.sqrt(disc)
        return QuadraticRoots(RootKind.REAL, ((-b + root) / deno, (-b - root) / deno))
    if disc == 0:
        return QuadraticRoots(RootKind.REPEATED, (-b / deno,))
    return QuadraticRoots(RootKind.IMAGINARY, ())


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, or 0 if every run is negative."""
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b