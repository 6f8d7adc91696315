"""Short puzzles: palindromes, counting, roots, sequences and simple reports."""

from __future__ import annotations

import math
from collections.abc import Iterable

DRAW = "Draw"
NOT_ENOUGH_FUEL = "not enough fuel"
_DIGITS = frozenset("0123456789")


def palindrome_report(words: Iterable[str]) -> tuple[list[str], int]:
    """Return the words that are not palindromes, in order, and the palindrome count."""
    others: list[str] = []
    count = 0
    for word in words:
        if word == word[::-1]:
            count += 1
        else:
            others.append(word)
    return others, count


def _factorial(n: int) -> int:
    """Return n!, taking the factorial of a negative number as 1."""
    return math.factorial(n) if n > 0 else 1


def permutations(n: int, k: int) -> int:
    """Return k! / (k - n)!, the ways to arrange n of k distinct objects."""
    return _factorial(k) // _factorial(k - n)


def count_divisible(n: int, a: int, b: int, c: int) -> int:
    """Count the integers 1..n divisible by at least one of a, b and c."""
    if 0 in (a, b, c):
        raise ZeroDivisionError("divisors must not be zero")
    return sum(
        1 for value in range(1, n + 1)
        if value % a == 0 or value % b == 0 or value % c == 0
    )


def _two_places(value: float) -> str:
    """Format a value to two decimals, writing an exact zero as 0.00."""
    return "0.00" if value == 0 else f"{value:.2f}"


def vieta_summary(a: float, b: float, c: float) -> tuple[str, str, str]:
    """Return the sum, product and sum of squares of the roots of ax²+bx+c=0.

    Each is formatted to two decimals.
    """
    if a == 0:
        raise ZeroDivisionError("the coefficient of x² must not be zero")
    total = -b / a
    product = c / a
    squares = total * total - 2 * product
    return _two_places(total), _two_places(product), _two_places(squares)


def leonardo(n: int) -> int:
    """Return the n-th Leonardo number: 1, 1, 3, 5, 9, 15, ..."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current + 1
    return current


def sum_of_odds(n: int) -> int:
    """Return the sum of the first n odd natural numbers."""
    return n * n


def hypotenuse(leg1: int, leg2: int) -> int:
    """Return the hypotenuse of a right triangle, rounded halves away from zero."""
    length = math.hypot(leg1, leg2)
    return math.floor(length + 0.5)


def smallest_typeable(target: int, buttons: str) -> int:
    """Return the smallest integer >= target typed using only the working buttons."""
    working = set(buttons)
    digits = working & _DIGITS
    if not digits or (target > 0 and digits == {"0"}):
        raise ValueError("no number at or above the target can be typed")
    value = target
    while not set(str(value)) <= working:
        value += 1
    return value


def linear_values(a: int, b: int, xs: Iterable[int]) -> list[int]:
    """Return a * x + b for each x."""
    return [a * x + b for x in xs]


def remaining_fuel(fuel: int, distance: int, rate: int) -> int | str:
    """Return the fuel left after the trip, or "not enough fuel"."""
    needed = distance * rate
    if fuel >= needed:
        return fuel - needed
    return NOT_ENOUGH_FUEL


def rectangle(height: int, width: int, material: str) -> list[str]:
    """Return the rows of a rectangle made of the given material."""
    return [material * width for _ in range(height)]


def stronger_unit(
    first_name: str,
    first_health: int,
    first_attack: int,
    second_name: str,
    second_health: int,
    second_attack: int,
) -> str:
    """Return the name of the unit with more health plus attack, or "Draw"."""
    first = first_health + first_attack
    second = second_health + second_attack
    if first == second:
        return DRAW
    return first_name if first > second else second_name


def odd_numbers(n: int) -> list[int]:
    """Return the odd numbers from 1 up to n inclusive."""
    return list(range(1, n + 1, 2))