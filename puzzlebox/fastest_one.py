"""Short puzzles: free time, ASCII sums, operators, links, angles and more."""

from __future__ import annotations

import math
import string
from collections.abc import Iterable

OK = "OK"
INVALID_LINKS = "Invalid input"
ESCAPED = "Room Escaped"
ESCAPE_ERROR = "ERROR"
NOT_ENOUGH_TIME = "Failure, Not enough time"
NOT_ENOUGH_FUEL = "Failure, Not enough fuel"
WELCOME = "Welcome to Mars"

FINAL_STEP_SECONDS = 2
ESCAPE_LIMIT = 10
_ACTION_SECONDS = {".": 2, "<": 4, "|": 5}

_SWAP_ASCII = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)
_FLIP_BITS = {"0": "1", "1": "0"}


def _trunc_div(numerator: int, denominator: int) -> int:
    """Divide integers, rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def free_time_plan(free: int, gaming: int, study: int) -> str | int:
    """Return "OK" if gaming and study fit, else the gaming hours that still fit."""
    if gaming + study <= free:
        return OK
    return free - study


def average_ascii(text: str) -> int:
    """Return the average character code of the text, rounded down."""
    if not text:
        raise ValueError("text must not be empty")
    return sum(map(ord, text)) // len(text)


def insert_operator(op: str, index: int, number: str) -> str:
    """Insert an operator into a number at an index and return the result.

    A sign inserted at index 0 simply prefixes the number.
    """
    if index == 0 and op in "+-" and len(op) == 1:
        return op + number
    if op not in ("+", "-", "/", "*"):
        raise ValueError(f"unknown operator: {op!r}")
    head, tail = number[:max(index, 0)], number[max(index, 0):]
    if index < 0:
        head, tail = "", number
    try:
        left, right = int(head), int(tail)
    except ValueError:
        raise ValueError(
            f"cannot split {number!r} into two numbers at index {index}"
        ) from None
    if op == "+":
        return str(left + right)
    if op == "-":
        return str(left - right)
    if op == "*":
        return str(left * right)
    if right == 0:
        raise ZeroDivisionError("division by zero")
    return str(_trunc_div(left, right))


def missing_letters_sum(pattern: str) -> int:
    """Return the sum of the character codes hidden behind each '*'."""
    total = 0
    current: int | None = None
    for char in pattern:
        if char != "*":
            current = ord(char)
            continue
        if current is None:
            raise ValueError("pattern must not start with '*'")
        current += 1
        total += current
    return total


def missing_links(links: Iterable[int]) -> list[int]:
    """Return the values missing between consecutive links of the chain.

    Raises ValueError when a link lies outside 1..N+1 or appears twice.
    """
    values = list(links)
    limit = len(values) + 1
    if any(value > limit or value < 1 for value in values):
        raise ValueError(INVALID_LINKS)
    ordered = sorted(values)
    missing = []
    for lower, higher in zip(ordered, ordered[1:]):
        if lower == higher:
            raise ValueError(INVALID_LINKS)
        if higher - lower == 2:
            missing.append(higher - 1)
    return missing


def sort_by_reversed(words: Iterable[str]) -> list[str]:
    """Sort words alphabetically by their reversed spelling."""
    return sorted(words, key=lambda word: word[::-1])


def polygon_angles(sides: int) -> tuple[int, int, str]:
    """Return the interior angle, exterior angle and "even" or "odd"."""
    if sides == 0:
        raise ZeroDivisionError("a polygon needs at least one side")
    interior = _trunc_div((sides - 2) * 180, sides)
    exterior = 180 - interior
    parity = "even" if interior % 2 == 0 and exterior % 2 == 0 else "odd"
    return interior, exterior, parity


def power_difference(a: float, x: float, b: int, y: int) -> int:
    """Return |a**b - x**y| rounded to the nearest integer, halves away from zero."""
    difference = abs(math.pow(a, b) - math.pow(x, y))
    whole = math.floor(difference)
    return whole + 1 if difference - whole >= 0.5 else whole


def gravity_in_g(m1: float, m2: float, r: float) -> str:
    """Return the gravity between two masses in terms of G, to two decimals."""
    if r == 0:
        raise ZeroDivisionError("distance must not be zero")
    return f"{m1 * m2 / (r * r):.2f}G"


def escape_time(description: str) -> int:
    """Return the seconds needed to escape, including the final step."""
    spent = sum(_ACTION_SECONDS.get(char, 0) for char in description)
    return spent + FINAL_STEP_SECONDS


def escape_report(description: str) -> str:
    """Return "ERROR" for quick escapes, else "Room Escaped" and the time."""
    total = escape_time(description)
    if total <= ESCAPE_LIMIT:
        return ESCAPE_ERROR
    return f"{ESCAPED}\n{total}"


def speed_before_crash(m1: float, m2: float, u2: float, v2: float, v1: float) -> float:
    """Return your speed before the collision, by conservation of momentum."""
    if m1 == 0:
        raise ZeroDivisionError("your car's mass must not be zero")
    return (m1 * v1 + m2 * (v2 - u2)) / m1


def mars_mission(
    distance: int, time: int, velocity: int, fuel: int, fuel_consumption: int
) -> str:
    """Report whether the rocket reaches Mars; lack of time is reported first."""
    if velocity * time < distance:
        return NOT_ENOUGH_TIME
    if fuel * fuel_consumption < distance:
        return NOT_ENOUGH_FUEL
    return WELCOME


def swap_case(text: str) -> str:
    """Swap the case of every ASCII letter."""
    return text.translate(_SWAP_ASCII)


def bitwise_not(binary: str) -> str:
    """Flip every binary digit; other characters are dropped."""
    return "".join(_FLIP_BITS[char] for char in binary if char in _FLIP_BITS)