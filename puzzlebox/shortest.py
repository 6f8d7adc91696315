"""Short puzzles: case changes, digits, counting, levels, votes, passwords and more."""

from __future__ import annotations

import math
import string
from collections.abc import Iterable

LEVEL_UP = "LEVEL UP"
RAINY = "R"
RAIN_PER_DAY = 4
DAYS_IN_WEEK = 7

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 15

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_UPPERCASE = frozenset(string.ascii_uppercase)
_LETTERS_AND_DIGITS = frozenset(string.ascii_letters + string.digits)


def _factorial(n: int) -> int:
    """Return n!, taking the factorial of a negative number as 1."""
    return math.factorial(n) if n > 0 else 1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Divide integers, rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def case_by_length(rows: Iterable[str]) -> list[str]:
    """Upper-case rows of even length and lower-case rows of odd length (ASCII only)."""
    return [
        row.translate(_UPPER if len(row) % 2 == 0 else _LOWER) for row in rows
    ]


def decrement_digits(number: str) -> str:
    """Decrease every digit by one, dropping digits that were 0."""
    result = []
    for char in number:
        value = ord(char) - ord("0") - 1
        if value >= 0:
            result.append(str(value))
    return "".join(result)


def repeated_count(n: int) -> str:
    """Return the numbers 1..n written out, n times over."""
    return "".join(str(value) for value in range(1, n + 1)) * max(n, 0)


def seat_arrangements(n: int, a: int, b: int) -> int:
    """Return the ways to seat a identical boys and b identical girls on n seats."""
    return _trunc_div(
        _factorial(n), _factorial(a) * _factorial(b) * _factorial(n - a - b)
    )


def difference_and_sum(a: int, b: int) -> str:
    """Return a - b followed directly by a + b."""
    return f"{a - b}{a + b}"


def xp_to_next_level(level: int, xp: int) -> int | str:
    """Return the XP still needed for the next level, or "LEVEL UP"."""
    needed = math.floor(math.pow(level + 1, 1.5) * 10) - xp
    return LEVEL_UP if needed <= 0 else needed


def votes_from_score(score: int, rate: int) -> tuple[int, int]:
    """Return (upvotes, downvotes) from a score and an upvote rate in percent."""
    upvotes = _trunc_div(-rate * score, 100 - 2 * rate)
    return upvotes, upvotes - score


def password_score(password: str) -> tuple[bool, int]:
    """Return whether the password is valid and the points it earns."""
    spaces = uppers = digits = 0
    score = 0
    for char in password:
        if char == " ":
            spaces += 1
        elif char in _DIGITS:
            score += 1
            digits += 1
        elif char not in _LETTERS_AND_DIGITS:
            score += 25
        elif char in _UPPERCASE:
            score += 10
            uppers += 1
        else:
            score += 5
    valid = (
        PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH
        and digits >= 1
        and uppers >= 1
        and spaces == 0
    )
    return valid, score


def weekly_rainfall(forecast: str) -> int:
    """Return the millimetres of rain over the first seven days of the forecast.

    Whitespace between the day letters is ignored.
    """
    days = [char for char in forecast if not char.isspace()][:DAYS_IN_WEEK]
    if len(days) < DAYS_IN_WEEK:
        raise ValueError("the forecast must cover seven days")
    return sum(RAIN_PER_DAY for day in days if day == RAINY)


def sugar_eaten(seconds: int, speed: int) -> float:
    """Return the grams eaten in the given seconds at a speed in grams per minute."""
    return seconds / 60.0 * speed


def dog_to_human_years(age: int) -> int:
    """Return a dog's age in human years: 10.5 each for two years, then 4 each."""
    return 21 + (age - 2) * 4