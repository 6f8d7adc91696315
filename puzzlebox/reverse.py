"""Puzzles whose rules were worked out from example inputs and outputs."""

from __future__ import annotations

from collections.abc import Iterable

ERROR = "Error"

_COUNTER_MOVES = {
    "Stone": "Hand",
    "Hand": "Scissors",
    "Scissors": "Stone",
}


def _trunc_div(numerator: int, denominator: int) -> int:
    """Divide integers, rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _ascii_upper(char: str) -> str:
    """Upper-case an ASCII letter, leaving every other character alone."""
    return char.upper() if "a" <= char <= "z" else char


def square_times(m: int, n: int) -> int:
    """Return m squared times n."""
    return m * m * n


def text_length(text: str) -> int:
    """Return the number of characters in the text."""
    return len(text)


def parity_bits(text: str) -> str:
    """Return "1" for each character with an even code and "0" for an odd one."""
    return "".join("0" if ord(char) % 2 else "1" for char in text)


def even_position_chars(text: str) -> str:
    """Return the characters at the 2nd, 4th, 6th, ... positions."""
    return text[1::2]


def average_letter(text: str) -> str:
    """Return the character whose code is the average of the upper-cased text, rounded down."""
    if not text:
        raise ValueError("text must not be empty")
    total = sum(ord(_ascii_upper(char)) for char in text)
    return chr(total // len(text))


def even_flags(numbers: Iterable[int]) -> list[bool]:
    """Return whether each number is even."""
    return [number % 2 == 0 for number in numbers]


def apply_operation(left: int, op: str, right: int) -> int:
    """Apply "+", "-", "/" (toward zero) or "x" to two integers."""
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "x":
        return left * right
    if op == "/":
        return _trunc_div(left, right)
    raise ValueError(f"unknown operation: {op!r}")


def times_sixty_four(h: int) -> int:
    """Return h times 64."""
    return 64 * h


def mirror_pairs(text: str) -> list[tuple[str, str]]:
    """Pair each character with the one at the mirrored position."""
    return list(zip(text, reversed(text)))


def suffixes(text: str) -> list[str]:
    """Return the text and each shorter suffix, down to the last character."""
    return [text[start:] for start in range(len(text))]


def counter_move(move: str) -> str:
    """Return the move that beats Stone, Hand or Scissors, or "Error"."""
    return _COUNTER_MOVES.get(move, ERROR)


def repeat_word(count: int, word: str) -> list[str]:
    """Return the word repeated count times."""
    return [word] * max(count, 0)


def last_digit(n: int) -> int:
    """Return the last decimal digit of n, carrying the sign of n."""
    digit = abs(n) % 10
    return -digit if n < 0 else digit