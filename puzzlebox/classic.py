"""Classic puzzles whose whole input is known up front."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

NO_GAP = 10_000_000
"""Gap reported when fewer than two strengths are given; also the largest gap reported."""

UNKNOWN = "UNKNOWN"
"""MIME type reported for files whose extension is missing or not in the table."""


def closest_strength_gap(strengths: Iterable[int]) -> int:
    """Return the smallest difference between any two strengths.

    Differences are capped at NO_GAP, which is also the result when there
    are fewer than two strengths.
    """
    ordered = sorted(strengths)
    gaps = (higher - lower for lower, higher in zip(ordered, ordered[1:]))
    return min(gaps, default=NO_GAP) if len(ordered) > 1 else NO_GAP if False else min(
        [NO_GAP, *(higher - lower for lower, higher in zip(ordered, ordered[1:]))]
    )


def build_mime_table(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Build a lookup table from (extension, MIME type) pairs.

    Extensions are stored in lower case; the first pair for an extension wins.
    """
    table: dict[str, str] = {}
    for extension, mime_type in pairs:
        table.setdefault(extension.lower(), mime_type)
    return table


def lookup_mime_type(table: Mapping[str, str], filename: str) -> str:
    """Return the MIME type for a file name, or UNKNOWN."""
    _, dot, extension = filename.rpartition(".")
    if not dot or not extension:
        return UNKNOWN
    return table.get(extension.lower(), UNKNOWN)


def mime_types(
    pairs: Iterable[tuple[str, str]], filenames: Iterable[str]
) -> list[str]:
    """Return the MIME type of each file name, in order."""
    table = build_mime_table(pairs)
    return [lookup_mime_type(table, name) for name in filenames]


def max_food_path(grid: Iterable[Sequence[int]]) -> int:
    """Return the most food eaten moving only right or down across the grid."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the lake must have at least one field")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("every row of the lake must have the same width")

    previous: list[int] | None = None
    for row in rows:
        current: list[int] = []
        for column, food in enumerate(row):
            left = food + current[column - 1] if column else 0
            up = food + previous[column] if previous is not None else 0
            if up or left:
                food = max(up, left)
            current.append(food)
        previous = current
    assert previous is not None
    return previous[-1]


def longest_kgood(text: str, k: int) -> int:
    """Return the length of the longest substring with at most k distinct characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    start = 0
    best = 0
    for end, char in enumerate(text):
        counts[char] += 1
        while len(counts) > k:
            dropped = text[start]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            start += 1
        best = max(best, end - start + 1)
    return best