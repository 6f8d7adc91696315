# puzzlebox

Small, self-contained solutions to classic programming puzzles and short
coding challenges. Each solution is a plain function, or a small class for
the one search that keeps state between turns. Solutions take ordinary Python
values and return results. They do not read standard input or write to
standard output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlebox.classic`

Puzzles whose whole input is known before solving starts:

- `closest_strength_gap(strengths)`: the smallest difference between any two
  strengths. With fewer than two strengths the result is `NO_GAP`
  (10 000 000), and no gap larger than that is reported.
- `build_mime_table(pairs)`: builds a lookup table from
  `(extension, mime_type)` pairs. Extensions are stored in lower case, and the
  first pair for an extension wins.
- `lookup_mime_type(table, filename)`: the MIME type for the text after the
  last dot, matched without regard to case. Returns `UNKNOWN` when there is no
  extension or it is not in the table.
- `mime_types(pairs, filenames)`: the two steps above applied to a list of
  file names.
- `max_food_path(grid)`: the most food collected from the top-left field to
  the bottom-right one, moving only right or down. Raises `ValueError` for an
  empty grid or ragged rows.
- `longest_kgood(text, k)`: the length of the longest substring with at most
  `k` distinct characters. Raises `ValueError` for a negative `k`.

```python
from puzzlebox.classic import closest_strength_gap, longest_kgood, mime_types

closest_strength_gap([5, 8, 9])   # 1
longest_kgood("aaaaabcdef", 3)    # 7
mime_types([("html", "text/html")], ["index.HTML", "README"])
# ["text/html", "UNKNOWN"]
```

### `puzzlebox.games`

Strategies for turn-based games played one move at a time:

- `thor_directions(light_x, light_y, thor_x, thor_y)`: a generator that yields
  moves such as `"N"`, `"SE"` or `"W"` until Thor stands on the light.
- `BombSearch(width, height, x, y)`: a binary search over a building's
  windows. Each call to `jump(direction)` takes a hint such as `"UR"`, narrows
  the search and returns the next window as `(x, y)`.
- `highest_mountain(heights)`: the index of the first highest mountain.
  Raises `ValueError` when no heights are given.
- `node_neighbours(rows)`: for each `0` node on the grid, a tuple
  `(x1, y1, x2, y2, x3, y3)` giving the node, its nearest right neighbour and
  its nearest bottom neighbour. A missing neighbour is given as `-1, -1`.

```python
from puzzlebox.games import BombSearch, thor_directions

list(thor_directions(3, 0, 0, 1))   # ["NE", "E", "E"]

search = BombSearch(width=10, height=10, x=2, y=5)
search.jump("UR")                   # (6, 2)
```

### `puzzlebox.fastest_one`

Quick arithmetic and string challenges: `free_time_plan`, `average_ascii`,
`insert_operator`, `missing_letters_sum`, `missing_links`, `sort_by_reversed`,
`polygon_angles`, `power_difference`, `gravity_in_g`, `escape_time`,
`escape_report`, `speed_before_crash`, `mars_mission`, `swap_case` and
`bitwise_not`.

```python
from puzzlebox.fastest_one import bitwise_not, missing_links, sort_by_reversed

bitwise_not("1010")                          # "0101"
missing_links([1, 2, 4])                     # [3]
sort_by_reversed(["that", "cat", "bee"])     # ["bee", "cat", "that"]
```

`missing_links` raises `ValueError("Invalid input")` for a link outside
`1..N+1` or a repeated link.

### `puzzlebox.fastest_two`

More quick challenges: `palindrome_report`, `permutations`, `count_divisible`,
`vieta_summary`, `leonardo`, `sum_of_odds`, `hypotenuse`,
`smallest_typeable`, `linear_values`, `remaining_fuel`, `rectangle`,
`stronger_unit` and `odd_numbers`.

```python
from puzzlebox.fastest_two import leonardo, smallest_typeable

leonardo(5)                    # 15
smallest_typeable(100, "19")   # 111
```

### `puzzlebox.reverse`

Rules worked out from example inputs and outputs: `square_times`,
`text_length`, `parity_bits`, `even_position_chars`, `average_letter`,
`even_flags`, `apply_operation`, `times_sixty_four`, `mirror_pairs`,
`suffixes`, `counter_move`, `repeat_word` and `last_digit`.

```python
from puzzlebox.reverse import counter_move, parity_bits, suffixes

counter_move("Stone")          # "Hand"
suffixes("ING")                # ["ING", "NG", "G"]
parity_bits("input")           # "01101"
```

### `puzzlebox.shortest`

Compact challenges: `case_by_length`, `decrement_digits`, `repeated_count`,
`seat_arrangements`, `difference_and_sum`, `xp_to_next_level`,
`votes_from_score`, `password_score`, `weekly_rainfall`, `sugar_eaten` and
`dog_to_human_years`.

```python
from puzzlebox.shortest import password_score, repeated_count

repeated_count(3)              # "123123123"
password_score("Secret123")    # (True, 38)
```

## Errors

Where a challenge has no meaningful answer, the functions raise an exception
instead of returning a value. Division by zero raises `ZeroDivisionError`.
Empty or malformed input, such as an empty text to average or a forecast
shorter than seven days, raises `ValueError`.

## What this package does not do

puzzlebox is a library only. It has no command-line program and nothing that
reads puzzle input from standard input. It does not play the turn-based games
against a referee on its own. Parsing input and printing answers is left to
the caller.