import pytest

from puzzlebox.games import BombSearch, highest_mountain, node_neighbours, thor_directions

STEPS = {"N": (0, -1), "S": (0, 1), "W": (-1, 0), "E": (1, 0)}


def _walk(x, y, moves):
    for move in moves:
        for letter in move:
            dx, dy = STEPS[letter]
            x, y = x + dx, y + dy
    return x, y


@pytest.mark.parametrize(
    "light, start",
    [((31, 4), (5, 4)), ((0, 17), (39, 0)), ((20, 5), (20, 15)), ((36, 17), (0, 0))],
)
def test_thor_reaches_light(light, start):
    moves = list(thor_directions(*light, *start))
    assert _walk(*start, moves) == light
    assert len(moves) == max(abs(light[0] - start[0]), abs(light[1] - start[1]))


def test_thor_moves_are_valid_compass_points():
    moves = list(thor_directions(36, 17, 0, 0))
    assert set(moves) <= {"N", "NE", "E", "SE", "S", "SW", "W", "NW"}


def test_thor_diagonal_first():
    assert next(thor_directions(10, 10, 0, 0)) == "SE"


def test_thor_already_on_light():
    assert list(thor_directions(3, 3, 3, 3)) == []


def _hint(x, y, bomb_x, bomb_y):
    vertical = "U" if bomb_y < y else "D" if bomb_y > y else ""
    horizontal = "L" if bomb_x < x else "R" if bomb_x > x else ""
    return vertical + horizontal


@pytest.mark.parametrize(
    "width, height, start, bomb",
    [
        (10, 10, (2, 5), (7, 4)),
        (4, 8, (2, 3), (0, 7)),
        (40, 60, (6, 6), (39, 59)),
        (1, 80, (0, 0), (0, 36)),
        (100, 100, (50, 50), (0, 0)),
        (10, 10, (3, 4), (8, 4)),
    ],
)
def test_bomb_search_finds_bomb_within_building(width, height, start, bomb):
    search = BombSearch(width, height, *start)
    position = start
    for _ in range(100):
        if position == bomb:
            break
        position = search.jump(_hint(*position, *bomb))
        assert 0 <= position[0] < width
        assert 0 <= position[1] < height
    assert position == bomb
    assert (search.x, search.y) == bomb


def test_highest_mountain_first_of_ties():
    heights = [3, 9, 2, 9, 0, 1, 4, 5]
    index = highest_mountain(heights)
    assert heights[index] == max(heights)
    assert all(h < heights[index] for h in heights[:index])


def test_highest_mountain_single():
    assert highest_mountain([0, 0, 0, 0, 0, 0, 0, 0]) == 0


def test_highest_mountain_empty():
    with pytest.raises(ValueError):
        highest_mountain([])


def test_node_neighbours_small_grid():
    assert node_neighbours(["00", "0."]) == [
        (0, 0, 1, 0, 0, 1),
        (1, 0, -1, -1, -1, -1),
        (0, 1, -1, -1, -1, -1),
    ]


def test_node_neighbours_invariants():
    rows = ["0.0.0", ".0...", "0..00", "..0.0"]
    result = node_neighbours(rows)
    nodes = {(x, y) for y, row in enumerate(rows) for x, c in enumerate(row) if c == "0"}
    assert [(x, y) for x, y, *_ in result] == sorted(nodes, key=lambda p: (p[1], p[0]))
    for x1, y1, x2, y2, x3, y3 in result:
        if (x2, y2) == (-1, -1):
            assert not any((x, y1) in nodes for x in range(x1 + 1, len(rows[y1])))
        else:
            assert y2 == y1 and x2 > x1 and (x2, y2) in nodes
            assert not any((x, y1) in nodes for x in range(x1 + 1, x2))
        if (x3, y3) == (-1, -1):
            assert not any((x1, y) in nodes for y in range(y1 + 1, len(rows)))
        else:
            assert x3 == x1 and y3 > y1 and (x3, y3) in nodes
            assert not any((x1, y) in nodes for y in range(y1 + 1, y3))


def test_node_neighbours_empty_cells_only():
    assert node_neighbours(["...", "..."]) == []