import pytest

from puzzlebox.reverse import (
    ERROR,
    apply_operation,
    average_letter,
    counter_move,
    even_flags,
    even_position_chars,
    last_digit,
    mirror_pairs,
    parity_bits,
    repeat_word,
    square_times,
    suffixes,
    text_length,
    times_sixty_four,
)


@pytest.mark.parametrize(
    "m, n, expected", [(2, 4, 16), (7, 11, 539), (456, 54, 11228544)]
)
def test_square_times(m, n, expected):
    assert square_times(m, n) == expected


@pytest.mark.parametrize("text, expected", [("2+1", 3), ("2+2", 3), ("12+2", 4)])
def test_text_length(text, expected):
    assert text_length(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("yyyyy", "00000"),
        ("bbbbb", "11111"),
        ("input", "01101"),
        ("CAGED", "00001"),
        ("Mixed", "00101"),
    ],
)
def test_parity_bits(text, expected):
    assert parity_bits(text) == expected


def test_parity_bits_keeps_length():
    assert len(parity_bits("any text here")) == len("any text here")


@pytest.mark.parametrize(
    "text, expected", [("abcdef", "bdf"), ("ab", "b"), ("codingame", "oigm")]
)
def test_even_position_chars(text, expected):
    assert even_position_chars(text) == expected


@pytest.mark.parametrize("text, expected", [("ABC", "B"), ("KLMNOPQRS", "O")])
def test_average_letter(text, expected):
    assert average_letter(text) == expected


def test_average_letter_ignores_case():
    assert average_letter("abc") == average_letter("ABC")


def test_average_letter_empty():
    with pytest.raises(ValueError):
        average_letter("")


def test_even_flags():
    assert even_flags([0, 1, 2, 3]) == [True, False, True, False]
    assert even_flags([44]) == [True]
    assert even_flags([179]) == [False]
    assert even_flags([3254, 24, 654]) == [True, True, True]


@pytest.mark.parametrize(
    "left, op, right, expected",
    [(8, "-", 3, 5), (8, "x", 3, 24), (3, "x", 91, 273), (8, "+", 3, 11)],
)
def test_apply_operation(left, op, right, expected):
    assert apply_operation(left, op, right) == expected


def test_apply_operation_division_truncates():
    assert apply_operation(7, "/", 2) == 3
    assert apply_operation(-7, "/", 2) == -3


def test_apply_operation_errors():
    with pytest.raises(ZeroDivisionError):
        apply_operation(1, "/", 0)
    with pytest.raises(ValueError):
        apply_operation(1, "%", 2)


@pytest.mark.parametrize(
    "h, expected", [(5, 320), (1, 64), (2, 128), (3, 192), (10000, 640000)]
)
def test_times_sixty_four(h, expected):
    assert times_sixty_four(h) == expected


def test_mirror_pairs():
    pairs = mirror_pairs("Chuck Norris")
    assert pairs[0] == ("C", "s")
    assert pairs[5] == (" ", "N")
    assert pairs[-1] == ("s", "C")
    assert len(pairs) == len("Chuck Norris")


def test_mirror_pairs_is_symmetric():
    pairs = mirror_pairs("Hello World")
    assert [(b, a) for a, b in reversed(pairs)] == pairs


def test_suffixes():
    assert suffixes("STRING") == ["STRING", "TRING", "RING", "ING", "NG", "G"]
    assert suffixes("") == []


@pytest.mark.parametrize(
    "move, expected",
    [("Scissors", "Stone"), ("Stone", "Hand"), ("Hand", "Scissors"), ("ASd2q8S", ERROR)],
)
def test_counter_move(move, expected):
    assert counter_move(move) == expected


def test_repeat_word():
    assert repeat_word(2, "Hello") == ["Hello", "Hello"]
    assert repeat_word(7, "blah") == ["blah"] * 7
    assert repeat_word(0, "blah") == []


@pytest.mark.parametrize(
    "n, expected", [(0, 0), (44, 4), (179, 9), (64453, 3)]
)
def test_last_digit(n, expected):
    assert last_digit(n) == expected


def test_last_digit_keeps_sign():
    assert last_digit(-179) == -last_digit(179)