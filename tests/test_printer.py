import pytest

from board_game.printer import (
    ClearType,
    Color,
    ColorError,
    ColorType,
    Position,
    PositionError,
    clear,
    move_cursor,
    reset_rgb_ansi,
    rgb_ansi,
)


def test_color_type_codes():
    assert int(ColorType.FOREGROUND) == 38
    assert int(ColorType.BACKGROUND) == 48
    assert rgb_ansi(ColorType.FOREGROUND, Color(0, 0, 0)).startswith("\x1b[38;")
    assert rgb_ansi(ColorType.BACKGROUND, Color(0, 0, 0)).startswith("\x1b[48;")


def test_rgb_ansi_foreground():
    assert rgb_ansi(ColorType.FOREGROUND, Color(1, 2, 3)) == "\x1b[38;2;1;2;3m"


def test_rgb_ansi_background_prefix_and_suffix():
    seq = rgb_ansi(ColorType.BACKGROUND, Color(10, 20, 30))
    assert seq.startswith("\x1b[48;2;")
    assert seq.endswith(";30m")


def test_reset_sequence():
    assert reset_rgb_ansi() == "\x1b[39m\x1b[49m"


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ClearType.BEFORE_CURSOR, "\x1b[1J]"),
        (ClearType.AFTER_CURSOR, "\x1b[0J]"),
        (ClearType.ENTIRE_SCREEN, "\x1b[2J]"),
    ],
)
def test_clear_sequences(kind, expected):
    assert clear(kind) == expected


def test_move_cursor():
    assert move_cursor(Position(4, 7)) == "\x1b[4;7H"


@pytest.mark.parametrize("x, y", [(0, 1), (1, 0), (0, 0)])
def test_position_rejects_zero(x, y):
    with pytest.raises(PositionError) as info:
        Position(x, y)
    assert str(info.value) == f"Invalid position: ({x}, {y})"


@pytest.mark.parametrize("value", [0x000000, 0x123456, 0xABCDEF, 0xFFFFFF])
def test_hex_string_matches_integer(value):
    text = f"{value:06x}"
    assert Color.from_hex_str("#" + text) == Color.from_hex(value)
    assert Color.from_hex_str(text.upper()) == Color.from_hex(value)


def test_from_hex_str_pure_red():
    assert Color.from_hex_str("#ff0000") == Color(255, 0, 0)


def test_from_hex_ignores_bits_above_24():
    assert Color.from_hex(0xFF123456) == Color.from_hex(0x123456)


def test_from_hex_str_ignores_trailing_digits():
    assert Color.from_hex_str("12345678") == Color.from_hex_str("123456")


@pytest.mark.parametrize("text", ["#zz0000", "#12", "", "# 12345", "#12-456"])
def test_from_hex_str_rejects_bad_input(text):
    with pytest.raises(ColorError):
        Color.from_hex_str(text)


def test_color_rejects_out_of_range_component():
    with pytest.raises(ValueError):
        Color(256, 0, 0)