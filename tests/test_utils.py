import pytest
from PyQt5.QtGui import QColor

from tftsketch.utils import (
    c_string,
    color_to_hex,
    font_size,
    is_hex_color,
    parse_hex,
    rgb_to_565,
    round_half_up,
    text_height,
)


def test_parse_hex():
    assert parse_hex("#FF8000") == (255, 128, 0)
    assert parse_hex("ff8000") == (255, 128, 0)
    assert parse_hex("#ff80") is None
    assert parse_hex(0xFF8000) is None
    assert not is_hex_color("rgb(1,2,3)")


def test_rgb_to_565():
    assert rgb_to_565(255, 255, 255) == 0xFFFF
    assert rgb_to_565(8, 4, 8) == 0x0821


def test_color_to_hex():
    assert color_to_hex(QColor(255, 16, 0)) == "#FF1000"


@pytest.mark.parametrize(
    "font, size",
    [
        ("u8g2_font_ncenB12_tr", 12),
        ("u8g2_font_6x10_tr", 6),
        ("u8g2_font_helvB24_te", 24),
        ("u8g2_font_unifont_t_symbols", 10),
        ("u8g2_font_logisoso42_tn", 42),
        ("helvB08", 8),
        ("", 10),
        (None, 10),
    ],
)
def test_font_size(font, size):
    assert font_size(font) == size


def test_text_height_ignores_prefix_digits():
    assert text_height("u8g2_font_ncenB12_tr") == pytest.approx(14.4)
    assert text_height("u8g2_font_unifont_t_symbols") == pytest.approx(12.0)


def test_round_half_up():
    assert round_half_up(9.6) == 10
    assert round_half_up(2.5) == 3
    assert round_half_up(0.49) == 0


def test_c_string():
    assert c_string('a"b') == 'a\\"b'
    assert c_string("back\\slash") == "back\\\\slash"
    assert c_string("two\nlines\r") == "two\\nlines\\r"
