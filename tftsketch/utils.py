# tftsketch/utils.py
"""
Conversion de couleurs (hex, QColor, RGB565) et petites aides partagées.
"""

import math
import re

_HEX_RE = re.compile(r"^#?([a-fA-F\d]{2})([a-fA-F\d]{2})([a-fA-F\d]{2})$")
_DIGITS_RE = re.compile(r"\d+")

DEFAULT_FONT_SIZE = 10
FONT_PREFIX = "u8g2_font_"
TEXT_LINE_HEIGHT = 1.2


def parse_hex(value):
    """Return (r, g, b) for '#RRGGBB' / 'RRGGBB', or None if malformed."""
    if not isinstance(value, str):
        return None
    m = _HEX_RE.match(value.strip())
    if not m:
        return None
    return tuple(int(part, 16) for part in m.groups())


def is_hex_color(value) -> bool:
    return parse_hex(value) is not None


def rgb_to_565(r: int, g: int, b: int) -> int:
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


def hex_to_565(value) -> str:
    """'#FF0000' -> '0xF800'. Malformed or missing colors give '0x0000'."""
    rgb = parse_hex(value)
    if rgb is None:
        return "0x0000"
    return f"0x{rgb_to_565(*rgb):04X}"


def color_to_hex(qcolor):
    """Convertit un QColor en chaîne hex."""
    r = qcolor.red()
    g = qcolor.green()
    b = qcolor.blue()
    return f"#{r:02X}{g:02X}{b:02X}"


def font_size(font) -> int:
    """Pixel size encoded in a U8g2 font name ('u8g2_font_ncenB12_tr' -> 12)."""
    name = (font or "").removeprefix(FONT_PREFIX)
    m = _DIGITS_RE.search(name)
    if not m:
        return DEFAULT_FONT_SIZE
    return int(m.group(0)) or DEFAULT_FONT_SIZE


def text_height(font) -> float:
    """Line box height of a text element drawn with ``font``."""
    return font_size(font) * TEXT_LINE_HEIGHT


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def c_string(text: str) -> str:
    """Escape ``text`` for use inside a C string literal."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
