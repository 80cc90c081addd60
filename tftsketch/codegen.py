# tftsketch/codegen.py
"""
Génération du sketch Arduino (TFT_eSPI + U8g2_for_TFT_eSPI) reproduisant
la scène courante.
"""

from .elements import (
    Bitmap,
    Circle,
    FillCircle,
    FillRect,
    Line,
    Pixel,
    Rect,
    Text,
)
from .utils import c_string, font_size, hex_to_565, round_half_up

INDENT = "    "

FOOTER = """
TFT_eSPI tft = TFT_eSPI();
U8g2_for_TFT_eSPI u8g2_for_tft_eSPI;

void setup() {{
    tft.begin();
    tft.setRotation(1);
    u8g2_for_tft_eSPI.begin(tft);
    u8g2_for_tft_eSPI.setFontMode(1);
    u8g2_for_tft_eSPI.setFontDirection(0);
    drawUI();
}}

void drawUI() {{
    tft.fillScreen({background});
{body}
}}

void loop() {{ delay(1000); }}"""


def header(width, height) -> str:
    return (
        f"// Code generated for TFT_eSPI ({width}x{height})\n"
        "#include <TFT_eSPI.h>\n"
        "#include <U8g2_for_TFT_eSPI.h>\n"
    )


def array_literal(source: str) -> str:
    """The '{ ... }' part of a C array declaration, braces included."""
    start = source.find("{")
    end = source.rfind("}")
    if start == -1 or end < start:
        return "{}"
    return source[start:end + 1]


def bitmap_declaration(element: Bitmap, var_name: str, position: int) -> str:
    data_type = "const unsigned char" if element.bpp == 1 else "const uint16_t"
    return (
        f"\n// Bitmap Data for element #{position}\n"
        f"{data_type} {var_name}[] PROGMEM = {array_literal(element.source)};\n"
    )


def draw_statement(element, bitmap_var=None) -> str:
    """Return the C++ drawing code of one element."""
    color = hex_to_565(element.color)
    if isinstance(element, Pixel):
        return f"{INDENT}tft.drawPixel({element.x}, {element.y}, {color});"
    if isinstance(element, Line):
        return (
            f"{INDENT}tft.drawLine({element.x1}, {element.y1}, "
            f"{element.x2}, {element.y2}, {color});"
        )
    if isinstance(element, Rect):
        return (
            f"{INDENT}tft.drawRect({element.x}, {element.y}, "
            f"{element.w}, {element.h}, {color});"
        )
    if isinstance(element, FillRect):
        return (
            f"{INDENT}tft.fillRect({element.x}, {element.y}, "
            f"{element.w}, {element.h}, {color});"
        )
    if isinstance(element, Circle):
        return (
            f"{INDENT}tft.drawCircle({element.x}, {element.y}, "
            f"{element.r}, {color});"
        )
    if isinstance(element, FillCircle):
        return (
            f"{INDENT}tft.fillCircle({element.x}, {element.y}, "
            f"{element.r}, {color});"
        )
    if isinstance(element, Text):
        # drawUTF8 attend la ligne de base, pas le haut du texte
        ascent = round_half_up(font_size(element.font) * 0.8)
        text = c_string(element.text)
        return (
            f"\n{INDENT}// Text: \"{text}\"\n"
            f"{INDENT}u8g2_for_tft_eSPI.setForegroundColor({color});\n"
            f"{INDENT}u8g2_for_tft_eSPI.setFont({element.font});\n"
            f"{INDENT}u8g2_for_tft_eSPI.drawUTF8("
            f"{element.x}, {element.y + ascent}, \"{text}\");"
        )
    if isinstance(element, Bitmap):
        if element.bpp == 1:
            return (
                f"{INDENT}tft.drawBitmap({element.x}, {element.y}, "
                f"{bitmap_var}, {element.w}, {element.h}, {color});"
            )
        return (
            f"{INDENT}tft.pushImage({element.x}, {element.y}, "
            f"{element.w}, {element.h}, {bitmap_var});"
        )
    raise TypeError(f"élément inconnu : {element!r}")


def generate_code(scene, background, width, height) -> str:
    """Generate the sketch drawing ``scene`` on a ``width`` x ``height`` TFT.

    Bitmaps sharing the same C array text share one PROGMEM declaration,
    named after the first element that uses it.
    """
    declarations = []
    bitmap_vars: dict[str, str] = {}
    statements = []
    for position, element in enumerate(scene, start=1):
        var_name = None
        if isinstance(element, Bitmap):
            var_name = bitmap_vars.get(element.source)
            if var_name is None:
                var_name = f"bitmap_{element.id}"
                bitmap_vars[element.source] = var_name
                declarations.append(
                    bitmap_declaration(element, var_name, position)
                )
        statements.append(draw_statement(element, var_name))

    footer = FOOTER.format(
        background=hex_to_565(background), body="\n".join(statements)
    )
    return header(width, height) + "".join(declarations) + footer
