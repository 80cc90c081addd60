import pytest

from tftsketch.codegen import array_literal, draw_statement, generate_code
from tftsketch.elements import (
    Bitmap,
    Circle,
    Element,
    FillCircle,
    FillRect,
    Line,
    Pixel,
    Rect,
    Text,
)
from tftsketch.utils import hex_to_565


@pytest.mark.parametrize(
    "color, literal",
    [
        ("#FF0000", "0xF800"),
        ("#00FF00", "0x07E0"),
        ("#0000FF", "0x001F"),
        ("#FFFFFF", "0xFFFF"),
        ("ffffff", "0xFFFF"),
        ("#000000", "0x0000"),
        ("red", "0x0000"),
        ("#12345", "0x0000"),
        (None, "0x0000"),
    ],
)
def test_hex_to_565(color, literal):
    assert hex_to_565(color) == literal


class TestStatements:
    @pytest.mark.parametrize(
        "element, code",
        [
            (Pixel(x=1, y=2, color="#FF0000"), "tft.drawPixel(1, 2, 0xF800);"),
            (Line(x1=0, y1=1, x2=10, y2=11), "tft.drawLine(0, 1, 10, 11, 0x0000);"),
            (Rect(x=1, y=2, w=3, h=4), "tft.drawRect(1, 2, 3, 4, 0x0000);"),
            (FillRect(x=1, y=2, w=3, h=4), "tft.fillRect(1, 2, 3, 4, 0x0000);"),
            (Circle(x=5, y=6, r=7), "tft.drawCircle(5, 6, 7, 0x0000);"),
            (FillCircle(x=5, y=6, r=7), "tft.fillCircle(5, 6, 7, 0x0000);"),
        ],
    )
    def test_shapes(self, element, code):
        assert draw_statement(element) == "    " + code

    def test_text_uses_baseline(self):
        el = Text(x=5, y=20, text="Hi", font="u8g2_font_ncenB12_tr",
                  color="#FFFFFF")
        code = draw_statement(el)
        assert '// Text: "Hi"' in code
        assert "u8g2_for_tft_eSPI.setForegroundColor(0xFFFF);" in code
        assert "u8g2_for_tft_eSPI.setFont(u8g2_font_ncenB12_tr);" in code
        # 12 * 0.8 = 9.6 -> 10
        assert code.endswith('u8g2_for_tft_eSPI.drawUTF8(5, 30, "Hi");')

    def test_text_is_escaped(self):
        el = Text(x=0, y=0, text='say "hi"\\\n', font="u8g2_font_5x7_tr")
        code = draw_statement(el)
        assert r'"say \"hi\"\\\n"' in code

    def test_bitmap_statements(self):
        mono = Bitmap(x=1, y=2, w=8, h=1, bpp=1, source="{0x80}",
                      color="#FF0000")
        color = Bitmap(x=3, y=4, w=1, h=1, bpp=16, source="{0xF800}")
        assert draw_statement(mono, "bitmap_7") == (
            "    tft.drawBitmap(1, 2, bitmap_7, 8, 1, 0xF800);"
        )
        assert draw_statement(color, "bitmap_8") == (
            "    tft.pushImage(3, 4, 1, 1, bitmap_8);"
        )

    def test_unknown_element(self):
        with pytest.raises(TypeError):
            draw_statement(Element())


class TestGenerate:
    def test_empty_scene(self):
        code = generate_code([], "#FFFFFF", 320, 240)
        assert code.startswith("// Code generated for TFT_eSPI (320x240)\n")
        assert "#include <TFT_eSPI.h>" in code
        assert "#include <U8g2_for_TFT_eSPI.h>" in code
        assert "tft.fillScreen(0xFFFF);" in code
        assert "PROGMEM" not in code
        assert code.endswith("void loop() { delay(1000); }")

    def test_statements_follow_scene_order(self):
        scene = [Rect(x=1, y=1, w=2, h=2), Pixel(x=0, y=0)]
        code = generate_code(scene, "#000000", 128, 64)
        assert code.index("tft.drawRect") < code.index("tft.drawPixel")
        assert "tft.fillScreen(0x0000);" in code

    def test_shared_bitmap_data(self):
        src = "const unsigned char logo[] = {0x80};"
        a = Bitmap(x=0, y=0, w=8, h=1, source=src, color="#FF0000")
        b = Bitmap(x=10, y=0, w=8, h=1, source=src, color="#0000FF")
        code = generate_code([Pixel(), a, b], "#FFFFFF", 320, 240)
        assert code.count("PROGMEM") == 1
        assert "// Bitmap Data for element #2" in code
        assert (
            f"const unsigned char bitmap_{a.id}[] PROGMEM = {{0x80}};" in code
        )
        assert f"tft.drawBitmap(0, 0, bitmap_{a.id}, 8, 1, 0xF800);" in code
        assert f"tft.drawBitmap(10, 0, bitmap_{a.id}, 8, 1, 0x001F);" in code

    def test_color_bitmap_declaration(self):
        el = Bitmap(w=1, h=1, bpp=16, source="{0x07E0}")
        code = generate_code([el], "#FFFFFF", 320, 240)
        assert f"const uint16_t bitmap_{el.id}[] PROGMEM = {{0x07E0}};" in code

    def test_deterministic(self):
        scene = [
            Bitmap(w=8, h=1, source="{0x80}"),
            Text(x=1, y=1, text="ok"),
            Circle(x=3, y=3, r=2),
        ]
        assert generate_code(scene, "#FFFFFF", 320, 240) == generate_code(
            scene, "#FFFFFF", 320, 240
        )

    def test_invalid_background(self):
        assert "tft.fillScreen(0x0000);" in generate_code([], "blue", 1, 1)


def test_array_literal():
    assert array_literal("int a[] = { 1, 2 };") == "{ 1, 2 }"
    assert array_literal("nothing") == "{}"
