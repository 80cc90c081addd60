import pytest

from tftsketch.core import Document
from tftsketch.elements import Bitmap, Circle, FillRect, Line, Pixel, Text
from tftsketch.history import AddAction
from tftsketch.render import (
    SELECTION_PADDING,
    render_scene,
    selection_bounds,
    text_font,
)

from conftest import fixed_width


def color_at(image, x, y):
    return image.pixelColor(x, y).name()


@pytest.fixture()
def small_doc():
    return Document(32, 16, background="#FFFFFF", measure=fixed_width)


class TestRenderScene:
    def test_background_and_size(self, small_doc):
        image = render_scene(small_doc)
        assert (image.width(), image.height()) == (32, 16)
        assert color_at(image, 5, 5) == "#ffffff"

    def test_fill_rect(self, small_doc):
        small_doc.add_element(FillRect(x=2, y=2, w=4, h=4, color="#FF0000"))
        image = render_scene(small_doc)
        assert color_at(image, 3, 3) == "#ff0000"
        assert color_at(image, 10, 10) == "#ffffff"

    def test_painter_order(self, small_doc):
        small_doc.add_element(FillRect(x=0, y=0, w=8, h=8, color="#FF0000"))
        small_doc.add_element(FillRect(x=4, y=4, w=8, h=8, color="#0000FF"))
        image = render_scene(small_doc)
        assert color_at(image, 2, 2) == "#ff0000"
        assert color_at(image, 5, 5) == "#0000ff"

    def test_pixel(self, small_doc):
        small_doc.add_element(Pixel(x=7, y=3, color="#00FF00"))
        image = render_scene(small_doc)
        assert color_at(image, 7, 3) == "#00ff00"
        assert color_at(image, 8, 3) == "#ffffff"

    def test_mono_bitmap_takes_element_color(self, small_doc):
        small_doc.set_pen_color("#00FF00")
        small_doc.load_bitmap(8, 1, 1, "{0x80}")
        small_doc.place_bitmap(2, 3)
        image = render_scene(small_doc)
        assert color_at(image, 2, 3) == "#00ff00"
        assert color_at(image, 3, 3) == "#ffffff"

    def test_color_bitmap_keeps_its_pixels(self, small_doc):
        small_doc.set_pen_color("#00FF00")
        small_doc.load_bitmap(2, 1, 16, "{0xF800, 0x001F}")
        small_doc.place_bitmap(1, 1)
        image = render_scene(small_doc)
        assert color_at(image, 1, 1) == "#ff0000"
        assert color_at(image, 2, 1) == "#0000ff"

    def test_undecodable_bitmap_draws_nothing(self, small_doc):
        small_doc.history.append(
            AddAction(Bitmap(x=0, y=0, w=8, h=1, source="oops"))
        )
        image = render_scene(small_doc)
        assert color_at(image, 0, 0) == "#ffffff"

    def test_preview_is_drawn(self, small_doc):
        small_doc.set_pen_color("#FF0000")
        small_doc.set_tool("fill-rect")
        small_doc.pointer_down(0, 0)
        small_doc.pointer_move(6, 6)
        image = render_scene(small_doc)
        assert color_at(image, 3, 3) == "#ff0000"
        assert small_doc.scene == []


class TestSelectionBounds:
    def test_circle(self):
        rect = selection_bounds(Circle(x=50, y=40, r=10))
        pad = SELECTION_PADDING
        assert (rect.x(), rect.y()) == (40 - pad, 30 - pad)
        assert (rect.width(), rect.height()) == (20 + 2 * pad, 20 + 2 * pad)

    def test_line_any_direction(self):
        rect = selection_bounds(Line(x1=20, y1=30, x2=10, y2=5))
        pad = SELECTION_PADDING
        assert (rect.x(), rect.y()) == (10 - pad, 5 - pad)
        assert (rect.width(), rect.height()) == (10 + 2 * pad, 25 + 2 * pad)

    def test_text(self):
        el = Text(x=0, y=0, text="abcd", font="u8g2_font_6x10_tr")
        rect = selection_bounds(el, fixed_width)
        pad = SELECTION_PADDING
        assert rect.width() == 24 + 2 * pad
        assert rect.height() == pytest.approx(6 * 1.2 + 2 * pad)


def test_text_font_uses_size_from_name():
    el = Text(x=0, y=0, text="Hi", font="u8g2_font_ncenB12_tr")
    assert text_font(el).pixelSize() == 12
