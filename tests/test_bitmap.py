import pytest

from tftsketch.bitmap import BitmapCodec, decode, parse_c_array, required_length
from tftsketch.elements import Bitmap
from tftsketch.errors import (
    BitmapError,
    LengthMismatch,
    ParseError,
    UnsupportedFormat,
)


class TestParseCArray:
    def test_mixed_hex_and_decimal(self):
        src = "const unsigned char logo[] PROGMEM = {0x80, 12, 0XfF};"
        assert parse_c_array(src) == [0x80, 12, 255]

    def test_uses_first_and_last_brace(self):
        assert parse_c_array("x {1, {2}, 3} y") == [1, 2, 3]

    @pytest.mark.parametrize("src", ["no braces here", "} 1, 2 {", "{ }", "{ a, b }"])
    def test_invalid_sources(self, src):
        with pytest.raises(ParseError):
            parse_c_array(src)

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_c_array("")


class TestMonochrome:
    def test_single_msb_bit(self):
        image = decode("{0x80}", 8, 1, 1)
        assert image.width() == 8 and image.height() == 1
        assert image.pixelColor(0, 0).alpha() == 255
        for x in range(1, 8):
            assert image.pixelColor(x, 0).alpha() == 0

    def test_rows_are_padded_to_whole_bytes(self):
        # 9 px wide: two bytes per row, second row starts at byte 2
        image = decode("{0x00, 0x80, 0x80, 0x00}", 9, 2, 1)
        assert image.pixelColor(8, 0).alpha() == 255
        assert image.pixelColor(0, 0).alpha() == 0
        assert image.pixelColor(0, 1).alpha() == 255
        assert image.pixelColor(8, 1).alpha() == 0

    def test_minimum_length(self):
        assert required_length(8, 1, 1) == 1
        assert required_length(9, 2, 1) == 4
        assert required_length(16, 2, 1) == 4

    def test_too_short(self):
        with pytest.raises(LengthMismatch) as info:
            decode("{0x00, 0x80, 0x80}", 9, 2, 1)
        assert info.value.expected == 4
        assert info.value.found == 3

    def test_extra_values_are_ignored(self):
        image = decode("{0xFF, 0x01, 0x02}", 8, 1, 1)
        assert all(image.pixelColor(x, 0).alpha() == 255 for x in range(8))


class TestRgb565:
    @pytest.mark.parametrize(
        "value, rgb",
        [
            ("0xF800", (255, 0, 0)),
            ("0x07E0", (0, 255, 0)),
            ("0x001F", (0, 0, 255)),
            ("0xFFFF", (255, 255, 255)),
            ("0x0000", (0, 0, 0)),
        ],
    )
    def test_channel_expansion(self, value, rgb):
        image = decode("{%s}" % value, 1, 1, 16)
        assert image.pixelColor(0, 0).getRgb() == rgb + (255,)

    def test_row_major_order(self):
        image = decode("{0xF800, 0x001F}", 1, 2, 16)
        assert image.pixelColor(0, 0).red() == 255
        assert image.pixelColor(0, 1).blue() == 255

    @pytest.mark.parametrize("src", ["{0xF800}", "{0xF800, 0, 0}"])
    def test_count_must_match_exactly(self, src):
        with pytest.raises(LengthMismatch):
            decode(src, 2, 1, 16)


class TestUnsupported:
    def test_bit_depth(self):
        with pytest.raises(UnsupportedFormat):
            decode("{1}", 1, 1, 8)

    @pytest.mark.parametrize("w, h", [(0, 1), (1, 0), (-3, 2)])
    def test_size(self, w, h):
        with pytest.raises(UnsupportedFormat):
            decode("{1}", w, h, 1)

    def test_checked_before_parsing(self):
        with pytest.raises(UnsupportedFormat):
            decode("not an array", 1, 1, 24)


class TestCodec:
    def test_decode_caches_by_source(self):
        codec = BitmapCodec()
        assert not codec.has("{0x80}")
        image = codec.decode("{0x80}", 8, 1, 1)
        assert codec.has("{0x80}")
        assert codec.get("{0x80}") is image
        assert len(codec) == 1
        assert codec.decode_count == 1

    def test_ensure_reuses_cached_image(self):
        codec = BitmapCodec()
        a = Bitmap(w=8, h=1, source="{0x80}", color="#FF0000")
        b = Bitmap(w=8, h=1, source="{0x80}", color="#00FF00")
        assert codec.ensure(a) is codec.ensure(b)
        assert codec.decode_count == 1

    def test_failed_decode_is_not_cached(self):
        codec = BitmapCodec()
        with pytest.raises(BitmapError):
            codec.decode("{}", 8, 1, 1)
        assert len(codec) == 0
        assert codec.decode_count == 0

    def test_clear(self):
        codec = BitmapCodec()
        codec.decode("{0x80}", 8, 1, 1)
        codec.clear()
        assert len(codec) == 0
        assert codec.get("{0x80}") is None
