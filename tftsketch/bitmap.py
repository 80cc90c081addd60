# tftsketch/bitmap.py
"""
Décodage des bitmaps fournis sous forme de tableau C.

Deux formats sont gérés :

* 1 bpp : octets MSB en premier, ``ceil(w / 8)`` octets par ligne. Le
  résultat est un masque (pixels allumés blancs opaques, les autres
  transparents) ; la couleur de l'élément est appliquée au dessin.
* 16 bpp : une valeur RGB565 par pixel, stockée déjà colorée.

Les images décodées sont mises en cache par texte source exact, de sorte
que deux éléments partageant le même tableau ne sont décodés qu'une fois.
"""

import logging
import re

from PyQt5.QtGui import QImage, qRgba

from .elements import Bitmap
from .errors import LengthMismatch, ParseError, UnsupportedFormat

logger = logging.getLogger(__name__)

SUPPORTED_BPP = (1, 16)

_TOKEN_RE = re.compile(r"0[xX][0-9a-fA-F]+|\d+")

_MASK_ON = qRgba(255, 255, 255, 255)


def parse_c_array(source: str) -> list[int]:
    """Return the integers between the first '{' and the last '}'."""
    start = source.find("{")
    end = source.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise ParseError("aucun tableau { ... } trouvé")
    body = source[start + 1:end]
    values = []
    for tok in _TOKEN_RE.findall(body):
        if tok[:2] in ("0x", "0X"):
            values.append(int(tok, 16))
        else:
            values.append(int(tok))
    if not values:
        raise ParseError("le tableau ne contient aucune valeur numérique")
    return values


def required_length(width: int, height: int, bpp: int) -> int:
    """Minimum (1 bpp) or exact (16 bpp) number of values for a bitmap."""
    if bpp == 1:
        bytes_per_row = (width + 7) // 8
        return bytes_per_row * (height - 1) + (width - 1) // 8 + 1
    return width * height


def _decode_mono(values, width, height) -> QImage:
    bytes_per_row = (width + 7) // 8
    image = QImage(width, height, QImage.Format_ARGB32)
    image.fill(0)
    for y in range(height):
        row = y * bytes_per_row
        for x in range(width):
            if (values[row + x // 8] >> (7 - x % 8)) & 1:
                image.setPixel(x, y, _MASK_ON)
    return image


def _decode_rgb565(values, width, height) -> QImage:
    image = QImage(width, height, QImage.Format_ARGB32)
    for i, val in enumerate(values):
        r = (val >> 11) & 0x1F
        g = (val >> 5) & 0x3F
        b = val & 0x1F
        image.setPixel(
            i % width,
            i // width,
            qRgba(round(r * 255 / 31), round(g * 255 / 63),
                  round(b * 255 / 31), 255),
        )
    return image


def decode(source: str, width: int, height: int, bpp: int) -> QImage:
    """Decode a C array into a QImage of ``width`` x ``height``.

    Raises UnsupportedFormat, ParseError or LengthMismatch.
    """
    if bpp not in SUPPORTED_BPP:
        raise UnsupportedFormat(
            f"seuls les bitmaps 1 bpp ou 16 bpp sont gérés (reçu {bpp})"
        )
    if width <= 0 or height <= 0:
        raise UnsupportedFormat(f"taille de bitmap invalide : {width}x{height}")

    values = parse_c_array(source)
    expected = required_length(width, height, bpp)
    if bpp == 1:
        if len(values) < expected:
            raise LengthMismatch(
                f"bitmap 1 bpp : au moins {expected} octets attendus, "
                f"{len(values)} trouvés",
                expected,
                len(values),
            )
        return _decode_mono(values, width, height)

    if len(values) != expected:
        raise LengthMismatch(
            f"bitmap 16 bpp : {expected} pixels attendus, "
            f"{len(values)} trouvés",
            expected,
            len(values),
        )
    return _decode_rgb565(values, width, height)


class BitmapCodec:
    """Decoder plus a cache keyed by the exact C array text."""

    def __init__(self):
        self._cache: dict[str, QImage] = {}
        self.decode_count = 0

    def __len__(self):
        return len(self._cache)

    def has(self, source: str) -> bool:
        return source in self._cache

    def get(self, source: str):
        return self._cache.get(source)

    def decode(self, source: str, width: int, height: int, bpp: int) -> QImage:
        """Decode and store the result, replacing any previous entry."""
        image = decode(source, width, height, bpp)
        self.decode_count += 1
        self._cache[source] = image
        logger.debug(
            "Decoded %dx%d %d bpp bitmap (%d cached)",
            width, height, bpp, len(self._cache),
        )
        return image

    def ensure(self, element: Bitmap) -> QImage:
        """Return the cached image of ``element``, decoding it if needed."""
        if self.has(element.source):
            return self._cache[element.source]
        return self.decode(element.source, element.w, element.h, element.bpp)

    def clear(self):
        self._cache.clear()
