# tftsketch/settings.py
"""Préférences de l'application, stockées avec QSettings."""

import logging
from dataclasses import dataclass, asdict

from PyQt5.QtCore import QSettings

from .elements import DEFAULT_FONT
from .utils import is_hex_color

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EditorSettings:
    canvas_width: int = 320
    canvas_height: int = 240
    background: str = "#FFFFFF"
    pen_color: str = "#000000"
    text_font: str = DEFAULT_FONT
    log_level: str = "DEBUG"


def app_settings() -> QSettings:
    return QSettings("tftsketch", "tftsketch")


def load_settings(settings: QSettings | None = None) -> EditorSettings:
    """Read the preferences, falling back to defaults for bad values."""
    if settings is None:
        settings = app_settings()
    defaults = EditorSettings()
    result = EditorSettings(
        canvas_width=settings.value(
            "canvas_width", defaults.canvas_width, type=int),
        canvas_height=settings.value(
            "canvas_height", defaults.canvas_height, type=int),
        background=settings.value(
            "background", defaults.background, type=str),
        pen_color=settings.value("pen_color", defaults.pen_color, type=str),
        text_font=settings.value("text_font", defaults.text_font, type=str),
        log_level=settings.value(
            "log_level", defaults.log_level, type=str).upper(),
    )
    if result.canvas_width <= 0 or result.canvas_height <= 0:
        logger.warning(
            "Invalid canvas size %sx%s in settings, using default",
            result.canvas_width, result.canvas_height,
        )
        result.canvas_width = defaults.canvas_width
        result.canvas_height = defaults.canvas_height
    if not is_hex_color(result.background):
        result.background = defaults.background
    if not is_hex_color(result.pen_color):
        result.pen_color = defaults.pen_color
    if not result.text_font:
        result.text_font = defaults.text_font
    if result.log_level not in LOG_LEVELS:
        result.log_level = defaults.log_level
    return result


def save_settings(values: EditorSettings, settings: QSettings | None = None):
    if settings is None:
        settings = app_settings()
    for key, value in asdict(values).items():
        settings.setValue(key, value)
    settings.sync()
