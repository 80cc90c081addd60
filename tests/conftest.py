"""Shared fixtures: a headless QApplication for fonts, painters and widgets."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtCore import QSettings
from PyQt5.QtWidgets import QApplication

from tftsketch.core import Document


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def fixed_width(element) -> float:
    """Deterministic text measurement: 6 px per character."""
    return 6.0 * len(element.text)


@pytest.fixture()
def doc() -> Document:
    return Document(320, 240, measure=fixed_width)


@pytest.fixture()
def ini_settings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "tftsketch.ini"), QSettings.IniFormat)
