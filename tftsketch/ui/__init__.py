"""Expose core UI widgets for convenient imports."""

from .main_window import MainWindow
from .bitmap_dialog import BitmapDialog
from .canvas_size_dialog import CanvasSizeDialog
from .timeline_dock import TimelineWidget
from .code_dock import CodeWidget
from .logs_dock import LogsWidget
from .debug_dialog import DebugDialog

__all__ = [
    "MainWindow",
    "BitmapDialog",
    "CanvasSizeDialog",
    "TimelineWidget",
    "CodeWidget",
    "LogsWidget",
    "DebugDialog",
]
