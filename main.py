#!/usr/bin/env python3
import sys
from PyQt5.QtWidgets import QApplication, QSplashScreen
from PyQt5.QtGui import QPixmap, QPainter, QColor, QFont
from PyQt5.QtCore import Qt
from tftsketch.bug_report import install_excepthook
from tftsketch.logger import setup_logging
from tftsketch.settings import app_settings, load_settings
from tftsketch.ui.main_window import MainWindow


def main():
    install_excepthook()
    app = QApplication(sys.argv)
    setup_logging(load_settings().log_level)
    show_splash = app_settings().value("show_splash", True, type=bool)
    splash = None
    if show_splash:
        pix = QPixmap(400, 300)
        pix.fill(Qt.black)
        painter = QPainter(pix)
        painter.setPen(QColor("#00ff66"))
        f = QFont("monospace")
        f.setPointSize(28)
        painter.setFont(f)
        painter.drawText(pix.rect(), Qt.AlignCenter, "tftsketch")
        painter.end()
        splash = QSplashScreen(pix)
        splash.show()
        app.processEvents()

    window = MainWindow()
    if splash:
        splash.finish(window)
    window.show()
    sys.exit(app.exec_())

if __name__ == "__main__":
    main()
