# tftsketch/__main__.py
import sys
from PyQt5.QtWidgets import QApplication
from tftsketch.bug_report import install_excepthook
from tftsketch.logger import setup_logging
from tftsketch.settings import load_settings
from tftsketch.ui.main_window import MainWindow


def main():
    # Ensure uncaught exceptions are logged and reported
    install_excepthook()
    app = QApplication(sys.argv)
    setup_logging(load_settings().log_level)

    win = MainWindow()
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
