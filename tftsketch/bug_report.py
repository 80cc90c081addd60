import sys
import os
import traceback
from datetime import datetime
from PyQt5.QtWidgets import QApplication, QMessageBox

LOG_DIR = os.path.join(os.path.expanduser("~"), "tftsketch_logs")
LOG_FILE = os.path.join(LOG_DIR, "tftsketch.log")


def write_report(exc_type, exc_value, exc_tb, path=None):
    """Append the traceback to the crash log and return its path."""
    path = path or LOG_FILE
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        traceback.print_exception(exc_type, exc_value, exc_tb, file=f)
    return path


def _excepthook(exc_type, exc_value, exc_tb):
    """Write the traceback to a log file and show a user-friendly dialog."""
    path = write_report(exc_type, exc_value, exc_tb)

    # Attempt to show a message box if a QApplication is running
    app = QApplication.instance()
    if app is not None:
        msg = QMessageBox()
        msg.setIcon(QMessageBox.Critical)
        msg.setWindowTitle("tftsketch - Erreur")
        msg.setText(
            "Une erreur inattendue est survenue. "
            f"Un rapport a été enregistré dans:\n{path}"
        )
        details = "".join(
            traceback.format_exception(exc_type, exc_value, exc_tb)
        )
        msg.setDetailedText(details)
        msg.exec_()

    # Call the default hook to allow default handling (prints to stderr)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Install global exception handler that logs uncaught exceptions."""
    sys.excepthook = _excepthook
