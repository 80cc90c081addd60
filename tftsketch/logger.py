import logging
from PyQt5.QtCore import QObject, pyqtSignal

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class LogEmitter(QObject):
    log_record = pyqtSignal(str)

log_emitter = LogEmitter()


class QtHandler(logging.Handler):
    """Forward formatted records to the logs dock."""

    def emit(self, record):
        msg = self.format(record)
        log_emitter.log_record.emit(msg)


def setup_logging(level="DEBUG"):
    logger = logging.getLogger()
    if any(isinstance(h, QtHandler) for h in logger.handlers):
        return
    logger.setLevel(logging.getLevelName(str(level).upper()))
    fmt = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    qt_handler = QtHandler()
    qt_handler.setFormatter(fmt)
    logger.addHandler(qt_handler)
