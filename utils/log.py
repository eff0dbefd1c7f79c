import logging
import os
from logging.handlers import RotatingFileHandler

from config import LOG_FILE, LOG_LEVEL

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Logger:
    """
    Thin wrapper around a named stdlib logger writing to the console and a
    rotating log file.

    Args:
        name: Logger name, usually the module's role (e.g. "cart_service").
        log_file: Path of the log file; its directory is created if needed.
        level: Logging level for the logger and its handlers.
    """

    def __init__(self, name: str, log_file: str = "Logs/app.log", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Handlers are attached once per name; modules may be imported repeatedly.
        if not self.logger.handlers:
            # Own handlers only; the root logger (e.g. uvicorn's) would print twice.
            self.logger.propagate = False
            formatter = logging.Formatter(FORMAT)

            console = logging.StreamHandler()
            console.setFormatter(formatter)
            self.logger.addHandler(console)

            if log_file:
                directory = os.path.dirname(log_file)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                file_handler = RotatingFileHandler(
                    log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
                )
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

    def debug(self, msg, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)

    def exception(self, msg, *args, **kwargs):
        self.logger.exception(msg, *args, **kwargs)


def get_logger(name: str) -> Logger:
    return Logger(name=name, log_file=LOG_FILE, level=getattr(logging, LOG_LEVEL, logging.INFO))
