import logging
import os

from pythonjsonlogger import jsonlogger

import settings

LOGGING_MESSAGE_FORMAT = "%(asctime)s %(name)-12s %(levelname)s %(message)s"


def _get_level() -> int:
    if settings.is_production():
        return logging.INFO
    return logging.DEBUG


def _get_file_handler(level: int) -> logging.FileHandler:
    os.makedirs(os.path.dirname(settings.LOG_FILE_PATH), exist_ok=True)
    file_handler = logging.FileHandler(settings.LOG_FILE_PATH)
    file_handler.setLevel(level)
    return file_handler


def _get_console_handler(level: int) -> logging.StreamHandler:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    return console_handler


def _apply_json_formatter(handler: logging.Handler):
    handler.setFormatter(jsonlogger.JsonFormatter(LOGGING_MESSAGE_FORMAT))


class APILogger:
    def __init__(self, _logger=None):
        self.logger: logging.Logger = _logger

    @classmethod
    def start_logger(cls):
        level = _get_level()
        _logger = logging.getLogger(settings.APPLICATION_NAME)
        _logger.setLevel(level)

        handlers = [_get_console_handler(level)]
        # No log files are written while running the test suite
        if not settings.is_test():
            handlers.append(_get_file_handler(level))
        for handler in handlers:
            _apply_json_formatter(handler)
            _logger.addHandler(handler)
        return cls(_logger=_logger)

    def get(self):
        return self.logger


# Singleton logger, used across the application
api_logger: APILogger = APILogger.start_logger()


def get() -> logging.Logger:
    return api_logger.get()
