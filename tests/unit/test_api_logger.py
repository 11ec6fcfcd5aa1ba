import logging

import settings
from checkoutsessions import api_logger


def test_get():
    logger = api_logger.get()

    assert isinstance(logger, logging.Logger)
    assert logger.name == settings.APPLICATION_NAME
    assert logger is api_logger.api_logger.get()


def test_no_file_handler_in_tests():
    logger = api_logger.get()

    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
