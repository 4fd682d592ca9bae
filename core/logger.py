# -*- coding: utf-8 -*-
# core/logger.py
import sys
import logging
import traceback

from core.config import LOG_FILE, LOG_FORMAT


def get_logger(name):
    return logging.getLogger(name)


def _excepthook(exc_type, exc_value, exc_tb):
    logging.error("Unhandled exception:", exc_info=(exc_type, exc_value, exc_tb))
    traceback.print_exception(exc_type, exc_value, exc_tb)


def setup_logging(filename=LOG_FILE, level=logging.DEBUG, install_excepthook=True):
    """
    Configure the root logger once for the whole process.
    Passing filename=None logs to stderr instead of a file.
    """
    if filename:
        logging.basicConfig(filename=filename, level=level, format=LOG_FORMAT, filemode='w')
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    if install_excepthook:
        sys.excepthook = _excepthook
