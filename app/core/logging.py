# app/core/logging.py
import logging

from pythonjsonlogger.json import JsonFormatter

from app.core.config import get_settings


def get_logger(name: str) -> logging.Logger:
    # one JSON handler per logger name
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(levelname)s %(name)s %(message)s %(asctime)s"))
    logger.addHandler(handler)
    logger.setLevel(get_settings().LOG_LEVEL.upper())
    logger.propagate = False
    return logger
