"""Loguru setup and the bridge from stdlib logging.

Django calls `configure_logging` (LOGGING_CONFIG) with the LOGGING dict
during setup, so Django and DRF records end up in the loguru sinks.
"""

import logging
import logging.config
import sys
from typing import Any

from loguru import logger

from hotelapi.env import env

LOG_FORMAT = " | ".join(
    (
        "<g>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
        "<lk>{extra}</>",
    )
)


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(logging_settings: dict[str, Any] | None) -> None:
    logger.remove()
    if env.LOG_JSON:
        logger.add(sys.stderr, level=env.LOG_LEVEL, serialize=True)
    else:
        logger.add(sys.stderr, level=env.LOG_LEVEL, format=LOG_FORMAT)

    if logging_settings:
        logging.config.dictConfig(logging_settings)
