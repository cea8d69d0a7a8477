# student_record/core/logging.py
import logging
import sys
from typing import Optional, TextIO

from student_record.core.config import settings

LOGGER_NAME = "student_record"


# Configure standard Python logging for the package logger
def setup_logging(level: Optional[int] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else settings.get_log_level())

    # Re-running setup only swaps the stream, never stacks handlers
    for handler in list(logger.handlers):
        if getattr(handler, "_student_record", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)  # Print logs to console
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    handler._student_record = True
    logger.addHandler(handler)
    return logger


logger = setup_logging()
