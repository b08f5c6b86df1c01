"""
Logging configuration for the student marks package.
Centralizes all logging setup so every layer logs the same way.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from student_marks.config.settings import LogConfig

LOG_FILE_NAME = "students.log"
ROOT_LOGGER_NAME = "students"

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(root, "_students_configured", False):
        return root

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    root.setLevel(getattr(logging, LogConfig.LOG_LEVEL, logging.DEBUG))
    root.addFilter(DuplicateFilter())

    if LogConfig.LOG_FILE_ENABLED:
        try:
            os.makedirs(LogConfig.LOG_DIR, exist_ok=True)
            # delay=True avoids opening the file until the first record
            file_handler = RotatingFileHandler(
                os.path.join(LogConfig.LOG_DIR, LOG_FILE_NAME),
                maxBytes=LogConfig.MAX_LOG_SIZE,
                backupCount=LogConfig.BACKUP_COUNT,
                delay=True
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            root.addHandler(file_handler)
        except OSError as e:
            logging.getLogger(__name__).warning("Could not set up file logging: %s", e)

    root._students_configured = True
    return root

def get_logger(module_name=None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        module_name: Optional name of the module for more specific logging

    Returns:
        Logger under the ``students`` hierarchy
    """
    root = _configure_root_logger()
    if not module_name:
        return root
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")

    # Logger filters only see records logged on that logger itself
    if not any(isinstance(f, DuplicateFilter) for f in logger.filters):
        logger.addFilter(DuplicateFilter())
    return logger
