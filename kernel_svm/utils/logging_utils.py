# File: kernel_svm/utils/logging_utils.py

"""
Logging helpers.

Library modules only ever call ``get_logger``; ``setup_logger`` is for
applications and tests that want console/file output.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the named logger without touching its handlers."""
    return logging.getLogger(name)


def setup_logger(name: str, log_dir: Optional[str] = None,
                 level: int = logging.INFO) -> logging.Logger:
    """
    Configure a named logger with a console handler and, when ``log_dir``
    is given, a file handler writing ``<log_dir>/<name>.log``.

    Calling it twice for the same name does not add duplicate handlers.
    """

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, f"{name}.log"),
                                           encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
