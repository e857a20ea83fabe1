"""
Logging Configuration
Sets up the `helixview` package logger for the desktop app and the tests.
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "helixview"
LEVEL_ENV_VAR = "HELIXVIEW_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None] = None) -> int:
    """
    Turn a level name or number into a logging level.

    None falls back to the HELIXVIEW_LOG_LEVEL environment variable, then INFO.
    Unknown names raise ValueError.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, logging.INFO)
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'helixview' package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug"). None reads
            HELIXVIEW_LOG_LEVEL.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Avoid duplicate logs when the window is re-created
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
