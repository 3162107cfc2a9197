"""
Logging Configuration
Sets up the loggers shared by the figure library, the scenes and the app.
"""
import logging
import sys
from typing import Iterable, Optional

LOGGER_NAMESPACES = ("lib_figure", "lib_game", "app")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespaces: Iterable[str] = LOGGER_NAMESPACES,
) -> None:
    """
    Configures the loggers of our packages.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        namespaces: Logger names that receive the handlers.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in namespaces:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate lines when called again (e.g. from tests)
        for old in logger.handlers:
            old.close()
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("lib_figure").info("Logging initialized.")
