"""Logging configuration for the Phonebook API.

``setup_logging`` attaches a console handler to the root logger.  Modules
obtain their own loggers with ``logging.getLogger(__name__)``.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Args:
        level (str): Logging level name (e.g. ``"DEBUG"``), case insensitive.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured (repeated imports, test runners).
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
