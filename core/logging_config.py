# core/logging_config.py

"""
Root logger setup for the roster demo.

`setup_logging` attaches a console handler and, optionally, a UTF-8 file handler. It only
configures the root logger once; later calls are ignored.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """
    Configures the root logger.

    Args:
        level (str): Logging level name (e.g. "DEBUG", "INFO"), case insensitive. Unknown names fall back to INFO.
        logfile (str | None): Optional path to a log file, resolved relative to the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
