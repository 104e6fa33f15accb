"""
Logging configuration for the donation API.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is configured, a file handler.  Outside production
the console output uses Uvicorn's colourised formatter (level names
coloured when attached to a terminal) so local runs read like the
server's own access log; production and file output use a plain,
single‑line format suitable for log collectors.

Handlers installed here are tagged by name, so calling
``setup_logging`` again (for example from every ``create_app`` call in
the test suite) neither duplicates the console handler nor the file
handler for a path that is already being written.
"""

import logging
from pathlib import Path
from typing import Optional

from uvicorn.logging import DefaultFormatter

CONSOLE_HANDLER_NAME = "donation_tracker.console"
FILE_HANDLER_PREFIX = "donation_tracker.file:"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PRETTY_FORMAT = "%(levelprefix)s %(asctime)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_console_formatter(environment: str) -> logging.Formatter:
    """Return the console formatter for the given environment."""
    if environment.lower() == "production":
        return logging.Formatter(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT)
    return DefaultFormatter(fmt=PRETTY_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    environment: str = "development",
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    environment : str
        Deployment environment; ``production`` selects the plain
        console format.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    installed = {handler.get_name() for handler in logger.handlers}

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(build_console_formatter(environment))
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler_name = f"{FILE_HANDLER_PREFIX}{log_path}"
        if file_handler_name not in installed:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            file_handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
