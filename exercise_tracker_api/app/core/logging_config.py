"""
Basic logging configuration for the application.

``setup_logging`` applies the level from ``Settings`` to the root
logger and attaches the application's console handler, plus a file
handler when ``LOG_FILE`` is set.  Handlers are named so repeated
``create_app`` calls (tests build one app per test) never attach a
second copy.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "exercise_tracker.console"
FILE_HANDLER_NAME = "exercise_tracker.file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger from ``app_settings``.

    Unknown level names fall back to ``INFO``.  A relative
    ``log_file`` is resolved against the working directory and its
    parent directories are created.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(app_settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
