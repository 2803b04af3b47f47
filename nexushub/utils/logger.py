"""
Logging setup.

Every module does `logger = get_logger(__name__)`.
Handlers are attached once to the package root logger.
"""

import logging
import sys

from nexushub.config.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_NAME = "nexushub"


def configure_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    """Attach a stdout handler to the package root logger (idempotent)."""
    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level.upper())

    # Avoid duplicate handlers on reload
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root."""
    if name != _ROOT_NAME and not name.startswith(f"{_ROOT_NAME}."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)


logger = configure_logging()
