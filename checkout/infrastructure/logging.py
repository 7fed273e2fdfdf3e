"""
Logging infrastructure.

Provides logging setup for the application entrypoints.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
HANDLER_NAME = "checkout"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once.

    Args:
        level: Level name (e.g. "INFO", "DEBUG")
    """
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
