"""Adapter from the Logger protocol onto the standard logging module."""

import logging
import sys
from typing import Any, Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

class StdLogger:
    """
    Logger protocol implementation backed by ``logging``.

    Key-value context is appended to the message as ``key=value`` pairs.
    """

    def __init__(self, name: str = "wordsplitter"):
        self.logger = logging.getLogger(name)

    @staticmethod
    def _format(msg: str, kv: dict) -> str:
        if not kv:
            return msg
        context = " ".join(f"{k}={v!r}" for k, v in kv.items())
        return f"{msg} {context}"

    def info(self, msg: str, **kv: Any) -> None:
        self.logger.info(self._format(msg, kv))

    def warn(self, msg: str, **kv: Any) -> None:
        self.logger.warning(self._format(msg, kv))

    def error(self, msg: str, **kv: Any) -> None:
        self.logger.error(self._format(msg, kv))

def setup_logging(level: Optional[str] = None, name: str = "wordsplitter") -> logging.Logger:
    """
    Configure console logging for the CLI.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Defaults to WARNING.
        name: Logger name to configure

    Returns:
        logging.Logger: The configured logger
    """
    log_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
