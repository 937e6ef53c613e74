###########EXTERNAL IMPORTS############

import logging
import sys
from typing import Optional

#######################################

#############LOCAL IMPORTS#############

#######################################


class LoggerManager:
    """
    Static manager for the application loggers.

    Installs a single stream handler on the root logger the first time `init()`
    is called. Modules obtain their loggers through `get_logger(__name__)` so
    every logger shares the same format and destination.
    """

    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    _handler: Optional[logging.Handler] = None

    def __init__(self):
        raise TypeError("LoggerManager is a static class and cannot be instantiated")

    @staticmethod
    def init(level: int = logging.INFO) -> None:
        """
        Initializes the root logger with the shared handler and format.

        Calling it more than once only updates the root level.

        Args:
            level (int): Logging level applied to the root logger.
        """

        root = logging.getLogger()
        root.setLevel(level)

        if LoggerManager._handler is None:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LoggerManager.LOG_FORMAT, LoggerManager.DATE_FORMAT))
            root.addHandler(handler)
            LoggerManager._handler = handler

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Returns the logger registered under the given name."""

        return logging.getLogger(name)
