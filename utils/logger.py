"""
utils/logger.py
---------------
Logging setup shared by the whole service.
Modules obtain their logger with `get_logger(__name__)`.
"""
import logging
import sys

import config

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
     """Configure the root logger once, unless something else already did."""
     global _initialized
     if _initialized:
          return
     _initialized = True
     root = logging.getLogger()
     # Alembic's fileConfig or uvicorn already installed handlers
     if root.handlers:
          return
     handler = logging.StreamHandler(sys.stdout)
     handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
     root.setLevel(config.LOG_LEVEL)
     root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
     """
     Get a named logger instance.

     Args:
          name: Usually ``__name__`` of the calling module.

     Returns:
          A configured logging.Logger.
     """
     _init_logging()
     return logging.getLogger(name)
