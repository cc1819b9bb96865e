"""
Log file management for a run.

The console handler is installed by the CLI. This module adds the run's log
file to the root logger for the duration of the run and removes it again
afterwards.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FILE_DATEFMT = "%Y-%m-%dT%H:%M:%S"


class LogManager:
    """
    Attaches a plaintext log file to the root logger.

    Usable as a context manager; the handler is always closed on exit.
    """

    def __init__(self, log_path: Path, level: int = logging.INFO):
        self.log_path = log_path
        self.level = level
        self._handler: Optional[logging.FileHandler] = None

    def open(self) -> None:
        """
        Open the log file and start writing every record to it.

        Raises:
            OSError: If the log file cannot be created (e.g. no write permission)
        """
        if self._handler is not None:
            raise RuntimeError(f"Log file already open: {self.log_path}")

        handler = logging.FileHandler(self.log_path, mode="w", encoding="utf-8")
        handler.setLevel(self.level)
        handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATEFMT))

        root = logging.getLogger()
        root.addHandler(handler)
        if root.level > self.level or root.level == logging.NOTSET:
            root.setLevel(self.level)
        self._handler = handler
        logger.info(f"Logging to {self.log_path}")

    def close(self) -> None:
        """Detach and close the log file handler."""
        if self._handler is None:
            logger.debug("No log file to close")
            return

        logging.getLogger().removeHandler(self._handler)
        try:
            self._handler.close()
        except Exception as e:
            logger.warning(f"Failed to close log file {self.log_path}: {e}")
        finally:
            self._handler = None

    def __enter__(self) -> "LogManager":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
