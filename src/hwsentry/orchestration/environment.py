"""
Environment checks performed before a run.
"""

import logging
import platform
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_output_directory(directory: Path) -> Path:
    """
    Create the output directory if needed and verify it is writable.

    Raises:
        OSError: If the directory cannot be created or written to
    """
    directory.mkdir(parents=True, exist_ok=True)
    with tempfile.TemporaryFile(dir=directory):
        pass
    return directory


def check_platform() -> bool:
    """Warn when not running on Windows; return True on Windows."""
    system = platform.system()
    if system != "Windows":
        logger.warning(
            f"Running on {system}: LibreHardwareMonitor is Windows-only, "
            "make sure a compatible sensor server is reachable"
        )
        return False
    return True
