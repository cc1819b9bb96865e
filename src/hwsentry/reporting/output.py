"""
Writing reports to disk and opening them in the default viewer.
"""

import logging
import webbrowser
from pathlib import Path

logger = logging.getLogger(__name__)


def write_report(html: str, path: Path) -> Path:
    """
    Write an HTML document as UTF-8.

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.info(f"Report written to: {path}")
    return path


def open_in_viewer(path: Path) -> bool:
    """Open a report in the system's default viewer; False when none is available."""
    try:
        opened = webbrowser.open(path.resolve().as_uri())
    except webbrowser.Error as e:
        logger.warning(f"Could not open {path} in a viewer: {e}")
        return False
    if not opened:
        logger.warning(f"No viewer available to open {path}")
    return opened
