"""
Configuration file loading utilities.

Reads the optional TOML configuration file with the standard library's
``tomllib``. Validation of the values happens in ``validators``.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = frozenset({"source", "stress", "thresholds", "output"})


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Read and parse a TOML file.

    Unknown top-level tables are reported and left in the returned data; the
    caller only looks up the sections it knows.

    Args:
        file_path: Path to the TOML file
        description: Human-readable description for messages

    Returns:
        Parsed TOML data

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"{description} not found: {file_path}")

    logger.info(f"Reading {description}: {file_path}")
    with file_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Malformed {description} {file_path}: {e}")
            raise

    unknown = sorted(set(data) - KNOWN_SECTIONS)
    if unknown:
        logger.warning(f"Ignoring unknown sections in {file_path}: {', '.join(unknown)}")
    return data
