"""
Disk stress routine.

A temporary file receives a fixed-size buffer over and over, each write forced
to the device with ``fsync``, until the deadline. The file never grows past
the configured maximum: writing wraps back to the start instead. The file is
closed and deleted on every exit path.
"""

import logging
import os
import tempfile
import time
from pathlib import Path

import psutil

from ..classification import is_disk_sensor
from ..models.config import AppConfig
from ..models.results import StressComponent, StressResult
from ..models.sensors import SensorKind
from ..source import SensorSourceClient
from ..validation import InsufficientResource
from .sampling import load_status, sample_max

logger = logging.getLogger(__name__)


def check_free_space(directory: Path, min_free_bytes: int) -> int:
    """
    Return the free space of the volume holding ``directory``.

    Raises:
        InsufficientResource: If the free space does not exceed the minimum.
    """
    free = psutil.disk_usage(str(directory)).free
    if free <= min_free_bytes:
        raise InsufficientResource(
            f"Only {free // (1024 * 1024)} MiB free on {directory}, "
            f"more than {min_free_bytes // (1024 * 1024)} MiB required"
        )
    return free


def write_until(fd: int, buffer: bytes, deadline: float, max_file_bytes: int) -> int:
    """Write ``buffer`` to ``fd`` until ``deadline``; return the bytes written."""
    offset = 0
    total = 0
    while time.monotonic() < deadline:
        if offset + len(buffer) > max_file_bytes:
            os.lseek(fd, 0, os.SEEK_SET)
            offset = 0
        written = os.write(fd, buffer)
        os.fsync(fd)
        offset += written
        total += written
    return total


def run_disk_stress(config: AppConfig, client: SensorSourceClient) -> StressResult:
    """
    Write to a temporary file until the deadline, then sample the disk load.

    Returns:
        StressResult with the maximum disk load as metric.

    Raises:
        InsufficientResource: If the target volume lacks free space.
    """
    stress = config.stress
    directory = stress.disk_directory
    check_free_space(directory, stress.disk_min_free_bytes)

    buffer = os.urandom(stress.disk_buffer_bytes)
    fd, path = tempfile.mkstemp(prefix="hwsentry_disk_", suffix=".tmp", dir=directory)
    logger.info(f"Writing to {path} for {stress.disk_duration:g}s")
    start = time.monotonic()
    try:
        total = write_until(
            fd, buffer, start + stress.disk_duration, stress.disk_max_file_bytes
        )
    finally:
        try:
            os.close(fd)
        finally:
            os.unlink(path)
            logger.debug(f"Removed {path}")

    elapsed = max(time.monotonic() - start, 1e-9)
    logger.info(
        f"Wrote {total // (1024 * 1024)} MiB "
        f"({total / (1024 * 1024) / elapsed:.1f} MiB/s)"
    )

    max_load = sample_max(client, config.thresholds, SensorKind.LOAD, is_disk_sensor)
    if max_load is None:
        logger.warning("No disk load sensors found after disk load")
    return StressResult(
        StressComponent.DISK, max_load, load_status(max_load, config.thresholds.disk_load)
    )
