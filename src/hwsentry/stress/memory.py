"""
RAM stress routine.

A bounded amount of memory is allocated in fixed-size chunks and one chunk is
rewritten with pseudo-random bytes until the deadline. All chunks are released
and a garbage collection is requested on every exit path.
"""

import gc
import logging
import random
import time
from typing import List, Optional

import psutil

from ..classification import is_memory_sensor
from ..models.config import AppConfig
from ..models.results import StressComponent, StressResult
from ..models.sensors import SensorKind
from ..source import SensorSourceClient
from ..validation import InsufficientResource
from .sampling import load_status, sample_max

logger = logging.getLogger(__name__)


def compute_memory_target(total_bytes: int, fraction: float, cap_bytes: int) -> int:
    """Return min(total * fraction, cap) in bytes.

    Examples:
        >>> compute_memory_target(8 * 1024**3, 0.3, 64 * 1024**2) == 64 * 1024**2
        True
    """
    return min(int(total_bytes * fraction), cap_bytes)


def check_memory_target(target_bytes: int, available_bytes: int, min_bytes: int) -> None:
    """
    Raises:
        InsufficientResource: If the target is below the minimum viable size
            or larger than the available memory.
    """
    if target_bytes < min_bytes:
        raise InsufficientResource(
            f"Memory target {target_bytes // (1024 * 1024)} MiB is below the "
            f"minimum of {min_bytes // (1024 * 1024)} MiB"
        )
    if available_bytes < target_bytes:
        raise InsufficientResource(
            f"Only {available_bytes // (1024 * 1024)} MiB free, "
            f"{target_bytes // (1024 * 1024)} MiB required"
        )


def run_memory_stress(config: AppConfig, client: SensorSourceClient) -> StressResult:
    """
    Allocate and churn memory, then sample the memory load.

    Returns:
        StressResult with the maximum memory load as metric.

    Raises:
        InsufficientResource: If not enough memory is free for the target.
    """
    stress = config.stress
    memory = psutil.virtual_memory()
    target = compute_memory_target(memory.total, stress.memory_fraction, stress.memory_cap_bytes)
    check_memory_target(target, memory.available, stress.memory_min_bytes)

    chunk_size = min(stress.memory_chunk_bytes, target)
    chunk_count = max(1, target // chunk_size)
    chunks: List[bytearray] = []
    active: Optional[bytearray] = None

    logger.info(
        f"Allocating {chunk_count} x {chunk_size // (1024 * 1024)} MiB "
        f"for {stress.ram_duration:g}s"
    )
    try:
        for _ in range(chunk_count):
            chunks.append(bytearray(b"\xa5") * chunk_size)
            time.sleep(stress.memory_alloc_pause)

        # Only the first chunk is rewritten; the rest stay resident.
        active = chunks[0]
        deadline = time.monotonic() + stress.ram_duration
        while time.monotonic() < deadline:
            active[:] = random.randbytes(chunk_size)
            time.sleep(stress.memory_write_pause)
    finally:
        active = None
        chunks.clear()
        gc.collect()
        logger.debug("Released RAM stress allocation")

    max_load = sample_max(client, config.thresholds, SensorKind.LOAD, is_memory_sensor)
    if max_load is None:
        logger.warning("No memory load sensors found after RAM load")
    return StressResult(
        StressComponent.RAM, max_load, load_status(max_load, config.thresholds.ram_load)
    )
