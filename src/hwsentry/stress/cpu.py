"""
CPU stress routine.

One worker process per logical CPU spins on floating-point arithmetic until
its deadline. Workers are joined with a margin beyond the deadline and any
worker still alive after that is terminated, so no worker outlives the
routine.
"""

import logging
import math
import multiprocessing
import random
import time
from typing import List

import psutil

from ..classification import is_cpu_sensor
from ..models.config import AppConfig
from ..models.results import StressComponent, StressResult
from ..models.sensors import SensorKind
from ..source import SensorSourceClient
from .sampling import sample_max, temperature_status

logger = logging.getLogger(__name__)

# Seconds granted to a terminated worker before it is killed outright.
_TERMINATE_GRACE = 1.0


def spin_worker(duration: float, seed: int) -> None:
    """Burn one CPU on square roots of pseudo-random operands for ``duration`` seconds."""
    rng = random.Random(seed)
    deadline = time.monotonic() + duration
    while time.monotonic() < deadline:
        for _ in range(10_000):
            math.sqrt(rng.random() * 1_000_000.0)


def _reap_workers(workers: List[multiprocessing.Process]) -> int:
    """Terminate workers that are still alive; return how many had to be stopped."""
    stopped = 0
    for worker in workers:
        if not worker.is_alive():
            continue
        stopped += 1
        logger.warning(f"CPU worker {worker.name} missed its deadline, terminating")
        worker.terminate()
        worker.join(_TERMINATE_GRACE)
        if worker.is_alive():
            logger.warning(f"CPU worker {worker.name} ignored terminate, killing")
            worker.kill()
            worker.join()
    return stopped


def run_cpu_stress(config: AppConfig, client: SensorSourceClient) -> StressResult:
    """
    Load every logical CPU, then sample the CPU temperatures.

    Returns:
        StressResult with the maximum CPU temperature as metric.
    """
    duration = config.stress.cpu_duration
    worker_count = psutil.cpu_count(logical=True) or 1
    # The background tree fetch thread is alive here, so workers must not be forked.
    context = multiprocessing.get_context("spawn")
    workers: List[multiprocessing.Process] = []

    logger.info(f"Starting {worker_count} CPU workers for {duration:g}s")
    try:
        for index in range(worker_count):
            worker = context.Process(
                target=spin_worker,
                args=(duration, index),
                name=f"hwsentry-cpu-{index}",
                daemon=True,
            )
            worker.start()
            workers.append(worker)

        join_deadline = time.monotonic() + duration + config.stress.cpu_join_margin
        for worker in workers:
            worker.join(max(0.0, join_deadline - time.monotonic()))
    finally:
        stopped = _reap_workers(workers)
        if stopped:
            logger.warning(f"{stopped} CPU worker(s) had to be terminated")

    max_temperature = sample_max(
        client, config.thresholds, SensorKind.TEMPERATURE, is_cpu_sensor
    )
    status = temperature_status(max_temperature, config.thresholds.cpu_temperature)
    if max_temperature is None:
        logger.warning("No CPU temperature sensors found after CPU load")
    return StressResult(StressComponent.CPU, max_temperature, status)
