"""
GPU check.

No GPU load is generated. The GPU temperatures are polled for the configured
duration and the maximum is compared with the GPU threshold. Machines without
exposed GPU sensors (integrated graphics, for example) report Unavailable.
"""

import logging
import time
from typing import Optional

from ..classification import is_gpu_sensor
from ..models.config import AppConfig
from ..models.results import StressComponent, StressResult
from ..models.sensors import SensorKind
from ..source import SensorSourceClient
from .sampling import sample_max, temperature_status

logger = logging.getLogger(__name__)


def run_gpu_check(config: AppConfig, client: SensorSourceClient) -> StressResult:
    """
    Poll GPU temperatures over the GPU duration.

    Returns:
        StressResult with the maximum GPU temperature as metric.
    """
    stress = config.stress
    deadline = time.monotonic() + stress.gpu_duration
    max_temperature: Optional[float] = None
    polls = 0

    while True:
        sample = sample_max(client, config.thresholds, SensorKind.TEMPERATURE, is_gpu_sensor)
        polls += 1
        if sample is not None:
            max_temperature = sample if max_temperature is None else max(max_temperature, sample)
        if time.monotonic() + stress.poll_interval >= deadline:
            break
        time.sleep(stress.poll_interval)

    if max_temperature is None:
        logger.warning(
            f"No GPU temperature sensors found in {polls} poll(s); "
            "integrated graphics or sensors not exposed"
        )
    else:
        logger.info(f"GPU max temperature over {polls} poll(s): {max_temperature:.2f} °C")

    return StressResult(
        StressComponent.GPU,
        max_temperature,
        temperature_status(max_temperature, config.thresholds.gpu_temperature),
    )
