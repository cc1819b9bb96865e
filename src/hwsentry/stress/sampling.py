"""
Sensor sampling shared by the stress routines.

Each routine fetches a fresh sensor tree, flattens it and keeps the maximum of
the readings that belong to its component.
"""

import logging
from typing import Callable, Optional

from ..classification import flatten_sensor_tree
from ..models.config import ThresholdConfig
from ..models.results import StressStatus
from ..models.sensors import SensorKind
from ..source import SensorSourceClient

logger = logging.getLogger(__name__)


def sample_max(
    client: SensorSourceClient,
    thresholds: ThresholdConfig,
    kind: SensorKind,
    selector: Callable[[str], bool],
) -> Optional[float]:
    """Fetch the sensor tree and return the highest matching reading.

    Args:
        client: Source client used for a full fetch.
        thresholds: Thresholds passed through to the flattener.
        kind: Only readings of this kind are considered.
        selector: Predicate on the reading name selecting the component.

    Returns:
        The maximum value, or None when no reading matches.

    Raises:
        SourceUnavailable: If the fetch fails.
    """
    readings = flatten_sensor_tree(client.fetch(), thresholds)
    values = [r.value for r in readings if r.kind is kind and selector(r.name)]
    if not values:
        logger.debug(f"No {kind.value} readings matched while sampling")
        return None
    return max(values)


def temperature_status(max_temperature: Optional[float], threshold: float) -> StressStatus:
    if max_temperature is None:
        return StressStatus.UNAVAILABLE
    if max_temperature > threshold:
        return StressStatus.CRITICAL
    return StressStatus.OK


def load_status(max_load: Optional[float], threshold: float) -> StressStatus:
    if max_load is None:
        return StressStatus.UNAVAILABLE
    if max_load > threshold:
        return StressStatus.HIGH_USAGE
    return StressStatus.OK
