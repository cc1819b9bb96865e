"""
Alert evaluation.

Readings are checked against their own threshold and, for voltages, against
the acceptable voltage range. The two checks are independent, so one voltage
reading can raise two alerts. Stress-test errors are appended last.
"""

import logging
from typing import Iterable, List

from ..models.config import ThresholdConfig
from ..models.sensors import SensorKind, SensorReading

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Two-decimal fixed point without trailing zeros, e.g. 85.00 -> "85"."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def threshold_alert(reading: SensorReading) -> str:
    return (
        f"{reading.name}: {format_number(reading.value)} {reading.unit} exceeds threshold "
        f"{format_number(reading.max)} {reading.unit}"
    )


def voltage_range_alert(reading: SensorReading, thresholds: ThresholdConfig) -> str:
    return (
        f"{reading.name}: {format_number(reading.value)} V outside valid range "
        f"{format_number(thresholds.voltage_min)}-{format_number(thresholds.voltage_max)} V"
    )


def evaluate_alerts(
    readings: Iterable[SensorReading],
    stress_errors: Iterable[str],
    thresholds: ThresholdConfig,
) -> List[str]:
    """Build the ordered alert list of a run.

    Args:
        readings: Flattened readings, in iteration order.
        stress_errors: Stress-test error messages, in run order.
        thresholds: Provides the acceptable voltage range.

    Returns:
        Reading alerts in reading order followed by the stress errors verbatim.
    """
    alerts: List[str] = []
    for reading in readings:
        if reading.max is not None and reading.value > reading.max:
            alerts.append(threshold_alert(reading))
        if reading.kind is SensorKind.VOLTAGE and not (
            thresholds.voltage_min <= reading.value <= thresholds.voltage_max
        ):
            alerts.append(voltage_range_alert(reading, thresholds))

    reading_alerts = len(alerts)
    alerts.extend(stress_errors)
    if alerts:
        logger.warning(
            f"{len(alerts)} alert(s): {reading_alerts} from sensor readings, "
            f"{len(alerts) - reading_alerts} from stress tests"
        )
    return alerts
