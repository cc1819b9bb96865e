"""
Sensor tree flattening and classification.

This module walks the raw sensor tree reported by the hardware monitor and
turns every numeric leaf into a flat ``SensorReading``: the value is cleaned
and parsed, the kind is derived from the name and value text, the unit from
the kind, and the alert threshold from the sensor name.
"""

import logging
from typing import List, Optional

from ..models.config import ThresholdConfig
from ..models.sensors import RawSensorNode, SensorKind, SensorReading
from ..validation import SensorParseError
from .patterns import (
    CPU_NAME_PATTERN,
    DECIMAL_NUMBER,
    DISK_NAME_PATTERN,
    GPU_NAME_PATTERN,
    KIND_RULES,
    MEMORY_NAME_PATTERN,
    NON_NUMERIC_CHARS,
    UNIT_BY_KIND,
)

logger = logging.getLogger(__name__)


def clean_sensor_value(raw_value: str) -> str:
    """Keep only digits and decimal separators, normalising ',' to '.'.

    Examples:
        >>> clean_sensor_value("45,3 °C")
        '45.3'
        >>> clean_sensor_value("Intel Core i7")
        '7'
    """
    return NON_NUMERIC_CHARS.sub("", raw_value).replace(",", ".")


def parse_sensor_value(name: str, raw_value: str) -> float:
    """Parse a leaf value string into a float.

    Raises:
        SensorParseError: If the cleaned string is not a plain decimal number.
    """
    cleaned = clean_sensor_value(raw_value)
    if not DECIMAL_NUMBER.match(cleaned):
        raise SensorParseError(name, raw_value)
    return float(cleaned)


def classify_kind(name: str, raw_value: str) -> SensorKind:
    """Classify a leaf by its name and original value; first matching rule wins."""
    text = f"{name} {raw_value}"
    for kind, pattern in KIND_RULES:
        if pattern.search(text):
            return kind
    return SensorKind.UNKNOWN


def unit_for_kind(kind: SensorKind) -> str:
    return UNIT_BY_KIND[kind]


def is_cpu_sensor(name: str) -> bool:
    return bool(CPU_NAME_PATTERN.search(name))


def is_gpu_sensor(name: str) -> bool:
    return bool(GPU_NAME_PATTERN.search(name))


def is_disk_sensor(name: str) -> bool:
    return bool(DISK_NAME_PATTERN.search(name))


def is_memory_sensor(name: str) -> bool:
    return bool(MEMORY_NAME_PATTERN.search(name))


def threshold_for(name: str, kind: SensorKind, thresholds: ThresholdConfig) -> Optional[float]:
    """Return the alert threshold that applies to a reading, if any.

    Rules are tested in order and the first match wins.
    """
    if is_cpu_sensor(name) and kind is SensorKind.TEMPERATURE:
        return thresholds.cpu_temperature
    if is_gpu_sensor(name) and kind is SensorKind.TEMPERATURE:
        return thresholds.gpu_temperature
    if is_disk_sensor(name) and kind is SensorKind.LOAD:
        return thresholds.disk_load
    if "volt" in name.lower():
        return thresholds.voltage_max
    if "power" in name.lower() and kind is SensorKind.POWER:
        return thresholds.power
    return None


def classify_leaf(node: RawSensorNode, thresholds: ThresholdConfig) -> SensorReading:
    """Build a reading from a leaf candidate.

    Raises:
        SensorParseError: If the leaf value is not numeric.
    """
    value = parse_sensor_value(node.name, node.value)
    kind = classify_kind(node.name, node.value)
    return SensorReading(
        name=node.name,
        kind=kind,
        value=round(value, 2),
        unit=unit_for_kind(kind),
        max=threshold_for(node.name, kind, thresholds),
        raw_value=node.value,
    )


def flatten_sensor_tree(root: RawSensorNode, thresholds: ThresholdConfig) -> List[SensorReading]:
    """Flatten a sensor tree into classified readings.

    Nodes are visited pre-order, depth-first, children in their original
    order. Branch nodes are only containers. Leaves whose value is not numeric
    are logged and skipped, and readings of unknown kind are dropped.

    Args:
        root: Root node of the decoded sensor tree.
        thresholds: Thresholds used to assign each reading's ``max``.

    Returns:
        The classified readings in traversal order; possibly empty.
    """
    readings: List[SensorReading] = []
    for node in root.iter_nodes():
        if not node.is_leaf_candidate:
            continue
        try:
            readings.append(classify_leaf(node, thresholds))
        except SensorParseError as e:
            logger.warning(f"Skipping sensor: {e}")

    known = [r for r in readings if r.kind is not SensorKind.UNKNOWN]
    if not known:
        logger.warning("No classifiable sensor readings found in the sensor tree")
    else:
        logger.debug(f"Flattened sensor tree into {len(known)} readings")
    return known
