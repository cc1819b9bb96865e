"""
Sensor data models.

This module contains the two shapes sensor data takes inside hwsentry: the
loosely-typed tree decoded from the hardware monitor's ``data.json`` and the
flat, classified readings produced from its leaves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SensorKind(Enum):
    """Semantic category of a sensor reading."""

    TEMPERATURE = "Temperature"
    LOAD = "Load"
    VOLTAGE = "Voltage"
    FAN = "Fan"
    DATA = "Data"
    POWER = "Power"
    CLOCK = "Clock"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class RawSensorNode:
    """
    A node of the sensor tree as reported by the hardware monitor.

    Nodes with children are branches and only group other nodes. A node
    without children whose name and value are both non-empty is a leaf
    candidate for classification.
    """

    # The node label (``Text`` in the JSON payload).
    name: str
    # Free-form value string, possibly carrying a unit (e.g. "45,3 °C").
    value: str
    # Child nodes in the order the monitor reported them.
    children: Tuple["RawSensorNode", ...] = ()
    # Display-only minimum and maximum strings, used by the tree report.
    min: Optional[str] = None
    max: Optional[str] = None

    @property
    def is_leaf_candidate(self) -> bool:
        return not self.children and bool(self.name) and bool(self.value)

    def iter_nodes(self):
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()


@dataclass(frozen=True)
class SensorReading:
    """
    A single classified sensor value.

    Readings are created fresh on every poll and never mutated afterwards.
    """

    name: str
    kind: SensorKind
    # Value rounded to two decimal places.
    value: float
    # Unit derived from ``kind`` only.
    unit: str
    # Alert threshold applicable to this reading, if any.
    max: Optional[float]
    # The value string exactly as reported by the monitor.
    raw_value: str
