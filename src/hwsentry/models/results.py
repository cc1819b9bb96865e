"""
Stress-test and run result models.

This module defines the records produced by the stress orchestrator and the
aggregate summary of a complete monitoring run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .runtime import RunPaths
from .sensors import RawSensorNode, SensorReading


class StressComponent(Enum):
    """Hardware components exercised by the stress routines, in run order."""

    CPU = "CPU"
    RAM = "RAM"
    DISK = "Disk"
    GPU = "GPU"


class StressStatus(Enum):
    """Outcome of a single stress routine."""

    OK = "OK"
    CRITICAL = "Critical"
    HIGH_USAGE = "HighUsage"
    UNAVAILABLE = "Unavailable"
    ERROR = "Error"


@dataclass(frozen=True)
class StressResult:
    """Result of one stress routine for one component."""

    component: StressComponent
    # Max temperature (CPU, GPU) or max load (RAM, Disk); None when no sample.
    metric: Optional[float]
    status: StressStatus


@dataclass
class StressOutcome:
    """
    Everything the stress orchestrator produced.

    ``results`` always holds one entry per component in the order CPU, RAM,
    Disk, GPU. ``errors`` holds one message per failed routine, in run order.
    """

    results: List[StressResult]
    errors: List[str] = field(default_factory=list)

    def result_for(self, component: StressComponent) -> StressResult:
        for result in self.results:
            if result.component is component:
                return result
        raise KeyError(f"No stress result recorded for {component.value}")


@dataclass
class RunSummary:
    """
    Aggregate of a finished monitoring run, consumed by the console summary.
    """

    # Run timestamp used in every artifact name (e.g. "20260101_120000").
    timestamp: str
    readings_before: List[SensorReading]
    readings_after: List[SensorReading]
    stress: StressOutcome
    alerts: List[str]
    paths: RunPaths
    # None when the background tree fetch failed; the tree report is then omitted.
    sensor_tree: Optional[RawSensorNode] = None

    @property
    def has_alerts(self) -> bool:
        return bool(self.alerts)

    @property
    def tree_report_written(self) -> bool:
        return self.sensor_tree is not None
