"""
Data models and structures for hwsentry.

Configuration Models:
- Sensor source, stress routine, threshold and output settings

Sensor Models:
- The raw sensor tree decoded from the hardware monitor
- Flat, classified sensor readings

Runtime Models:
- Paths of the artifacts generated by a run

Result Models:
- Per-component stress results and the orchestrator outcome
- The summary of a complete run

All models are dataclasses; the configuration and reading records are frozen.
"""

# Configuration models
from .config import AppConfig, OutputConfig, SourceConfig, StressConfig, ThresholdConfig

# Runtime models
from .runtime import RunPaths

# Sensor models
from .sensors import RawSensorNode, SensorKind, SensorReading

# Result models
from .results import (
    RunSummary,
    StressComponent,
    StressOutcome,
    StressResult,
    StressStatus,
)

__all__ = [
    # Configuration
    "AppConfig",
    "OutputConfig",
    "SourceConfig",
    "StressConfig",
    "ThresholdConfig",
    # Runtime
    "RunPaths",
    # Sensors
    "RawSensorNode",
    "SensorKind",
    "SensorReading",
    # Results
    "RunSummary",
    "StressComponent",
    "StressOutcome",
    "StressResult",
    "StressStatus",
]
