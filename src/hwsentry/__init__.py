"""
hwsentry: Hardware sensor monitoring and stress testing tool.

This package reads the sensor tree published by a LibreHardwareMonitor-style
web server, stresses the CPU, RAM, disk and GPU, and writes HTML reports of
the readings and of any threshold alerts.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Data structures and type definitions
- validation: Input validation and error handling
- source: Sensor endpoint client and JSON decoding
- classification: Sensor tree flattening and classification rules
- stress: Stress routines and their orchestration
- alerts: Threshold and voltage-range alert evaluation
- reporting: HTML report rendering and output
- orchestration: Log file management and the run pipeline
- cli: Command-line interface

Usage:
    From command line:
        hwsentry [--config PATH] [--output-dir DIR] [--no-browser]
        python -m hwsentry

    Programmatically:
        from hwsentry import MonitorRunner, RunPaths, load_config
        config = load_config()
        runner = MonitorRunner(config, RunPaths.for_run(Path("reports"), ts), ts)
        summary = runner.run()
"""

# Main interfaces
from .config import load_config
from .orchestration import MonitorRunner
from .cli import main_cli

# Model classes for external use
from .models import (
    AppConfig,
    RawSensorNode,
    RunPaths,
    RunSummary,
    SensorKind,
    SensorReading,
    StressComponent,
    StressResult,
    StressStatus,
)

# Core operations
from .classification import flatten_sensor_tree
from .alerts import evaluate_alerts
from .stress import StressOrchestrator

# Errors
from .validation import (
    HwSentryError,
    InsufficientResource,
    RoutineFailure,
    SensorParseError,
    SourceUnavailable,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Main interfaces
    "load_config",
    "MonitorRunner",
    "main_cli",
    # Models
    "AppConfig",
    "RawSensorNode",
    "RunPaths",
    "RunSummary",
    "SensorKind",
    "SensorReading",
    "StressComponent",
    "StressResult",
    "StressStatus",
    # Core operations
    "flatten_sensor_tree",
    "evaluate_alerts",
    "StressOrchestrator",
    # Errors
    "HwSentryError",
    "InsufficientResource",
    "RoutineFailure",
    "SensorParseError",
    "SourceUnavailable",
    "ValidationError",
]
