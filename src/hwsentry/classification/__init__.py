"""
Sensor classification utilities for the hwsentry package.

This module flattens the raw sensor tree into classified readings and exposes
the component name selectors shared with the stress routines.
"""

from .classifier import (
    classify_kind,
    classify_leaf,
    clean_sensor_value,
    flatten_sensor_tree,
    is_cpu_sensor,
    is_disk_sensor,
    is_gpu_sensor,
    is_memory_sensor,
    parse_sensor_value,
    threshold_for,
    unit_for_kind,
)

__all__ = [
    "classify_kind",
    "classify_leaf",
    "clean_sensor_value",
    "flatten_sensor_tree",
    "is_cpu_sensor",
    "is_disk_sensor",
    "is_gpu_sensor",
    "is_memory_sensor",
    "parse_sensor_value",
    "threshold_for",
    "unit_for_kind",
]
