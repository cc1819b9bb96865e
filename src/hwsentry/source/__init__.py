"""
Sensor data source for the hwsentry package.

This module provides the HTTP client for the hardware monitor and the decoder
for its sensor tree payload.
"""

from .client import SensorSourceClient, probe
from .decoder import decode_sensor_tree

__all__ = [
    "SensorSourceClient",
    "decode_sensor_tree",
    "probe",
]
