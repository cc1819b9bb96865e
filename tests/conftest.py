"""
Pytest configuration and shared fixtures for the hwsentry test suite.

This module provides common fixtures, test utilities, and configuration
for all test modules in the hwsentry project.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict
from unittest.mock import Mock

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hwsentry.models.config import AppConfig, StressConfig, ThresholdConfig  # noqa: E402
from hwsentry.models.sensors import RawSensorNode  # noqa: E402
from hwsentry.source import SensorSourceClient, decode_sensor_tree  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def thresholds():
    """Default alert thresholds."""
    return ThresholdConfig()


@pytest.fixture
def fast_config(temp_dir):
    """Application config with stress durations short enough for unit tests."""
    return AppConfig(
        stress=StressConfig(
            cpu_duration=0.1,
            ram_duration=0.1,
            disk_duration=0.1,
            gpu_duration=0.1,
            cpu_join_margin=1.0,
            poll_interval=0.05,
            memory_cap_mb=16,
            memory_chunk_mb=8,
            memory_alloc_pause=0.0,
            memory_write_pause=0.0,
            disk_min_free_mb=1,
            disk_max_file_mb=4,
            disk_target_dir=temp_dir,
        )
    )


@pytest.fixture
def sample_sensor_payload() -> Dict[str, Any]:
    """A data.json payload shaped like LibreHardwareMonitor output."""
    return {
        "id": 0,
        "Text": "Sensor",
        "Min": "Min",
        "Value": "Value",
        "Max": "Max",
        "Children": [
            {
                "Text": "DESKTOP-TEST",
                "Value": "",
                "Children": [
                    {
                        "Text": "Intel Core i7-9700K",
                        "Value": "",
                        "Children": [
                            {
                                "Text": "Temperatures",
                                "Value": "",
                                "Children": [
                                    {"Text": "CPU Package", "Value": "45,3 °C",
                                     "Min": "38,0 °C", "Max": "71,0 °C", "Children": []},
                                    {"Text": "CPU Core #1", "Value": "43,0 °C", "Children": []},
                                ],
                            },
                            {
                                "Text": "Load",
                                "Value": "",
                                "Children": [
                                    {"Text": "CPU Total", "Value": "12,5 %", "Children": []},
                                ],
                            },
                            {
                                "Text": "Voltages",
                                "Value": "",
                                "Children": [
                                    {"Text": "CPU Core Voltage", "Value": "1,250 V", "Children": []},
                                ],
                            },
                            {
                                "Text": "Powers",
                                "Value": "",
                                "Children": [
                                    {"Text": "CPU Package Power", "Value": "35,2 W", "Children": []},
                                ],
                            },
                        ],
                    },
                    {
                        "Text": "Generic Memory",
                        "Value": "",
                        "Children": [
                            {"Text": "Memory", "Value": "41,0 %", "Children": []},
                            {"Text": "Available Memory", "Value": "9,8 GB", "Children": []},
                        ],
                    },
                    {
                        "Text": "NVIDIA GeForce RTX 3070",
                        "Value": "",
                        "Children": [
                            {"Text": "GPU Core", "Value": "52,0 °C", "Children": []},
                            {"Text": "GPU Fan", "Value": "1200 RPM", "Children": []},
                        ],
                    },
                    {
                        "Text": "Samsung SSD 970 EVO",
                        "Value": "",
                        "Children": [
                            {"Text": "Used Space", "Value": "63,4 %", "Children": []},
                            {"Text": "Status", "Value": "OK", "Children": []},
                        ],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def sample_tree(sample_sensor_payload) -> RawSensorNode:
    """The sample payload decoded into a RawSensorNode tree."""
    return decode_sensor_tree(sample_sensor_payload)


def make_tree(*leaves) -> RawSensorNode:
    """Build a one-level tree from (name, value) pairs."""
    return RawSensorNode(
        name="Sensor",
        value="",
        children=tuple(RawSensorNode(name=name, value=value) for name, value in leaves),
    )


@pytest.fixture
def tree_factory():
    """Expose make_tree to tests."""
    return make_tree


@pytest.fixture
def mock_client(sample_tree):
    """A SensorSourceClient double whose fetch returns the sample tree."""
    client = Mock(spec=SensorSourceClient)
    client.fetch.return_value = sample_tree
    client.url = "http://localhost:8085/data.json"
    return client
