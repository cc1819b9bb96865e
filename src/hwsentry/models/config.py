"""
Configuration data models.

This module contains the configuration structures for the sensor source, the
stress routines, the alert thresholds and the generated output. All of them
are immutable: the CLI builds one ``AppConfig`` at start-up and passes it to
every component.
"""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

MIB = 1024 * 1024


@dataclass(frozen=True)
class SourceConfig:
    """
    Configuration of the hardware-monitor HTTP endpoint, ``[source]`` in TOML.
    """

    host: str = "localhost"
    port: int = 8085
    # Timeout for a single data.json request (seconds).
    timeout: float = 5.0
    # Start-up reachability probe.
    retry_count: int = 3
    retry_delay: float = 2.0

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/data.json"


@dataclass(frozen=True)
class StressConfig:
    """
    Configuration of the stress routines, ``[stress]`` in TOML.
    """

    # Load phase duration per component (seconds).
    cpu_duration: float = 30.0
    ram_duration: float = 20.0
    disk_duration: float = 20.0
    gpu_duration: float = 15.0
    # Extra time granted to CPU workers beyond their deadline before termination.
    cpu_join_margin: float = 5.0
    # Interval between sensor polls during the GPU routine.
    poll_interval: float = 1.0

    # RAM routine: target = min(total * fraction, cap).
    memory_fraction: float = 0.3
    memory_cap_mb: int = 512
    memory_chunk_mb: int = 8
    memory_min_mb: int = 8
    memory_alloc_pause: float = 0.01
    memory_write_pause: float = 0.05

    # Disk routine.
    disk_buffer_mb: int = 1
    disk_min_free_mb: int = 500
    disk_max_file_mb: int = 256
    # Directory receiving the temporary file; None means the system temp dir.
    disk_target_dir: Optional[Path] = None

    @property
    def memory_cap_bytes(self) -> int:
        return self.memory_cap_mb * MIB

    @property
    def memory_chunk_bytes(self) -> int:
        return self.memory_chunk_mb * MIB

    @property
    def memory_min_bytes(self) -> int:
        return self.memory_min_mb * MIB

    @property
    def disk_buffer_bytes(self) -> int:
        return self.disk_buffer_mb * MIB

    @property
    def disk_min_free_bytes(self) -> int:
        return self.disk_min_free_mb * MIB

    @property
    def disk_max_file_bytes(self) -> int:
        return self.disk_max_file_mb * MIB

    @property
    def disk_directory(self) -> Path:
        return self.disk_target_dir or Path(tempfile.gettempdir())


@dataclass(frozen=True)
class ThresholdConfig:
    """
    Alert thresholds, ``[thresholds]`` in TOML.
    """

    cpu_temperature: float = 85.0
    gpu_temperature: float = 85.0
    disk_load: float = 90.0
    ram_load: float = 90.0
    power: float = 250.0
    voltage_min: float = 0.6
    voltage_max: float = 1.55


@dataclass(frozen=True)
class OutputConfig:
    """
    Generated artifacts, ``[output]`` in TOML.
    """

    directory: Path = Path("reports")
    open_browser: bool = True


@dataclass(frozen=True)
class AppConfig:
    """
    The root configuration object that aggregates all settings.
    """

    source: SourceConfig = field(default_factory=SourceConfig)
    stress: StressConfig = field(default_factory=StressConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
