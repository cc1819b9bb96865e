"""
Configuration validation utilities.

Each ``validate_*_config`` function turns one raw TOML section into its
immutable configuration model. Missing keys fall back to the model defaults.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    OutputConfig,
    SourceConfig,
    StressConfig,
    ThresholdConfig,
)
from ..validation import (
    ValidationError,
    validate_bool,
    validate_directory,
    validate_host,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

_SOURCE_DEFAULTS = SourceConfig()
_STRESS_DEFAULTS = StressConfig()
_THRESHOLD_DEFAULTS = ThresholdConfig()
_OUTPUT_DEFAULTS = OutputConfig()


def _warn_unknown_keys(section_name: str, data: Dict[str, Any], model: Any) -> None:
    unknown = set(data) - set(model.__dataclass_fields__)
    if unknown:
        logger.warning(
            f"Ignoring unknown keys in [{section_name}]: {', '.join(sorted(unknown))}"
        )


def validate_source_config(source_data: Dict[str, Any]) -> SourceConfig:
    """
    Validate and create a SourceConfig from the ``[source]`` section.

    Raises:
        ValidationError: If validation fails
    """
    _warn_unknown_keys("source", source_data, SourceConfig)
    defaults = _SOURCE_DEFAULTS

    return SourceConfig(
        host=validate_host(
            source_data.get("host", defaults.host), field_name="source.host"
        ),
        port=validate_positive_integer(
            source_data.get("port", defaults.port),
            min_value=1,
            max_value=65535,
            field_name="source.port",
        ),
        timeout=validate_positive_float(
            source_data.get("timeout", defaults.timeout),
            min_value=0.1,
            max_value=120.0,
            field_name="source.timeout",
        ),
        retry_count=validate_positive_integer(
            source_data.get("retry_count", defaults.retry_count),
            min_value=1,
            max_value=100,
            field_name="source.retry_count",
        ),
        retry_delay=validate_positive_float(
            source_data.get("retry_delay", defaults.retry_delay),
            min_value=0.0,
            max_value=60.0,
            field_name="source.retry_delay",
        ),
    )


def validate_stress_config(stress_data: Dict[str, Any]) -> StressConfig:
    """
    Validate and create a StressConfig from the ``[stress]`` section.

    Raises:
        ValidationError: If validation fails
    """
    _warn_unknown_keys("stress", stress_data, StressConfig)
    defaults = _STRESS_DEFAULTS

    def duration(key: str) -> float:
        return validate_positive_float(
            stress_data.get(key, getattr(defaults, key)),
            min_value=0.1,
            max_value=3600.0,
            field_name=f"stress.{key}",
        )

    def pause(key: str) -> float:
        return validate_positive_float(
            stress_data.get(key, getattr(defaults, key)),
            min_value=0.0,
            max_value=10.0,
            field_name=f"stress.{key}",
        )

    def megabytes(key: str, min_value: int = 1) -> int:
        return validate_positive_integer(
            stress_data.get(key, getattr(defaults, key)),
            min_value=min_value,
            field_name=f"stress.{key}",
        )

    memory_fraction = validate_positive_float(
        stress_data.get("memory_fraction", defaults.memory_fraction),
        min_value=0.01,
        max_value=0.9,
        field_name="stress.memory_fraction",
    )

    target_dir = stress_data.get("disk_target_dir")
    disk_target_dir = (
        validate_directory(target_dir, field_name="stress.disk_target_dir")
        if target_dir
        else None
    )

    config = StressConfig(
        cpu_duration=duration("cpu_duration"),
        ram_duration=duration("ram_duration"),
        disk_duration=duration("disk_duration"),
        gpu_duration=duration("gpu_duration"),
        cpu_join_margin=duration("cpu_join_margin"),
        poll_interval=duration("poll_interval"),
        memory_fraction=memory_fraction,
        memory_cap_mb=megabytes("memory_cap_mb"),
        memory_chunk_mb=megabytes("memory_chunk_mb"),
        memory_min_mb=megabytes("memory_min_mb"),
        memory_alloc_pause=pause("memory_alloc_pause"),
        memory_write_pause=pause("memory_write_pause"),
        disk_buffer_mb=megabytes("disk_buffer_mb"),
        disk_min_free_mb=megabytes("disk_min_free_mb", min_value=0),
        disk_max_file_mb=megabytes("disk_max_file_mb"),
        disk_target_dir=disk_target_dir,
    )

    if config.disk_max_file_mb < config.disk_buffer_mb:
        raise ValidationError(
            "stress.disk_max_file_mb must be >= stress.disk_buffer_mb",
            field_name="stress.disk_max_file_mb",
            value=config.disk_max_file_mb,
        )
    return config


def validate_threshold_config(threshold_data: Dict[str, Any]) -> ThresholdConfig:
    """
    Validate and create a ThresholdConfig from the ``[thresholds]`` section.

    Raises:
        ValidationError: If validation fails
    """
    _warn_unknown_keys("thresholds", threshold_data, ThresholdConfig)
    defaults = _THRESHOLD_DEFAULTS

    def threshold(key: str, max_value: float) -> float:
        return validate_positive_float(
            threshold_data.get(key, getattr(defaults, key)),
            min_value=0.0,
            max_value=max_value,
            field_name=f"thresholds.{key}",
        )

    config = ThresholdConfig(
        cpu_temperature=threshold("cpu_temperature", 150.0),
        gpu_temperature=threshold("gpu_temperature", 150.0),
        disk_load=threshold("disk_load", 100.0),
        ram_load=threshold("ram_load", 100.0),
        power=threshold("power", 5000.0),
        voltage_min=threshold("voltage_min", 48.0),
        voltage_max=threshold("voltage_max", 48.0),
    )

    if config.voltage_min >= config.voltage_max:
        raise ValidationError(
            f"thresholds.voltage_min ({config.voltage_min}) must be lower than "
            f"thresholds.voltage_max ({config.voltage_max})",
            field_name="thresholds.voltage_min",
            value=config.voltage_min,
        )
    return config


def validate_output_config(output_data: Dict[str, Any]) -> OutputConfig:
    """
    Validate and create an OutputConfig from the ``[output]`` section.

    Raises:
        ValidationError: If validation fails
    """
    _warn_unknown_keys("output", output_data, OutputConfig)
    defaults = _OUTPUT_DEFAULTS

    return OutputConfig(
        directory=validate_directory(
            output_data.get("directory", defaults.directory),
            field_name="output.directory",
        ),
        open_browser=validate_bool(
            output_data.get("open_browser", defaults.open_browser),
            field_name="output.open_browser",
        ),
    )
