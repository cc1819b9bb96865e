"""
Run orchestration for hwsentry.

- LogManager: attaches the run's log file to the root logger
- Environment checks: output directory writability, platform
- MonitorRunner: the end-to-end monitoring pipeline
"""

from .environment import check_platform, ensure_output_directory
from .log_manager import LOG_FILE_DATEFMT, LOG_FILE_FORMAT, LogManager
from .monitor_runner import MonitorRunner, fetch_sensor_tree

__all__ = [
    "LOG_FILE_DATEFMT",
    "LOG_FILE_FORMAT",
    "LogManager",
    "MonitorRunner",
    "check_platform",
    "ensure_output_directory",
    "fetch_sensor_tree",
]
