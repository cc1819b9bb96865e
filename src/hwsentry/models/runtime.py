"""
Runtime data models.

This module contains data structures describing a single run, such as the
paths of the artifacts it generates.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunPaths:
    """
    A container for all generated file paths for a single run.
    """

    # The summary HTML report.
    report_file: Path
    # The raw sensor-tree HTML report (only written when the tree was fetched).
    tree_report_file: Path
    # The plaintext log of the run.
    log_file: Path

    @classmethod
    def for_run(cls, output_dir: Path, timestamp: str) -> "RunPaths":
        return cls(
            report_file=output_dir / f"hwsentry_report_{timestamp}.html",
            tree_report_file=output_dir / f"hwsentry_sensor_tree_{timestamp}.html",
            log_file=output_dir / f"hwsentry_{timestamp}.log",
        )
