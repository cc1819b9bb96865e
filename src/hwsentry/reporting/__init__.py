"""
HTML report generation for the hwsentry package.

- summary: stress results, alerts, temperature chart and reading tables
- tree: the raw sensor tree as reported by the monitor
- output: writing reports and opening them in a viewer
"""

from .output import open_in_viewer, write_report
from .summary import readings_frame, render_summary_report, temperature_figure
from .tree import render_sensor_tree_report

__all__ = [
    "open_in_viewer",
    "readings_frame",
    "render_sensor_tree_report",
    "render_summary_report",
    "temperature_figure",
    "write_report",
]
