"""
Alert evaluation for the hwsentry package.
"""

from .evaluator import evaluate_alerts, threshold_alert, voltage_range_alert

__all__ = [
    "evaluate_alerts",
    "threshold_alert",
    "voltage_range_alert",
]
