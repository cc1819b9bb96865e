"""
Name and unit patterns used to classify sensor readings.

The kind rules are evaluated in order and the first match wins. Keywords are
matched case-insensitively as substrings; unit symbols only count when they
stand alone as a unit token, so that the letters of ordinary words (the "v" in
"Available", the "w" in "Power") are not mistaken for units.
"""

import re
from typing import Dict, List, Pattern, Tuple

from ..models.sensors import SensorKind


def _unit_token(symbol: str) -> str:
    return rf"(?<![a-z]){re.escape(symbol)}(?![a-z])"


def _kind_pattern(keywords: List[str], units: List[str]) -> Pattern[str]:
    alternatives = [re.escape(k) for k in keywords] + [_unit_token(u) for u in units]
    return re.compile("|".join(alternatives), re.IGNORECASE)


KIND_RULES: List[Tuple[SensorKind, Pattern[str]]] = [
    (SensorKind.TEMPERATURE, _kind_pattern(["Temperature"], ["°C"])),
    (SensorKind.LOAD, _kind_pattern(["Load"], ["%"])),
    (SensorKind.VOLTAGE, _kind_pattern(["Voltage"], ["V"])),
    (SensorKind.FAN, _kind_pattern(["Fan"], ["RPM"])),
    (SensorKind.DATA, _kind_pattern(["Data", "Used Space", "Available"], ["GB", "MB"])),
    (SensorKind.POWER, _kind_pattern(["Power"], ["W"])),
    (SensorKind.CLOCK, _kind_pattern(["Clock"], ["MHz"])),
]

UNIT_BY_KIND: Dict[SensorKind, str] = {
    SensorKind.TEMPERATURE: "°C",
    SensorKind.VOLTAGE: "V",
    SensorKind.FAN: "RPM",
    SensorKind.LOAD: "%",
    SensorKind.DATA: "GB",
    SensorKind.POWER: "W",
    SensorKind.CLOCK: "MHz",
    SensorKind.UNKNOWN: "",
}

# Component name patterns. A name that mentions a graphics device is never
# treated as a CPU or RAM sensor even when it also says "Core" or "Memory".
CPU_NAME_PATTERN = re.compile(
    r"^(?!.*\b(?:gpu|graphics|video)\b).*\b(?:cpu|processor|core)\b", re.IGNORECASE
)
GPU_NAME_PATTERN = re.compile(r"\b(?:gpu|graphics|video)\b", re.IGNORECASE)
DISK_NAME_PATTERN = re.compile(
    r"\b(?:disk|ssd|hdd|nvme|drive|storage|used space)\b", re.IGNORECASE
)
MEMORY_NAME_PATTERN = re.compile(
    r"^(?!.*\b(?:gpu|graphics|video)\b).*\b(?:ram|memory)\b", re.IGNORECASE
)

# Leaf values keep only digits and decimal separators before parsing.
NON_NUMERIC_CHARS = re.compile(r"[^0-9,.]")
DECIMAL_NUMBER = re.compile(r"^\d+(?:\.\d+)?$")
