"""
Configuration management for the hwsentry package.

This module loads and validates the optional TOML configuration file and
assembles the immutable application configuration.
"""

# Main configuration interface
from .manager import build_config, load_config

# For advanced usage - direct access to the loader and validators
from .loader import load_toml_file
from .validators import (
    validate_output_config,
    validate_source_config,
    validate_stress_config,
    validate_threshold_config,
)

__all__ = [
    # Main interface
    "build_config",
    "load_config",
    # Advanced interface
    "load_toml_file",
    "validate_output_config",
    "validate_source_config",
    "validate_stress_config",
    "validate_threshold_config",
]
