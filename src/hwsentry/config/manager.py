"""
Configuration assembly.

``load_config`` builds the single immutable ``AppConfig`` of a run. There is
no module-level cache: the CLI calls it once and hands the result to every
component that needs it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_toml_file
from .validators import (
    validate_output_config,
    validate_source_config,
    validate_stress_config,
    validate_threshold_config,
)

logger = logging.getLogger(__name__)


def build_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate parsed configuration data and assemble an AppConfig.

    Args:
        config_data: Parsed TOML data; missing sections use defaults

    Returns:
        Fully validated AppConfig instance

    Raises:
        ValidationError: If any value fails validation
    """
    return AppConfig(
        source=validate_source_config(config_data.get("source", {})),
        stress=validate_stress_config(config_data.get("stress", {})),
        thresholds=validate_threshold_config(config_data.get("thresholds", {})),
        output=validate_output_config(config_data.get("output", {})),
    )


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the application configuration.

    Without a path the built-in defaults are used. With a path the TOML file
    is read and each section validated; keys it omits keep their defaults.

    Args:
        config_path: Optional path to a config.toml file

    Returns:
        Fully validated AppConfig instance

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if config_path is None:
        logger.debug("No configuration file given, using built-in defaults")
        return build_config({})

    try:
        config_data = load_toml_file(config_path, "configuration file")
        app_config = build_config(config_data)
    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.ERROR,
            reraise=False,
            logger=logger
        )
        raise

    logger.info(f"Successfully loaded configuration from {config_path}")
    return app_config
