"""
Command-line interface for the hwsentry hardware monitoring application.

This module provides the main CLI entry point: it parses arguments, loads and
validates the configuration, prepares the output directory and log file, runs
the monitoring pipeline and prints the end-of-run summary.
"""

import argparse
import dataclasses
import logging
import time
from pathlib import Path
from typing import List, Optional

from rich.logging import RichHandler

from ..config import load_config
from ..models.config import AppConfig
from ..models.runtime import RunPaths
from ..orchestration import LogManager, MonitorRunner, ensure_output_directory
from ..reporting import open_in_viewer
from ..validation import HwSentryError, handle_cli_error
from .console import print_summary

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hwsentry",
        description="Stress-test CPU, RAM, disk and GPU while reading hardware sensors, "
        "then write HTML reports of the readings and alerts.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a TOML configuration file. Built-in defaults are used if omitted.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory for the reports and the log file (overrides [output] directory).",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the reports in the default viewer when the run finishes.",
    )
    return parser


def apply_overrides(app_config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of the configuration with command-line overrides applied."""
    output = app_config.output
    if args.output_dir is not None:
        output = dataclasses.replace(output, directory=args.output_dir)
    if args.no_browser:
        output = dataclasses.replace(output, open_browser=False)
    return dataclasses.replace(app_config, output=output)


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for hwsentry.

    Exits with status 0 when the run completes, whatever the alerts, and with
    status 1 on any startup or pipeline failure.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``

    Raises:
        SystemExit: On configuration errors, an unreachable sensor source or
            any other unrecovered failure.
    """
    args = build_parser().parse_args(argv)

    try:
        app_config = apply_overrides(load_config(args.config), args)
    except Exception as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    run_timestamp = time.strftime("%Y%m%d_%H%M%S")
    try:
        output_dir = ensure_output_directory(app_config.output.directory)
        paths = RunPaths.for_run(output_dir, run_timestamp)
        log_manager = LogManager(paths.log_file)
        log_manager.open()
    except OSError as e:
        handle_cli_error(
            error=e,
            context="output directory setup",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    logger.info(f"Reports and log will be saved in: {output_dir}")
    try:
        summary = MonitorRunner(app_config, paths, run_timestamp).run()
    except Exception as e:
        handle_cli_error(
            error=e,
            context="monitoring run",
            exit_code=1,
            include_traceback=not isinstance(e, HwSentryError),
            logger=logger,
        )
    finally:
        log_manager.close()

    print_summary(summary)

    if app_config.output.open_browser:
        open_in_viewer(summary.paths.report_file)
        if summary.tree_report_written:
            open_in_viewer(summary.paths.tree_report_file)


if __name__ == "__main__":
    main_cli()
