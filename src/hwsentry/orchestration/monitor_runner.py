"""
Monitoring run pipeline.

This module provides the runner that drives one complete run: probe the
sensor source, take a snapshot, stress every component, take a second
snapshot, evaluate alerts and write the reports. The raw sensor tree used by
the tree report is fetched in the background while the rest of the run
proceeds.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from ..alerts import evaluate_alerts
from ..classification import flatten_sensor_tree
from ..models.config import AppConfig, SourceConfig
from ..models.results import RunSummary
from ..models.runtime import RunPaths
from ..models.sensors import RawSensorNode, SensorReading
from ..reporting import render_sensor_tree_report, render_summary_report, write_report
from ..source import SensorSourceClient
from ..stress import StressOrchestrator
from ..validation import ErrorSeverity, handle_error
from .environment import check_platform

logger = logging.getLogger(__name__)


def fetch_sensor_tree(source_config: SourceConfig) -> RawSensorNode:
    """Fetch the raw tree with a client of its own, for use off the main thread."""
    client = SensorSourceClient(source_config)
    try:
        return client.fetch()
    finally:
        client.close()


class MonitorRunner:
    """
    Runs the monitoring pipeline for one run.

    Startup and report-writing failures propagate to the caller. Stress routine
    failures are recorded in the outcome, and a failed tree fetch only drops
    the tree report.
    """

    def __init__(
        self,
        config: AppConfig,
        paths: RunPaths,
        timestamp: str,
        client: Optional[SensorSourceClient] = None,
        orchestrator: Optional[StressOrchestrator] = None,
    ):
        """
        Initialize the runner.

        Args:
            config: Application configuration
            paths: Artifact paths of this run
            timestamp: Run timestamp shown in the reports
            client: Sensor source client; one is created from the config if omitted
            orchestrator: Stress orchestrator; one is created if omitted
        """
        self.config = config
        self.paths = paths
        self.timestamp = timestamp
        self.client = client or SensorSourceClient(config.source)
        self.orchestrator = orchestrator or StressOrchestrator(config, self.client)

    def snapshot(self, label: str) -> List[SensorReading]:
        """Fetch and flatten the sensor tree once."""
        readings = flatten_sensor_tree(self.client.fetch(), self.config.thresholds)
        logger.info(f"{label} snapshot: {len(readings)} sensor readings")
        return readings

    def run(self) -> RunSummary:
        """
        Execute the complete run.

        Returns:
            The summary of the finished run

        Raises:
            SourceUnavailable: If the source is unreachable or a snapshot fails
            OSError: If a report cannot be written
        """
        check_platform()
        self.client.wait_until_available()

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="SensorTreeFetch")
        try:
            tree_future = executor.submit(fetch_sensor_tree, self.config.source)

            readings_before = self.snapshot("Pre-stress")
            outcome = self.orchestrator.run()
            readings_after = self.snapshot("Post-stress")

            alerts = evaluate_alerts(readings_after, outcome.errors, self.config.thresholds)
            for alert in alerts:
                logger.warning(f"ALERT: {alert}")
            if not alerts:
                logger.info("No alerts raised")

            sensor_tree = self._await_tree(tree_future)

            write_report(
                render_summary_report(
                    self.timestamp,
                    self.client.url,
                    readings_before,
                    readings_after,
                    outcome,
                    alerts,
                ),
                self.paths.report_file,
            )
            if sensor_tree is not None:
                write_report(
                    render_sensor_tree_report(sensor_tree, self.timestamp, self.client.url),
                    self.paths.tree_report_file,
                )
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
            self.client.close()

        return RunSummary(
            timestamp=self.timestamp,
            readings_before=readings_before,
            readings_after=readings_after,
            stress=outcome,
            alerts=alerts,
            paths=self.paths,
            sensor_tree=sensor_tree,
        )

    def _await_tree(self, future: "Future[RawSensorNode]") -> Optional[RawSensorNode]:
        timeout = self.config.source.timeout * 2
        try:
            return future.result(timeout=timeout)
        except Exception as e:
            handle_error(
                e,
                "sensor tree fetch, skipping tree report",
                severity=ErrorSeverity.WARNING,
                reraise=False,
                logger=logger,
            )
            return None
