"""
HTTP client for the hardware monitor's sensor endpoint.

This module fetches the sensor tree from a LibreHardwareMonitor-style web
server and checks, at start-up, that the server is reachable at all.
"""

import logging
import socket
from typing import Optional

import requests

from ..models.config import SourceConfig
from ..models.sensors import RawSensorNode
from ..validation import SourceUnavailable, simple_retry
from .decoder import decode_sensor_tree

logger = logging.getLogger(__name__)


def probe(host: str, port: int, timeout: float) -> bool:
    """Check that a TCP connection to ``host:port`` can be opened.

    No data is exchanged; the connection is closed immediately.
    """
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as e:
        logger.debug(f"Probe of {host}:{port} failed: {e}")
        return False


class SensorSourceClient:
    """
    Client for the ``/data.json`` endpoint of the hardware monitor.

    Every call to ``fetch`` performs a full request; nothing is cached.
    """

    def __init__(self, config: SourceConfig, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Source configuration (host, port, timeout, retries)
            session: Optional requests Session. If not provided, one is created.
        """
        self.config = config
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self.config.url

    def fetch(self) -> RawSensorNode:
        """
        Fetch and decode the current sensor tree.

        Returns:
            The root node of the sensor tree

        Raises:
            SourceUnavailable: On timeout, connection failure, an error status
                or a body that is not a valid sensor tree
        """
        logger.debug(f"Fetching sensor data from {self.url}")
        try:
            response = self._session.get(self.url, timeout=self.config.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout as e:
            raise SourceUnavailable(
                f"Timed out after {self.config.timeout:g}s fetching {self.url}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise SourceUnavailable(f"Failed to fetch {self.url}: {e}") from e
        except ValueError as e:
            raise SourceUnavailable(f"Response from {self.url} is not valid JSON: {e}") from e

        return decode_sensor_tree(payload)

    def probe(self) -> bool:
        """Check reachability of the configured host and port."""
        return probe(self.config.host, self.config.port, self.config.timeout)

    def wait_until_available(self) -> None:
        """
        Probe the source, retrying a fixed number of times.

        Raises:
            SourceUnavailable: If every attempt fails
        """

        def attempt() -> None:
            if not self.probe():
                raise SourceUnavailable(
                    f"Hardware monitor not reachable at {self.config.host}:{self.config.port}"
                )

        simple_retry(
            attempt,
            max_attempts=self.config.retry_count,
            delay=self.config.retry_delay,
            context=f"probing {self.config.host}:{self.config.port}",
        )
        logger.info(f"Hardware monitor reachable at {self.url}")

    def close(self) -> None:
        self._session.close()
