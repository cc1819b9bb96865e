"""
Stress test orchestration.

The four routines run one after the other in a fixed order. Each one runs
through ``run_isolated``, which turns any failure into an Error result and an
entry in the error list, so one routine never prevents the next from running.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..models.config import AppConfig
from ..models.results import StressComponent, StressOutcome, StressResult, StressStatus
from ..source import SensorSourceClient
from ..validation import HwSentryError, RoutineFailure
from .cpu import run_cpu_stress
from .disk import run_disk_stress
from .gpu import run_gpu_check
from .memory import run_memory_stress

logger = logging.getLogger(__name__)

StressRoutine = Callable[[AppConfig, SensorSourceClient], StressResult]

DEFAULT_ROUTINES: Dict[StressComponent, StressRoutine] = {
    StressComponent.CPU: run_cpu_stress,
    StressComponent.RAM: run_memory_stress,
    StressComponent.DISK: run_disk_stress,
    StressComponent.GPU: run_gpu_check,
}


def run_isolated(
    component: StressComponent,
    routine: Callable[[], StressResult],
    errors: List[str],
) -> StressResult:
    """
    Run one routine, converting any failure into an Error result.

    Args:
        component: Component the routine exercises
        routine: Zero-argument callable producing the result
        errors: Error list; a message is appended when the routine fails

    Returns:
        The routine's result, or an Error result with no metric
    """
    try:
        return routine()
    except Exception as e:
        failure = RoutineFailure(component.value, e)
        # Expected domain failures are reported without a traceback.
        logger.error(str(failure), exc_info=not isinstance(e, HwSentryError))
        errors.append(str(failure))
        return StressResult(component, None, StressStatus.ERROR)


class StressOrchestrator:
    """
    Runs the CPU, RAM, Disk and GPU routines in sequence.
    """

    def __init__(
        self,
        config: AppConfig,
        client: SensorSourceClient,
        routines: Optional[Dict[StressComponent, StressRoutine]] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Application configuration
            client: Source client used by the routines for sampling
            routines: Optional replacement routines, keyed by component
        """
        self.config = config
        self.client = client
        self.routines = {**DEFAULT_ROUTINES, **(routines or {})}

    def run(self) -> StressOutcome:
        """
        Run every routine once.

        Returns:
            StressOutcome with exactly one result per component, in the order
            CPU, RAM, Disk, GPU, and the error messages of failed routines
        """
        results: List[StressResult] = []
        errors: List[str] = []

        for component in StressComponent:
            routine = self.routines[component]
            logger.info(f"--- Starting {component.value} stress test ---")
            result = run_isolated(
                component, lambda: routine(self.config, self.client), errors
            )
            metric = "n/a" if result.metric is None else f"{result.metric:.2f}"
            logger.info(
                f"--- {component.value} stress test finished: "
                f"{result.status.value} (metric: {metric}) ---"
            )
            results.append(result)

        if errors:
            logger.warning(f"{len(errors)} of {len(results)} stress tests failed")
        return StressOutcome(results=results, errors=errors)
