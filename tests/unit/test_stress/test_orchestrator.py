"""
Unit tests for stress test orchestration.

Tests that every component always yields exactly one result, in a fixed
order, and that a failing routine never stops the ones after it.
"""

import logging
from unittest.mock import Mock

import pytest

from hwsentry.models.results import StressComponent, StressResult, StressStatus
from hwsentry.stress import StressOrchestrator, run_isolated
from hwsentry.validation import InsufficientResource, SourceUnavailable

ORDER = [StressComponent.CPU, StressComponent.RAM, StressComponent.DISK, StressComponent.GPU]


def ok_routine(component, metric=50.0):
    return Mock(return_value=StressResult(component, metric, StressStatus.OK))


def all_ok_routines():
    return {component: ok_routine(component) for component in StressComponent}


@pytest.mark.unit
class TestRunIsolated:
    """Test cases for running a single routine."""

    def test_success_passes_result_through(self):
        errors = []
        expected = StressResult(StressComponent.CPU, 70.0, StressStatus.OK)

        result = run_isolated(StressComponent.CPU, lambda: expected, errors)

        assert result is expected
        assert errors == []

    def test_failure_becomes_error_result(self, caplog):
        errors = []

        def failing():
            raise InsufficientResource("Only 100 MiB free")

        with caplog.at_level(logging.ERROR):
            result = run_isolated(StressComponent.RAM, failing, errors)

        assert result == StressResult(StressComponent.RAM, None, StressStatus.ERROR)
        assert errors == ["RAM stress test failed: InsufficientResource: Only 100 MiB free"]
        assert "RAM stress test failed" in caplog.text

    def test_unexpected_exception_is_isolated(self):
        errors = []

        def failing():
            raise ZeroDivisionError("division by zero")

        result = run_isolated(StressComponent.DISK, failing, errors)

        assert result.status is StressStatus.ERROR
        assert errors[0].startswith("Disk stress test failed: ZeroDivisionError")


@pytest.mark.unit
class TestStressOrchestrator:
    """Test cases for the full sequence."""

    def test_all_routines_succeed(self, fast_config, mock_client):
        routines = all_ok_routines()

        outcome = StressOrchestrator(fast_config, mock_client, routines).run()

        assert [r.component for r in outcome.results] == ORDER
        assert all(r.status is StressStatus.OK for r in outcome.results)
        assert outcome.errors == []
        for routine in routines.values():
            routine.assert_called_once_with(fast_config, mock_client)

    def test_failures_do_not_stop_later_routines(self, fast_config, mock_client):
        routines = all_ok_routines()
        routines[StressComponent.CPU] = Mock(side_effect=RuntimeError("worker crashed"))
        routines[StressComponent.DISK] = Mock(side_effect=SourceUnavailable("connection refused"))

        outcome = StressOrchestrator(fast_config, mock_client, routines).run()

        assert [r.component for r in outcome.results] == ORDER
        assert [r.status for r in outcome.results] == [
            StressStatus.ERROR,
            StressStatus.OK,
            StressStatus.ERROR,
            StressStatus.OK,
        ]
        assert outcome.errors == [
            "CPU stress test failed: RuntimeError: worker crashed",
            "Disk stress test failed: SourceUnavailable: connection refused",
        ]
        routines[StressComponent.GPU].assert_called_once()

    def test_every_routine_failing_still_yields_four_results(self, fast_config, mock_client):
        routines = {c: Mock(side_effect=ValueError("boom")) for c in StressComponent}

        outcome = StressOrchestrator(fast_config, mock_client, routines).run()

        assert len(outcome.results) == 4
        assert len(outcome.errors) == 4
        assert all(r.metric is None for r in outcome.results)

    def test_result_for(self, fast_config, mock_client):
        outcome = StressOrchestrator(fast_config, mock_client, all_ok_routines()).run()

        assert outcome.result_for(StressComponent.GPU).component is StressComponent.GPU

    def test_partial_override_keeps_default_routines(self, fast_config, mock_client):
        orchestrator = StressOrchestrator(
            fast_config, mock_client, {StressComponent.GPU: ok_routine(StressComponent.GPU)}
        )

        assert set(orchestrator.routines) == set(StressComponent)
        assert orchestrator.routines[StressComponent.CPU].__name__ == "run_cpu_stress"
