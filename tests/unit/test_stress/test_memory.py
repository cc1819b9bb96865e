"""
Unit tests for the RAM stress routine.
"""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from hwsentry.models.results import StressComponent, StressResult, StressStatus
from hwsentry.stress import StressOrchestrator, compute_memory_target, run_memory_stress
from hwsentry.stress.memory import check_memory_target
from hwsentry.stress.orchestrator import run_isolated
from hwsentry.validation import InsufficientResource

GIB = 1024 ** 3
MIB = 1024 ** 2


@pytest.mark.unit
class TestMemoryTarget:
    """Test cases for the allocation target."""

    def test_cap_applies(self):
        assert compute_memory_target(8 * GIB, 0.3, 64 * MIB) == 64 * MIB

    def test_fraction_applies_below_cap(self):
        assert compute_memory_target(100 * MIB, 0.3, 512 * MIB) == 30 * MIB

    def test_target_fits_in_available_memory(self):
        # 2 GiB free, 8 GiB total, fraction 0.3, cap 64 MiB
        target = compute_memory_target(8 * GIB, 0.3, 64 * MIB)

        check_memory_target(target, 2 * GIB, 8 * MIB)

    def test_available_below_target(self):
        with pytest.raises(InsufficientResource):
            check_memory_target(64 * MIB, 32 * MIB, 8 * MIB)

    def test_target_below_minimum(self):
        with pytest.raises(InsufficientResource):
            check_memory_target(4 * MIB, 2 * GIB, 8 * MIB)


@pytest.mark.unit
class TestRunMemoryStress:
    """Test cases for the routine itself."""

    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_allocates_and_samples_memory_load(self, mock_vm, fast_config, mock_client):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=2 * GIB)

        result = run_memory_stress(fast_config, mock_client)

        assert result.component is StressComponent.RAM
        # "Memory" 41,0 % in the sample tree
        assert result.metric == 41.0
        assert result.status is StressStatus.OK
        mock_client.fetch.assert_called_once()

    @patch("hwsentry.stress.memory.bytearray", create=True)
    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_shortfall_never_allocates(self, mock_vm, mock_bytearray, fast_config, mock_client):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=1 * MIB)

        with pytest.raises(InsufficientResource):
            run_memory_stress(fast_config, mock_client)

        mock_bytearray.assert_not_called()
        mock_client.fetch.assert_not_called()

    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_shortfall_reported_as_error_by_orchestrator(self, mock_vm, fast_config, mock_client):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=1 * MIB)
        others = {
            c: Mock(return_value=StressResult(c, 50.0, StressStatus.OK))
            for c in StressComponent
            if c is not StressComponent.RAM
        }

        outcome = StressOrchestrator(fast_config, mock_client, others).run()

        result = outcome.result_for(StressComponent.RAM)
        assert result.status is StressStatus.ERROR
        assert result.metric is None
        assert outcome.errors[0].startswith("RAM stress test failed: InsufficientResource")

    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_high_memory_load(self, mock_vm, fast_config, mock_client, tree_factory):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=2 * GIB)
        mock_client.fetch.return_value = tree_factory(("Memory", "95,5 %"))

        result = run_memory_stress(fast_config, mock_client)

        assert result.metric == 95.5
        assert result.status is StressStatus.HIGH_USAGE

    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_gpu_memory_load_is_ignored(self, mock_vm, fast_config, mock_client, tree_factory):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=2 * GIB)
        mock_client.fetch.return_value = tree_factory(
            ("Memory", "41,0 %"), ("GPU Memory", "97,0 %")
        )

        result = run_memory_stress(fast_config, mock_client)

        assert result.metric == 41.0
        assert result.status is StressStatus.OK

    @patch("hwsentry.stress.memory.gc.collect")
    @patch("hwsentry.stress.memory.random.randbytes")
    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_failure_after_allocation_releases_memory(
        self, mock_vm, mock_randbytes, mock_collect, fast_config, mock_client
    ):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=2 * GIB)
        mock_randbytes.side_effect = MemoryError("rewrite failed")

        with pytest.raises(MemoryError):
            run_memory_stress(fast_config, mock_client)

        mock_randbytes.assert_called_once()
        mock_collect.assert_called_once()
        mock_client.fetch.assert_not_called()

    @patch("hwsentry.stress.memory.gc.collect")
    @patch("hwsentry.stress.memory.random.randbytes")
    @patch("hwsentry.stress.memory.psutil.virtual_memory")
    def test_failure_after_allocation_reaches_run_isolated(
        self, mock_vm, mock_randbytes, mock_collect, fast_config, mock_client
    ):
        mock_vm.return_value = SimpleNamespace(total=8 * GIB, available=2 * GIB)
        mock_randbytes.side_effect = OSError("interrupted")
        errors = []

        result = run_isolated(
            StressComponent.RAM, lambda: run_memory_stress(fast_config, mock_client), errors
        )

        mock_collect.assert_called_once()
        assert result.status is StressStatus.ERROR
        assert result.metric is None
        assert errors == ["RAM stress test failed: OSError: interrupted"]
