"""
Stress routines and their orchestration.

- cpu: one spinning worker process per logical CPU
- memory: chunked allocation with a rewrite loop
- disk: synchronous writes to a temporary file
- gpu: temperature polling without load generation
- orchestrator: sequential runner with per-routine failure isolation
"""

from .cpu import run_cpu_stress
from .disk import run_disk_stress
from .gpu import run_gpu_check
from .memory import compute_memory_target, run_memory_stress
from .orchestrator import DEFAULT_ROUTINES, StressOrchestrator, run_isolated

__all__ = [
    "DEFAULT_ROUTINES",
    "StressOrchestrator",
    "compute_memory_target",
    "run_cpu_stress",
    "run_disk_stress",
    "run_gpu_check",
    "run_isolated",
    "run_memory_stress",
]
