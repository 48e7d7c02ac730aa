"""Core domain module for configseek.

This module contains the result and option models, port definitions,
exceptions and the step runners. It performs no I/O and can be tested
in isolation.
"""

from configseek.core.models import ConfigResult, ExplorerOptions
from configseek.core.pipeline import run_steps, run_steps_async
from configseek.core.ports import CachePort, ExecutionMode, Step, Transform


__all__ = [
    "CachePort",
    "ConfigResult",
    "ExecutionMode",
    "ExplorerOptions",
    "Step",
    "Transform",
    "run_steps",
    "run_steps_async",
]
