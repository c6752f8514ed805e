"""Benchmark execution for clientbench.

This module provides:
- Runner: Three-phase lifecycle (setup, warmup, measure) plus reporting
- Operation: Explicit callable shapes for setup/measure operations
- Sample/Outcome: Per-repetition records
- Timer: Monotonic nanosecond timing
"""

from clientbench.runner.operation import (
    ContextualOperation,
    IndexedOperation,
    Operation,
    PlainOperation,
)
from clientbench.runner.runner import (
    BenchmarkError,
    Phase,
    Runner,
    SetupError,
    WarmupError,
)
from clientbench.runner.sample import Outcome, Sample
from clientbench.runner.timer import Timer, utc_now

__all__ = [
    "BenchmarkError",
    "ContextualOperation",
    "IndexedOperation",
    "Operation",
    "Outcome",
    "Phase",
    "PlainOperation",
    "Runner",
    "Sample",
    "SetupError",
    "Timer",
    "WarmupError",
    "utc_now",
]
