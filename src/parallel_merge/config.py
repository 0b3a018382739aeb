"""
Pipeline configuration.

Priority for the barrier timeout:
1) explicit argument
2) env PARALLEL_MERGE_TIMEOUT
3) DEFAULT_TIMEOUT (no timeout)
"""

from __future__ import annotations

import math
import os

REFERENCE_SEQUENCE = (7, 12, 19, 3, 18, 4, 2, -5, 6, 15, 8)

SORT_WORKERS = 2
MERGE_WORKERS = 1

DEFAULT_TIMEOUT: float | None = None
TIMEOUT_ENV = "PARALLEL_MERGE_TIMEOUT"

BENCH_SIZES = range(1, 200_000, 20_000)
BENCH_REPS = 3


def resolve_timeout(explicit: float | None = None) -> float | None:
    if explicit is not None:
        if not (math.isfinite(explicit) and explicit > 0):
            raise ValueError("timeout must be a finite number > 0")
        return float(explicit)

    raw = os.getenv(TIMEOUT_ENV)
    if raw is None:
        return DEFAULT_TIMEOUT

    try:
        timeout = float(raw)
        if math.isfinite(timeout) and timeout > 0:
            return timeout
    except ValueError:
        pass
    return DEFAULT_TIMEOUT
