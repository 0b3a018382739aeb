"""
Pipeline errors.

Every error here is fatal to a run: the pipeline has no partial result and
never retries.
"""

from __future__ import annotations


class PipelineError(RuntimeError):
    """Base class for failures that terminate a sort run."""


class ScratchAllocationError(PipelineError):
    def __init__(self, message: str | None = None, *, size: int | None = None) -> None:
        if message is None:
            message = f"Failed to allocate scratch buffer of {size} elements for merging."
        super().__init__(message)
        self.size = size


class WorkerStartError(PipelineError):
    def __init__(self, message: str | None = None, *, worker: str | None = None) -> None:
        if message is None:
            message = f"Failed to start worker {worker!r}."
        super().__init__(message)
        self.worker = worker


class RegionViolationError(PipelineError):
    """
    Raised when an access falls outside the region its holder owns, or when
    a partition leaves a gap or an overlap between regions.
    """

    def __init__(
        self,
        message: str,
        *,
        region: object | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.region = region
        self.index = index


class PipelineTimeoutError(PipelineError):
    def __init__(self, *, phase: str, timeout: float) -> None:
        super().__init__(f"{phase} phase did not finish within {timeout:g}s.")
        self.phase = phase
        self.timeout = timeout
