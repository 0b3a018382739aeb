"""
Two-way parallel merge sort
===========================
Partition the input into two halves, sort each half on its own thread,
then merge both halves on a third thread.

The orchestrator blocks at exactly two barriers: once for both sort
workers, once for the merge worker. Nothing starts before its inputs are
ready, and the merge never observes a half that is still being sorted.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from parallel_merge.config import MERGE_WORKERS, SORT_WORKERS, resolve_timeout
from parallel_merge.errors import PipelineTimeoutError, WorkerStartError
from parallel_merge.regions import MergeTask, Region, SortTask, partition
from parallel_merge.workers import merge_coordinator, sort_worker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    output: list[int]
    left: Region
    right: Region
    sort_seconds: float
    merge_seconds: float


class Orchestrator:
    """
    Runs one sort over an owned copy of ``sequence``.

    Usage:
        result = Orchestrator([3, 1, 2]).run()
        result.output  # [1, 2, 3]

    The sort phase runs on a two-thread pool and the merge on a separate
    one-thread pool. Pool threads start lazily, so when the first sort task
    finishes before the second is submitted both sorts can run on the same
    thread. Only the barriers are guaranteed, not three distinct threads.
    """

    def __init__(self, sequence: Iterable[int], timeout: float | None = None):
        self.sequence: list[int] = list(sequence)
        self.timeout = resolve_timeout(timeout)

    def run(self) -> PipelineResult:
        n = len(self.sequence)
        work = self.sequence[:]
        output = [0] * n

        left, right = partition(n)
        logger.debug("partitioned %d values into %s and %s", n, left, right)

        sort_tasks = [
            SortTask(left, work, output, "sort-left"),
            SortTask(right, work, output, "sort-right"),
        ]

        t0 = time.perf_counter()
        self._run_phase(
            "sort",
            sort_worker,
            sort_tasks,
            max_workers=SORT_WORKERS,
        )
        t1 = time.perf_counter()

        merge_task = MergeTask(left, right, work, output)
        self._run_phase(
            "merge",
            merge_coordinator,
            [merge_task],
            max_workers=MERGE_WORKERS,
        )
        t2 = time.perf_counter()

        logger.debug("sorted %d values (sort %.6fs, merge %.6fs)", n, t1 - t0, t2 - t1)
        return PipelineResult(output, left, right, t1 - t0, t2 - t1)

    def _run_phase(
        self,
        phase: str,
        fn: Callable[[SortTask | MergeTask], None],
        tasks: Sequence[SortTask | MergeTask],
        *,
        max_workers: int,
    ) -> None:
        pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=phase)
        timed_out = False
        try:
            futures: list[Future] = []
            for task in tasks:
                try:
                    futures.append(pool.submit(fn, task))
                except RuntimeError as exc:
                    raise WorkerStartError(worker=_label(task)) from exc
            logger.debug("%s: dispatched %d worker(s)", phase, len(futures))

            done, not_done = wait(futures, timeout=self.timeout, return_when=FIRST_EXCEPTION)
            for f in done:
                f.result()
            if not_done:
                timed_out = True
                raise PipelineTimeoutError(phase=phase, timeout=self.timeout)
            logger.debug("%s: barrier passed", phase)
        finally:
            pool.shutdown(wait=not timed_out, cancel_futures=True)


def _label(task: SortTask | MergeTask) -> str:
    return task.label if isinstance(task, SortTask) else "merge"


def sort(sequence: Iterable[int], *, timeout: float | None = None) -> list[int]:
    """Return a new list with the values of ``sequence`` in ascending order."""
    return Orchestrator(sequence, timeout=timeout).run().output
