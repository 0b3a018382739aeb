"""
Sort and merge workers.

Each worker receives a typed task and runs to completion. Sort workers only
touch their own region of the shared sequence and of the scratch list; two
of them on the regions from ``partition`` never share an index, so no lock
is taken anywhere.
"""

from __future__ import annotations

import logging

from parallel_merge.engine import merge, merge_sort
from parallel_merge.regions import MergeTask, SortTask
from parallel_merge.scratch import scratch_buffer

logger = logging.getLogger(__name__)


def sort_worker(task: SortTask) -> None:
    region = task.region
    logger.debug("%s: sorting indices [%d, %d]", task.label, region.start, region.end)

    merge_sort(
        region.view(task.sequence),
        region.start,
        region.end,
        region.view(task.scratch),
    )

    logger.debug("%s: done", task.label)


def merge_coordinator(task: MergeTask) -> None:
    """Merge both sorted regions of ``task.sequence`` into ``task.output``."""
    span = task.span
    start = span.start
    mid = task.left.end
    end = span.end

    source = span.view(task.sequence)
    output = span.view(task.output)

    with scratch_buffer(end + 1) as temp:
        merge(source, start, mid, end, temp)
        for i in range(start, end + 1):
            output[i] = temp[i]

    logger.debug("merge: wrote %d values", span.length)
