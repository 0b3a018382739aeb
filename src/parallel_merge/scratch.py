from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from parallel_merge.errors import ScratchAllocationError

logger = logging.getLogger(__name__)


@contextmanager
def scratch_buffer(size: int) -> Iterator[list[int]]:
    """
    Temporary merge storage of ``size`` elements, released on every exit path.

    Allocation failure is fatal and surfaces as ``ScratchAllocationError``.
    """
    if size < 0:
        raise ValueError("size must be >= 0")

    try:
        buf = [0] * size
    except MemoryError as exc:
        logger.error("scratch allocation of %d elements failed", size)
        raise ScratchAllocationError(size=size) from exc

    try:
        yield buf
    finally:
        buf.clear()
