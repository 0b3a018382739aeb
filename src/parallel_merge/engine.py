from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def merge(
    arr: Sequence[T],
    start: int,
    mid: int,
    end: int,
    scratch: MutableSequence[T],
) -> None:
    """Merge sorted ``arr[start..mid]`` and ``arr[mid+1..end]`` into ``scratch[start..end]``.

    Bounds are inclusive. On equal elements the right-hand one is written
    first, so the merge is not stable across the two halves.
    """
    i, j, k = start, mid + 1, start

    while i <= mid and j <= end:
        if arr[i] < arr[j]:
            scratch[k] = arr[i]
            i += 1
        else:
            scratch[k] = arr[j]
            j += 1
        k += 1

    while i <= mid:
        scratch[k] = arr[i]
        i += 1
        k += 1

    while j <= end:
        scratch[k] = arr[j]
        j += 1
        k += 1


def merge_sort(
    arr: MutableSequence[T],
    start: int,
    end: int,
    scratch: MutableSequence[T],
) -> None:
    """Sort ``arr[start..end]`` in place, using ``scratch`` over the same span."""
    if start >= end:
        return

    mid = start + (end - start) // 2
    merge_sort(arr, start, mid, scratch)
    merge_sort(arr, mid + 1, end, scratch)
    merge(arr, start, mid, end, scratch)

    for i in range(start, end + 1):
        arr[i] = scratch[i]
