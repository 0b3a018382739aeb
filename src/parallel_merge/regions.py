"""
Regions
=======
Index spans into a shared list and the tasks that carry them.

A Region grants its holder exclusive mutation rights over exactly its span
for the lifetime of the task. ``RegionView`` enforces that at runtime: any
read or write outside the span raises ``RegionViolationError``.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import TypeVar

from parallel_merge.errors import RegionViolationError

T = TypeVar("T")


@dataclass(frozen=True)
class Region:
    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(f"invalid region start={self.start} length={self.length}")

    @property
    def stop(self) -> int:
        """Exclusive end."""
        return self.start + self.length

    @property
    def end(self) -> int:
        """Inclusive end; ``start - 1`` for an empty region."""
        return self.start + self.length - 1

    def contains(self, index: int) -> bool:
        return self.start <= index < self.stop

    def overlaps(self, other: Region) -> bool:
        return self.start < other.stop and other.start < self.stop

    def indices(self) -> range:
        return range(self.start, self.stop)

    def view(self, data: MutableSequence[T]) -> RegionView:
        return RegionView(data, self)


def partition(n: int) -> tuple[Region, Region]:
    """Split ``n`` elements into contiguous (left, right) halves, left = floor(n/2)."""
    if n < 0:
        raise ValueError("n must be >= 0")

    left = Region(0, n // 2)
    right = Region(left.stop, n - left.length)
    check_partition(left, right, n)
    return left, right


def check_partition(left: Region, right: Region, n: int) -> None:
    if left.start != 0:
        raise RegionViolationError(f"left region starts at {left.start}, not 0", region=left)
    if left.stop != right.start:
        raise RegionViolationError(
            f"regions are not contiguous: left stops at {left.stop}, right starts at {right.start}",
            region=right,
        )
    if left.overlaps(right):
        raise RegionViolationError(f"regions overlap: {left} and {right}", region=right)
    if left.length + right.length != n:
        raise RegionViolationError(
            f"regions cover {left.length + right.length} elements, expected {n}",
            region=right,
        )


class RegionView(MutableSequence):
    """Absolute-indexed window onto ``data`` that only admits indices inside ``region``."""

    __slots__ = ("_data", "region")

    def __init__(self, data: MutableSequence[T], region: Region) -> None:
        if region.stop > len(data):
            raise RegionViolationError(
                f"{region} extends past the end of a sequence of length {len(data)}",
                region=region,
            )
        self._data = data
        self.region = region

    def _check(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"region views take integer indices, not {type(index).__name__}")
        if not self.region.contains(index):
            raise RegionViolationError(
                f"index {index} is outside {self.region}",
                region=self.region,
                index=index,
            )

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._data[index] = value

    def __delitem__(self, index: int) -> None:
        raise TypeError("region views have a fixed length")

    def insert(self, index: int, value: T) -> None:
        raise TypeError("region views have a fixed length")

    def __len__(self) -> int:
        return self.region.length

    def __iter__(self):
        for i in self.region.indices():
            yield self._data[i]

    def __repr__(self) -> str:
        return f"RegionView({self.region}, {list(self)!r})"


@dataclass(frozen=True)
class SortTask:
    """One region of ``sequence`` to sort in place, with ``scratch`` as merge space."""

    region: Region
    sequence: list[int]
    scratch: list[int]
    label: str


@dataclass(frozen=True)
class MergeTask:
    """Two internally sorted, adjacent regions of ``sequence`` to merge into ``output``."""

    left: Region
    right: Region
    sequence: list[int]
    output: list[int]

    @property
    def span(self) -> Region:
        return Region(self.left.start, self.left.length + self.right.length)
