"""
Benchmark: two-way parallel merge sort against the sequential engine and
the built-in sort, over a few input shapes. Plots with matplotlib.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor

import matplotlib.pyplot as plt

from parallel_merge.config import BENCH_REPS, BENCH_SIZES
from parallel_merge.engine import merge_sort
from parallel_merge.pipeline import sort

logger = logging.getLogger(__name__)

SortFn = Callable[[list[int]], object]


def sequential_sort(arr: list[int]) -> list[int]:
    if len(arr) > 1:
        merge_sort(arr, 0, len(arr) - 1, [0] * len(arr))
    return arr


def builtin_sort(arr: list[int]) -> list[int]:
    arr.sort()
    return arr


SORTERS: list[tuple[str, SortFn]] = [
    ("two_way_parallel", sort),
    ("sequential_merge", sequential_sort),
    (".sort()", builtin_sort),
]


def random_values(n: int, lo: int = -10_000_000, hi: int = 10_000_000) -> list[int]:
    return [random.randint(lo, hi) for _ in range(n)]


def trend_with_jumps(n: int, jump_prob: float = 0.05) -> list[int]:
    arr = []
    value = 0
    for _ in range(n):
        if random.random() < jump_prob:
            value += random.randint(-10, 10)
        else:
            value += random.randint(0, 1)
        arr.append(value)
    return arr


def descending(n: int) -> list[int]:
    return list(range(n, 0, -1))


def many_duplicates(n: int, distinct_values: int = 3) -> list[int]:
    base_values = random.sample(range(-20, 21), k=distinct_values)
    return [random.choice(base_values) for _ in range(n)]


GENERATORS: list[tuple[str, Callable[[int], list[int]]]] = [
    ("Random data", random_values),
    ("Data with jumps", trend_with_jumps),
    ("Worst-case (descending) data", descending),
    ("Many duplicates data", many_duplicates),
]


def measure(sort_fn: SortFn, base_arr: list[int], reps: int = BENCH_REPS) -> float:
    """Best wall time of ``reps`` runs, each on a fresh copy of ``base_arr``."""
    if len(base_arr) <= 1:
        return 0.0
    timings = []
    for _ in range(reps):
        arr = base_arr.copy()
        t0 = time.perf_counter()
        sort_fn(arr)
        timings.append(time.perf_counter() - t0)
    return min(timings)


def bench_one_n(args: tuple[int, list[int]]) -> tuple[int, list[float]]:
    n, base_arr = args
    return n, [measure(fn, base_arr) for _, fn in SORTERS]


def run_bench(tasks: Sequence[tuple[int, list[int]]]) -> list[list[float]]:
    """Times per sorter, each a list aligned with ``tasks``."""
    series: list[list[float]] = [[] for _ in SORTERS]

    with ProcessPoolExecutor() as executor:
        for n, times in executor.map(bench_one_n, tasks):
            logger.info("n=%d: %s", n, ", ".join(f"{t:.4f}s" for t in times))
            for column, t in zip(series, times):
                column.append(t)

    return series


def plot_results(sizes: Sequence[int], series: list[tuple[str, list[float]]], title: str) -> None:
    """One line per sorter: ``series`` pairs a label with times aligned to ``sizes``."""
    plt.figure(figsize=(10, 6))
    for label, values in series:
        plt.plot(sizes, values, label=label)

    plt.title(title)
    plt.xlabel("Array size")
    plt.ylabel("Time, sec")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    plt.show()


def main(sizes: Sequence[int] = BENCH_SIZES) -> None:
    sizes = list(sizes)
    for title, generate in GENERATORS:
        logger.info("benchmarking: %s", title)
        tasks = [(n, generate(n)) for n in sizes]
        times = run_bench(tasks)
        plot_results(
            sizes,
            [(label, column) for (label, _), column in zip(SORTERS, times)],
            f"{title} sorting comparison",
        )
