from __future__ import annotations

import argparse
import logging

from parallel_merge.config import REFERENCE_SEQUENCE
from parallel_merge.pipeline import sort


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="parallel-merge",
        description="Sort integers with a two-way parallel merge sort.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="integers to sort (default: the built-in reference array)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="seconds allowed per phase")
    parser.add_argument("--bench", action="store_true", help="run the benchmark and plot results")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(threadName)s %(name)s %(levelname)s: %(message)s",
    )

    if args.bench:
        from parallel_merge import bench

        logging.getLogger("parallel_merge.bench").setLevel(logging.INFO)
        bench.main()
        return 0

    values = args.values or list(REFERENCE_SEQUENCE)
    print(" ".join(str(v) for v in sort(values, timeout=args.timeout)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
