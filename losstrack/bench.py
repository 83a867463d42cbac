#!/usr/bin/env python3
"""Time `losses summarize` over a big store built by `losses-generate`."""
import argparse
import io
import random
import sys
import timeit
from pathlib import Path
from typing import List, Optional

from losstrack.config import configure_logging
from losstrack.errors import LossesError
from losstrack.generate import DEFAULT_COUNT, generate
from losstrack.summary import summarize


def bench_summarize(path: Path, number: int = 5) -> float:
    """Best wall-clock seconds for one summarize of ``path`` over ``number`` runs."""
    timer = timeit.Timer(lambda: summarize(path, out=io.StringIO()))
    return min(timer.repeat(repeat=number, number=1))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="losses-bench", description=__doc__)
    parser.add_argument("path", type=Path, help="Store file to summarize (default: big.csv)", nargs="?",
                        default=Path("big.csv"))
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT,
                        help="Records to generate when the store does not exist yet")
    parser.add_argument("-r", "--repeat", type=int, default=5, help="Timed runs")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    if args.repeat < 1:
        parser.error("--repeat must be at least 1")
    configure_logging(False)

    try:
        if not args.path.exists():
            print(f"generating {args.count} records in {args.path} ...")
            generate(args.path, args.count, random.Random(args.seed))
        best = bench_summarize(args.path, args.repeat)
    except LossesError as ex:
        print(f"Error while benchmarking {args.path}: {ex}", file=sys.stderr)
        return 1
    print(f"summarize {args.path}: best of {args.repeat}: {best * 1000:.1f} ms")
    return 0

if __name__ == "__main__":
    sys.exit(main())
