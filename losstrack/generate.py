#!/usr/bin/env python3
"""Fill a store with random losses, e.g. to time `losses summarize` on a big file."""
import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from losstrack.config import configure_logging
from losstrack.domains import losses as losses_domain
from losstrack.errors import LossesError
from losstrack.models import Cause

DEFAULT_COUNT = 100_000


def generate(path: Path, count: int = DEFAULT_COUNT, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    causes = list(Cause)
    for _ in range(count):
        losses_domain.add(rng.choice(causes), path)
    return count


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="losses-generate", description=__doc__)
    parser.add_argument("path", type=Path, help="Store file to append to")
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT, help="Number of records")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    configure_logging(args.verbose)

    try:
        n = generate(args.path, args.count, random.Random(args.seed))
    except LossesError as ex:
        print(f"Error while adding to {args.path}: {ex}", file=sys.stderr)
        return 1
    print(f"✔ appended {n} random records to {args.path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
