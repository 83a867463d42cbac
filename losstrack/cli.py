#!/usr/bin/env python3
"""
losstrack CLI entry point
Records why chess games were lost and summarizes the last 30 days.
"""
import argparse
import sys
from typing import List, Optional

from losstrack.config import configure_logging, resolve_store_path
from losstrack.domains import losses as losses_domain
from losstrack.errors import LossesError
from losstrack.models import Cause
from losstrack.summary import summarize

EXIT_ADD_FAILED = 1
EXIT_SUMMARIZE_FAILED = 2

# ---------------- Commands -----------------

def cmd_add(args: argparse.Namespace) -> int:
    try:
        rec = losses_domain.add(Cause(args.cause), args.file)
    except LossesError as ex:
        print(f"Error while adding to {args.file}: {ex}", file=sys.stderr)
        return EXIT_ADD_FAILED
    print(f"✔ recorded loss: {rec.cause.value} @ {rec.occurred_at.isoformat()}")
    return 0


def cmd_summarize(args: argparse.Namespace) -> int:
    try:
        summarize(args.file)
    except LossesError as ex:
        print(f"Error while summarizing {args.file}: {ex}", file=sys.stderr)
        return EXIT_SUMMARIZE_FAILED
    return 0

# ---------------- Parser -----------------

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="losses",
        description="Keeps and evaluates records of why chess games were lost",
    )
    parser.add_argument("--file", help="Store file (default: $LOSSES_FILE or the user data dir)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Adds a result to the record")
    add_parser.add_argument("cause", choices=[c.value for c in Cause], help="Cause for the lost game")
    add_parser.set_defaults(handler=cmd_add)

    summarize_parser = subparsers.add_parser("summarize", help="Summarizes recorded results")
    summarize_parser.set_defaults(handler=cmd_summarize)

    return parser

# ---------------- Main -----------------

def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    configure_logging(args.verbose)
    args.file = resolve_store_path(args.file)
    return args.handler(args)

if __name__ == '__main__':
    sys.exit(main())
