# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Run the SOLID walkthrough from the command line.

Usage:
    python -m solidcap            # every principle
    python -m solidcap ocp isp    # a subset, in the given order
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .principles import PRINCIPLES, catalog, walkthrough
from .utils import get_logger, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="solidcap", description="SOLID principles walkthrough")
    parser.add_argument(
        "principles",
        nargs="*",
        metavar="PRINCIPLE",
        help=f"principles to demo ({', '.join(PRINCIPLES)}); defaults to all",
    )
    parser.add_argument("--log-level", default=None, help="log level (defaults to SOLIDCAP_LOG_LEVEL)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    unknown = [name for name in args.principles if name not in PRINCIPLES]
    if unknown:
        parser.error(f"unknown principle(s): {', '.join(unknown)}")
    setup_logger(level=args.log_level, force=args.log_level is not None)

    catalog.validate()
    get_logger("solidcap.cli").debug(
        "walkthrough starting", extra={"context": {"implementations": len(catalog.implementations)}}
    )
    walkthrough(args.principles or None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
