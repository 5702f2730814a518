# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Naive and corrected examples for each SOLID principle."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import time
from typing import Final, TextIO

from ..utils import get_logger
from . import dip, isp, lsp, ocp, srp
from .catalog import catalog


PRINCIPLES: Final[dict[str, tuple[str, Callable[[TextIO | None], None]]]] = {
    "srp": ("Single Responsibility Principle", srp.demo),
    "ocp": ("Open/Closed Principle", ocp.demo),
    "lsp": ("Liskov Substitution Principle", lsp.demo),
    "isp": ("Interface Segregation Principle", isp.demo),
    "dip": ("Dependency Inversion Principle", dip.demo),
}

_logger = get_logger("solidcap.walkthrough")


def walkthrough(principles: Iterable[str] | None = None, *, file: TextIO | None = None) -> None:
    """Run the demos for *principles* (all of them by default) in order."""
    selected = list(principles) if principles is not None else list(PRINCIPLES)
    unknown = [key for key in selected if key not in PRINCIPLES]
    if unknown:
        raise ValueError(f"Unknown principle(s): {', '.join(unknown)}")

    for key in selected:
        title, demo = PRINCIPLES[key]
        print(f"== {title} ({key.upper()})", file=file)
        started = time.perf_counter()
        demo(file)
        _logger.debug(
            "principle demo finished",
            extra={
                "context": {"principle": key},
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )


__all__ = ["PRINCIPLES", "catalog", "dip", "isp", "lsp", "ocp", "srp", "walkthrough"]
