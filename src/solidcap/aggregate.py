# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Fold a capability operation over a sequence of values.

The aggregator only ever talks to values through their capability: it looks
the operation up by name and combines the results in input order.  New
variants therefore need no changes here, and the aggregator never branches on
a value's concrete type.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .capability import CapabilityNotImplementedError, invoke, provides, require_spec


T = TypeVar("T")
R = TypeVar("R")


def aggregate(
    operation: type,
    values: Iterable[Any],
    *,
    seed: T,
    combine: Callable[[T, R], T],
    args: tuple[Any, ...] = (),
    kwargs: Mapping[str, Any] | None = None,
) -> T:
    """Left-fold *operation* over *values* starting from *seed*.

    Each value contributes ``invoke(value, operation, *args, **kwargs)`` and
    the accumulator becomes ``combine(accumulator, contribution)``.

    Every value is checked before anything is combined, so a non-conforming
    value fails the call without a partial fold.  An empty sequence returns
    *seed* unchanged.

    Raises:
        CapabilityNotImplementedError: naming the index of each value that does
            not provide the operation.
    """
    spec = require_spec(operation)
    items = tuple(values)

    missing = [index for index, value in enumerate(items) if not provides(value, spec)]
    if missing:
        raise CapabilityNotImplementedError(
            f"Values at positions {missing} do not implement {spec.name}.{spec.operation}"
        )

    call_kwargs = dict(kwargs or {})
    accumulator = seed
    for value in items:
        accumulator = combine(accumulator, invoke(value, operation, *args, **call_kwargs))
    return accumulator


@dataclass(frozen=True, slots=True)
class Aggregator(Generic[T, R]):
    """Reusable aggregation over one capability.

    Holds configuration only; every call starts again from ``seed``.
    """

    capability: type
    seed: T
    combine: Callable[[T, R], T]

    def __post_init__(self) -> None:
        require_spec(self.capability)

    def __call__(self, values: Iterable[Any], *args: Any, **kwargs: Any) -> T:
        return aggregate(self.capability, values, seed=self.seed, combine=self.combine, args=args, kwargs=kwargs)


__all__ = ["Aggregator", "aggregate"]
