# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Define a capability, register variants, and aggregate over them.

Demonstrates:
- Declaring a single-operation capability with @capability
- Registering variants ambiently (binding + @implements) and explicitly (implement)
- Folding the capability with aggregate() and a reusable Aggregator

Usage:
    python examples/custom_capability.py
"""

from __future__ import annotations

import operator
from typing import Protocol

from solidcap import Aggregator, CapabilityRegistry, aggregate, capability, implements
from solidcap.utils import setup_logger


setup_logger(level="DEBUG", use_color=False)


@capability
class Weight(Protocol):
    """Cargo that knows how heavy it is."""

    @property
    def kilograms(self) -> float: ...


registry = CapabilityRegistry("cargo")


with registry.binding():

    @implements(Weight)
    class Crate:
        def __init__(self, kilograms: float) -> None:
            self._kilograms = kilograms

        @property
        def kilograms(self) -> float:
            return self._kilograms


class Barrel:
    def __init__(self, litres: float, density: float = 0.9) -> None:
        self.litres = litres
        self.density = density


registry.implement(Barrel, Weight, lambda self: self.litres * self.density)
registry.seal()


def main() -> None:
    cargo = [Crate(120.0), Barrel(200.0), Crate(35.5)]

    total = aggregate(Weight, cargo, seed=0.0, combine=operator.add)
    print(f"Total weight - {total:.1f} kg")

    heaviest = Aggregator(Weight, 0.0, max)
    print(f"Heaviest item - {heaviest(cargo):.1f} kg")

    print(f"Variants - {[variant.__name__ for variant in registry.variants_for(Weight)]}")


if __name__ == "__main__":
    main()
