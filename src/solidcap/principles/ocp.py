# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Open/Closed Principle.

``NaiveAreaSumCalculator`` has to be edited for every new shape and silently
skips shapes it does not know.  ``AreaSumCalculator`` folds over the
:class:`Area` capability and never changes when shapes are added.
"""

from __future__ import annotations

import math
import operator
from typing import Annotated, Any, Protocol, TextIO

from pydantic import Field
from pydantic.dataclasses import dataclass

from ..aggregate import Aggregator
from ..capability import capability
from ..registry import implements
from .catalog import catalog


# -- naive -------------------------------------------------------------------


@dataclass(frozen=True)
class NaiveRectangle:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class NaiveCircle:
    radius: float

    @property
    def area(self) -> float:
        return 2 * math.pi * self.radius * self.radius


class NaiveAreaSumCalculator:
    @classmethod
    def calculate(cls, *items: Any) -> float:
        total = 0.0
        for item in items:
            if isinstance(item, NaiveRectangle):
                total += item.area
            elif isinstance(item, NaiveCircle):
                total += item.area
        return total


# -- correct -----------------------------------------------------------------


@capability
class Area(Protocol):
    """Shapes that can report their area."""

    @property
    def area(self) -> float: ...


with catalog.binding():

    @implements(Area)
    @dataclass(frozen=True)
    class Rectangle:
        width: Annotated[float, Field(ge=0)]
        height: Annotated[float, Field(ge=0)]

        @property
        def area(self) -> float:
            return self.width * self.height

    @implements(Area)
    @dataclass(frozen=True)
    class Circle:
        radius: Annotated[float, Field(ge=0)]

        @property
        def area(self) -> float:
            # 2*pi*r**2 rather than pi*r**2; the walkthrough totals depend on it.
            return 2 * math.pi * self.radius * self.radius


sum_areas: Aggregator[float, float] = Aggregator(Area, 0.0, operator.add)


class AreaSumCalculator:
    @classmethod
    def calculate(cls, *areas: Area) -> float:
        return sum_areas(areas)


def demo(file: TextIO | None = None) -> None:
    naive_sum = NaiveAreaSumCalculator.calculate(NaiveRectangle(width=25.3, height=12.43), NaiveCircle(radius=10.0))
    print(f"Naive area sum - {naive_sum:.3f}", file=file)

    area_sum = AreaSumCalculator.calculate(Rectangle(width=25.3, height=12.43), Circle(radius=10.0))
    print(f"Area sum - {area_sum:.3f}", file=file)


__all__ = [
    "Area",
    "AreaSumCalculator",
    "Circle",
    "NaiveAreaSumCalculator",
    "NaiveCircle",
    "NaiveRectangle",
    "Rectangle",
    "demo",
    "sum_areas",
]
