# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Shared capabilities and variants for registry and aggregate tests."""

from __future__ import annotations

from typing import Protocol

from solidcap import capability


@capability
class Perimeter(Protocol):
    """Shapes that can report their perimeter."""

    @property
    def perimeter(self) -> float: ...


@capability
class Greeter(Protocol):
    def greet(self, name: str) -> str: ...


class Square:
    def __init__(self, side: float) -> None:
        self.side = side

    @property
    def perimeter(self) -> float:
        return 4 * self.side


class Triangle:
    def __init__(self, a: float, b: float, c: float) -> None:
        self.sides = (a, b, c)

    @property
    def perimeter(self) -> float:
        return sum(self.sides)


class English:
    def greet(self, name: str) -> str:
        return f"Hello, {name}"


class Estonian:
    def greet(self, name: str) -> str:
        return f"Tere, {name}"


class Mute:
    """Implements nothing."""


class Disguised:
    """Reports a misleading ``__class__`` but still provides a perimeter."""

    @property
    def __class__(self):  # type: ignore[override]
        return int

    @property
    def perimeter(self) -> float:
        return 1.5
