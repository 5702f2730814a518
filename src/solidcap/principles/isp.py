# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Interface Segregation Principle.

``NaiveApartment`` forces every apartment to support cancellation, so the
Airbnb variant can only fail at call time.  Splitting the interface into
:class:`Bookable` and :class:`Cancelable` lets ``AirbnbApartment`` simply not
have a ``cancel_reservation`` attribute.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, TextIO

from ..capability import capability
from ..registry import implements
from .catalog import catalog


# -- naive -------------------------------------------------------------------


class NaiveApartment(ABC):
    @abstractmethod
    def book(self) -> str: ...

    @abstractmethod
    def cancel_reservation(self) -> str: ...


class NaiveAirbnbApartment(NaiveApartment):
    def book(self) -> str:
        return "You have booked apartment at Airbnb"

    def cancel_reservation(self) -> str:
        raise AssertionError("You can't cancel reservation at Airbnb")


# -- correct -----------------------------------------------------------------


@capability
class Bookable(Protocol):
    """Something that can be reserved."""

    def book(self) -> str: ...


@capability
class Cancelable(Protocol):
    """A reservation that can be withdrawn."""

    def cancel_reservation(self) -> str: ...


with catalog.binding():

    @implements(Bookable)
    class AirbnbApartment:
        def book(self) -> str:
            return "You have booked apartment at Airbnb"

    @implements(Bookable, Cancelable)
    class HotelNumber:
        def book(self) -> str:
            return "You have booked number at Hotel"

        def cancel_reservation(self) -> str:
            return "You have canceled reservation at Hotel"


def demo(file: TextIO | None = None) -> None:
    naive = NaiveAirbnbApartment()
    print(naive.book(), file=file)
    try:
        naive.cancel_reservation()
    except AssertionError as exc:
        print(f"NaiveAirbnbApartment.cancel_reservation failed - {exc}", file=file)

    print(AirbnbApartment().book(), file=file)
    hotel = HotelNumber()
    print(hotel.book(), file=file)
    print(hotel.cancel_reservation(), file=file)


__all__ = [
    "AirbnbApartment",
    "Bookable",
    "Cancelable",
    "HotelNumber",
    "NaiveAirbnbApartment",
    "NaiveApartment",
    "demo",
]
