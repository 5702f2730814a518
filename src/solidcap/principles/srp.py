# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Single Responsibility Principle.

``NaivePerson`` stores a person, formats the phone number and prints itself.
The corrected version gives each of those jobs its own class.
"""

from __future__ import annotations

from typing import TextIO

from pydantic.dataclasses import dataclass


# -- naive -------------------------------------------------------------------


@dataclass(frozen=True)
class NaivePerson:
    name: str
    phone_number: str
    phone_number_code: str

    def full_phone_number(self) -> str:
        return self.phone_number_code + self.phone_number

    def print_info(self, file: TextIO | None = None) -> None:
        print(f"Name - {self.name}", file=file)
        print(f"Phone number - {self.full_phone_number()}", file=file)


# -- correct -----------------------------------------------------------------


@dataclass(frozen=True)
class PhoneNumber:
    number: str
    code: str

    def full_number(self) -> str:
        """Dialing code followed by the subscriber number."""
        return self.code + self.number


@dataclass(frozen=True)
class Person:
    name: str
    phone_number: PhoneNumber


class PersonInfoPrinter:
    """Renders a :class:`Person` as console lines."""

    def lines(self, person: Person) -> list[str]:
        return [
            f"Name - {person.name}",
            f"Phone number - {person.phone_number.full_number()}",
        ]

    def print_info(self, person: Person, file: TextIO | None = None) -> None:
        for line in self.lines(person):
            print(line, file=file)


def demo(file: TextIO | None = None) -> None:
    NaivePerson(name="Bad SRP", phone_number="53726678", phone_number_code="+372").print_info(file)

    person = Person(name="Good SRP", phone_number=PhoneNumber(number="53726678", code="+372"))
    PersonInfoPrinter().print_info(person, file)


__all__ = ["NaivePerson", "Person", "PersonInfoPrinter", "PhoneNumber", "demo"]
