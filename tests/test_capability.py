# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

from __future__ import annotations

from typing import Protocol

import pytest

from solidcap import (
    CapabilityDefinitionError,
    CapabilityNotImplementedError,
    capability,
    conforms,
    define_capability,
    extract_capability_spec,
    invoke,
)
from tests.helpers import Disguised, English, Greeter, Mute, Perimeter, Square


def test_decorator_records_property_operation():
    @capability
    class Area(Protocol):
        """Reports an area."""

        @property
        def area(self) -> float: ...

    spec = extract_capability_spec(Area)

    assert spec is not None
    assert spec.name == "Area"
    assert spec.operation == "area"
    assert spec.kind == "property"
    assert spec.description == "Reports an area."


def test_decorator_accepts_options():
    @capability(name="Reservation", description="Book a stay")
    class Bookable(Protocol):
        def book(self) -> str: ...

    spec = extract_capability_spec(Bookable)

    assert spec.name == "Reservation"
    assert spec.kind == "method"
    assert spec.description == "Book a stay"
    assert list(spec.signature.parameters) == ["self"]


def test_bundled_operations_are_rejected():
    with pytest.raises(CapabilityDefinitionError, match="exactly one operation"):

        @capability
        class Apartment(Protocol):
            def book(self) -> str: ...

            def cancel_reservation(self) -> str: ...


def test_empty_protocol_is_rejected():
    with pytest.raises(CapabilityDefinitionError, match="found none"):

        @capability
        class Nothing(Protocol):
            pass


def test_data_members_are_rejected():
    with pytest.raises(CapabilityDefinitionError, match="data members"):

        @capability
        class Named(Protocol):
            name: str


def test_non_protocol_is_rejected():
    with pytest.raises(CapabilityDefinitionError, match="typing.Protocol"):

        @capability
        class Plain:
            def book(self) -> str:
                return "booked"


def test_extending_a_capability_is_rejected():
    @capability
    class Bookable(Protocol):
        def book(self) -> str: ...

    with pytest.raises(CapabilityDefinitionError, match="extends capability"):

        @capability
        class BookableAndCancelable(Bookable, Protocol):
            def cancel_reservation(self) -> str: ...


def test_define_capability_from_stub():
    def save(self, text: str) -> str:
        """Persist text."""
        ...

    Storage = define_capability(save, name="Storage")
    spec = extract_capability_spec(Storage)

    assert spec.name == "Storage"
    assert spec.operation == "save"
    assert spec.kind == "method"
    assert spec.description == "Persist text."
    assert list(spec.signature.parameters) == ["self", "text"]

    class Disk:
        def save(self, text: str) -> str:
            return text

    assert isinstance(Disk(), Storage)
    assert not isinstance(Mute(), Storage)


def test_define_capability_derives_name():
    def cancel_reservation(self) -> str: ...

    Cancelable = define_capability(cancel_reservation)

    assert Cancelable.__name__ == "CancelReservation"
    assert extract_capability_spec(Cancelable).operation == "cancel_reservation"


def test_define_capability_from_property():
    def weight(self) -> float: ...

    Weight = define_capability(property(weight), name="Weight")

    assert extract_capability_spec(Weight).kind == "property"


@pytest.mark.parametrize(
    "operation",
    [
        lambda self: None,
        "save",
    ],
)
def test_define_capability_rejects_bad_operations(operation):
    with pytest.raises(CapabilityDefinitionError):
        define_capability(operation)


def test_define_capability_requires_self():
    def save(text: str) -> None: ...

    with pytest.raises(CapabilityDefinitionError, match="'self'"):
        define_capability(save)


def test_extract_spec_ignores_plain_objects():
    assert extract_capability_spec(Square) is None
    assert extract_capability_spec("Perimeter") is None


def test_conforms_checks_types_and_values():
    assert conforms(Square, Perimeter)
    assert conforms(Square(2), Perimeter)
    assert not conforms(Mute, Perimeter)
    assert not conforms(English(), Perimeter)


def test_conforms_requires_the_declared_operation_form():
    class Octagon:
        def perimeter(self) -> float:
            return 8.0

    class Statue:
        @property
        def greet(self) -> str:
            return "..."

    assert not conforms(Octagon, Perimeter)
    assert not conforms(Octagon(), Perimeter)
    assert not conforms(Statue, Greeter)
    assert not conforms(Statue(), Greeter)


def test_conforms_checks_method_arity():
    class Silent:
        def greet(self) -> str:
            return ""

    class Keyword:
        def greet(self, *, name: str) -> str:
            return name

    assert not conforms(Silent, Greeter)
    assert not conforms(Silent(), Greeter)
    assert not conforms(Keyword, Greeter)


def test_conforms_accepts_instance_level_callables():
    value = Mute()
    value.greet = lambda name: f"Psst, {name}"

    assert conforms(value, Greeter)
    assert not conforms(Mute, Greeter)
    assert invoke(value, Greeter, "Mari") == "Psst, Mari"


def test_conforms_requires_a_capability():
    with pytest.raises(CapabilityDefinitionError):
        conforms(Square(1), Square)


def test_invoke_reads_properties_and_calls_methods():
    assert invoke(Square(2), Perimeter) == 8
    assert invoke(English(), Greeter, "Mari") == "Hello, Mari"
    assert invoke(English(), Greeter, name="Jaan") == "Hello, Jaan"


def test_invoke_rejects_arguments_for_properties():
    with pytest.raises(TypeError):
        invoke(Square(2), Perimeter, 1)


def test_invoke_rejects_non_conforming_values():
    with pytest.raises(CapabilityNotImplementedError, match="Greeter.greet"):
        invoke(Mute(), Greeter, "Mari")


def test_invoke_ignores_reported_class():
    value = Disguised()

    assert isinstance(value, int)
    assert invoke(value, Perimeter) == 1.5
