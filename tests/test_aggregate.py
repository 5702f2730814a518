# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

from __future__ import annotations

import operator

import pytest

from solidcap import Aggregator, CapabilityDefinitionError, CapabilityNotImplementedError, aggregate
from tests.helpers import Disguised, English, Estonian, Greeter, Mute, Perimeter, Square, Triangle


def test_empty_sequence_returns_seed_unchanged():
    seed = object()

    def combine(acc, value):  # pragma: no cover - must not run
        raise AssertionError("combine called for an empty sequence")

    assert aggregate(Perimeter, [], seed=seed, combine=combine) is seed


def test_fold_follows_input_order():
    shapes = [Triangle(3, 4, 5), Square(1), Square(2)]

    result = aggregate(Perimeter, shapes, seed=(), combine=lambda acc, value: (*acc, value))

    assert result == (12, 4, 8)


def test_sum_over_mixed_variants():
    total = aggregate(Perimeter, [Square(1), Triangle(1, 1, 1)], seed=0.0, combine=operator.add)

    assert total == pytest.approx(7.0)


def test_adding_a_variant_changes_only_its_contribution():
    class Hexagon:
        @property
        def perimeter(self) -> float:
            return 6.0

    before = aggregate(Perimeter, [Square(1), Triangle(1, 2, 2)], seed=0.0, combine=operator.add)
    after = aggregate(Perimeter, [Square(1), Hexagon(), Triangle(1, 2, 2)], seed=0.0, combine=operator.add)

    assert after - before == pytest.approx(6.0)


def test_concrete_type_is_never_consulted():
    total = aggregate(Perimeter, [Disguised(), Square(1)], seed=0.0, combine=operator.add)

    assert total == pytest.approx(5.5)


def test_non_conforming_value_fails_before_combining():
    calls: list[float] = []

    def combine(acc: float, value: float) -> float:
        calls.append(value)
        return acc + value

    with pytest.raises(CapabilityNotImplementedError, match=r"positions \[1, 3\]"):
        aggregate(Perimeter, [Square(1), Mute(), Square(2), English()], seed=0.0, combine=combine)

    assert calls == []


def test_method_in_place_of_property_fails_before_combining():
    class Octagon:
        def perimeter(self) -> float:
            return 8.0

    calls = []

    with pytest.raises(CapabilityNotImplementedError, match=r"positions \[1\]"):
        aggregate(Perimeter, [Square(1), Octagon()], seed=0.0, combine=lambda acc, value: calls.append(value))

    assert calls == []


def test_method_capability_receives_arguments():
    greetings = aggregate(
        Greeter,
        [English(), Estonian()],
        seed=[],
        combine=lambda acc, value: [*acc, value],
        args=("Mari",),
    )

    assert greetings == ["Hello, Mari", "Tere, Mari"]

    keyword = aggregate(Greeter, [Estonian()], seed="", combine=operator.add, kwargs={"name": "Jaan"})
    assert keyword == "Tere, Jaan"


def test_generators_are_accepted():
    total = aggregate(Perimeter, (Square(side) for side in (1, 2, 3)), seed=0.0, combine=operator.add)

    assert total == pytest.approx(24.0)


def test_aggregate_requires_a_capability():
    with pytest.raises(CapabilityDefinitionError):
        aggregate(Square, [Square(1)], seed=0.0, combine=operator.add)


def test_aggregator_is_reusable():
    total_perimeter = Aggregator(Perimeter, 0.0, operator.add)
    shapes = [Square(1), Square(2)]

    assert total_perimeter(shapes) == pytest.approx(12.0)
    assert total_perimeter(shapes) == pytest.approx(12.0)
    assert total_perimeter([]) == 0.0


def test_aggregator_forwards_arguments():
    joined = Aggregator(Greeter, "", lambda acc, value: f"{acc}{value};")

    assert joined([English(), Estonian()], "Aino") == "Hello, Aino;Tere, Aino;"


def test_aggregator_validates_capability():
    with pytest.raises(CapabilityDefinitionError):
        Aggregator(Square, 0.0, operator.add)
