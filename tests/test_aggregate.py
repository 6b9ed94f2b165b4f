# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

from __future__ import annotations

import inspect
import math

import pytest

from openmeasure import MAX, MIN, AggregateResult, Aggregator, Circle, MeasureError, Reduction, Registry, Square
from openmeasure import aggregate as aggregate_module
from openmeasure.computable import Rectangle, Triangle
from tests.helpers import Constant, Hexagon


def test_square_and_circle_total(registry: Registry) -> None:
    result = Aggregator().total(registry)

    assert result.value == pytest.approx(100 + 78.53981633974483)
    assert result.count == 2
    assert result.reduction == "sum"


def test_total_matches_independent_sum() -> None:
    shapes = [Square(1.5), Rectangle(2, 7), Circle(0.3), Triangle(9, 2), Circle(4)]
    registry = Registry(shapes)

    assert Aggregator().total(registry).value == pytest.approx(sum(shape.measure() for shape in shapes))


def test_empty_registry_yields_identity() -> None:
    assert Aggregator().total(Registry()) == AggregateResult(value=0.0, count=0, reduction="sum")
    assert Aggregator(MIN).total(Registry()).value == 0.0


def test_new_variant_participates_without_changes() -> None:
    registry = Registry([Square(2), Hexagon(1)])

    result = Aggregator().total(registry)

    assert result.value == pytest.approx(4 + 3 * math.sqrt(3) / 2)
    assert result.count == 2


def test_aggregator_does_not_inspect_variant_types() -> None:
    source = inspect.getsource(aggregate_module)
    for name in ("isinstance", "type(", "Square", "Circle", ".kind"):
        assert name not in source


def test_total_is_recomputed_each_call(registry: Registry) -> None:
    aggregator = Aggregator()
    before = aggregator.total(registry)
    registry.add(Square(1))
    after = aggregator.total(registry)

    assert after.count == before.count + 1
    assert after.value == pytest.approx(before.value + 1)


def test_total_accepts_snapshot(registry: Registry) -> None:
    assert Aggregator().total(registry.snapshot()) == Aggregator().total(registry)


@pytest.mark.parametrize(("reduction", "expected"), [(MAX, 100.0), (MIN, math.pi * 25)])
def test_alternative_reductions(registry: Registry, reduction: Reduction, expected: float) -> None:
    result = Aggregator(reduction).total(registry)

    assert result.value == pytest.approx(expected)
    assert result.reduction == reduction.name


def test_custom_reduction() -> None:
    product = Reduction("product", lambda acc, value: acc * value, 1.0)
    result = Aggregator(product).total(Registry([Square(2), Square(3)]))

    assert result == AggregateResult(value=36.0, count=2, reduction="product")


@pytest.mark.parametrize("bad", [-1.0, float("nan"), float("inf"), None, "12"])
def test_misbehaving_variant_raises(bad: object) -> None:
    with pytest.raises(MeasureError):
        Aggregator().total(Registry([Constant(bad)]))  # type: ignore[arg-type]
