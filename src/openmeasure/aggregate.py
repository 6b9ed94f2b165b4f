# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Reduce a registry of computables to a single :class:`AggregateResult`.

The aggregator only ever calls ``measure()``.  It never looks at the concrete
type of an element, so new variants take part in :meth:`Aggregator.total`
without any change here.

Summation is the default reduction.  :class:`Reduction` lets callers plug in
any other associative, commutative combine step; ``MAX`` and ``MIN`` ship
alongside ``SUM``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import math
from typing import Final, Protocol, Union

from .computable import Computable
from .errors import MeasureError
from .utils import get_logger


_logger = get_logger("openmeasure.aggregate")


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Outcome of one aggregation pass.

    Attributes:
        value: The reduced measure.
        count: Number of elements that contributed.
        reduction: Name of the reduction that produced ``value``.
    """

    value: float
    count: int
    reduction: str = "sum"


@dataclass(frozen=True, slots=True)
class Reduction:
    """An associative, commutative fold step with its identity value."""

    name: str
    combine: Callable[[float, float], float]
    initial: float = 0.0


SUM: Final[Reduction] = Reduction("sum", lambda acc, value: acc + value, 0.0)
MAX: Final[Reduction] = Reduction("max", max, 0.0)
MIN: Final[Reduction] = Reduction("min", min, math.inf)

REDUCTIONS: Final[dict[str, Reduction]] = {r.name: r for r in (SUM, MAX, MIN)}


class SupportsItems(Protocol):
    def items(self) -> Iterable[Computable]:  # pragma: no cover - protocol
        ...


Source = Union[SupportsItems, Iterable[Computable]]


def _elements(source: Source) -> Iterable[Computable]:
    items = getattr(source, "items", None)
    if callable(items):
        return items()
    return source  # type: ignore[return-value]


class Aggregator:
    """Folds ``measure()`` over every element of a registry."""

    def __init__(self, reduction: Reduction = SUM) -> None:
        self._reduction = reduction

    @property
    def reduction(self) -> Reduction:
        return self._reduction

    def total(self, registry: Source) -> AggregateResult:
        """Reduce the measures of ``registry``'s current elements.

        ``registry`` may be a :class:`~openmeasure.registry.Registry`, anything
        else exposing ``items()``, or a plain iterable such as a snapshot.  An
        empty source yields the reduction's identity with ``count == 0``.
        """
        combine = self._reduction.combine
        acc = self._reduction.initial
        count = 0
        for element in _elements(registry):
            value = element.measure()
            try:
                valid = math.isfinite(value) and value >= 0
            except TypeError:
                valid = False
            if not valid:
                raise MeasureError(f"measure() returned {value!r}; expected a finite non-negative number")
            acc = combine(acc, value)
            count += 1

        if count == 0:
            acc = 0.0 if math.isinf(acc) else acc

        _logger.debug(
            "aggregated %d element(s)",
            count,
            extra={"context": {"reduction": self._reduction.name, "value": acc}},
        )
        return AggregateResult(value=float(acc), count=count, reduction=self._reduction.name)


__all__ = ["AggregateResult", "Aggregator", "Reduction", "REDUCTIONS", "SUM", "MAX", "MIN"]
