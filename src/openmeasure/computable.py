# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""The computable contract and the bundled geometric variants.

Anything with a ``measure()`` method returning a non-negative float is a
:class:`Computable`.  The shapes below subclass :class:`Shape` for convenience,
but nothing downstream depends on that: aggregation only ever calls
``measure()``.

Shapes are immutable.  Dimensions are checked once in ``__post_init__`` and a
bad value raises :class:`~openmeasure.errors.ConstructionError`, so
``measure()`` itself has no failure path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from numbers import Real
from typing import ClassVar, Protocol, runtime_checkable

from .errors import ConstructionError


@runtime_checkable
class Computable(Protocol):
    """Produces one deterministic, non-negative measure."""

    def measure(self) -> float:  # pragma: no cover - protocol
        ...


class Shape(ABC):
    """Base class for geometric variants; ``measure`` is the area."""

    __slots__ = ()

    kind: ClassVar[str] = "shape"

    @abstractmethod
    def measure(self) -> float:
        """Return the area of the shape."""


def _dimension(owner: str, name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConstructionError(f"{owner}.{name} must be a real number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ConstructionError(f"{owner}.{name} must be finite, got {number}")
    if number < 0:
        raise ConstructionError(f"{owner}.{name} must be non-negative, got {number}")
    return number


@dataclass(frozen=True, slots=True)
class Square(Shape):
    side: float

    kind: ClassVar[str] = "square"

    def __post_init__(self) -> None:
        object.__setattr__(self, "side", _dimension("Square", "side", self.side))

    def measure(self) -> float:
        return self.side * self.side


@dataclass(frozen=True, slots=True)
class Rectangle(Shape):
    """Axis-aligned rectangle.

    Unrelated to :class:`Square` by inheritance; a square-shaped rectangle is
    simply ``Rectangle(n, n)``.
    """

    width: float
    height: float

    kind: ClassVar[str] = "rectangle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _dimension("Rectangle", "width", self.width))
        object.__setattr__(self, "height", _dimension("Rectangle", "height", self.height))

    def measure(self) -> float:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    radius: float

    kind: ClassVar[str] = "circle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", _dimension("Circle", "radius", self.radius))

    def measure(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True, slots=True)
class Triangle(Shape):
    base: float
    height: float

    kind: ClassVar[str] = "triangle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", _dimension("Triangle", "base", self.base))
        object.__setattr__(self, "height", _dimension("Triangle", "height", self.height))

    def measure(self) -> float:
        return self.base * self.height / 2


__all__ = ["Computable", "Shape", "Square", "Rectangle", "Circle", "Triangle"]
