# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Declarative wiring configuration.

These models only describe *which* variants, channel, and formatters to wire
together.  Dimensions must be real numbers (no booleans, no numeric strings);
range checks stay with the variant constructors, so a negative radius here
still surfaces as :class:`~openmeasure.errors.ConstructionError` when the
configuration is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


# Strict so booleans and numeric strings are not coerced before the
# constructors see them.
Dimension = Union[StrictFloat, StrictInt]


class ShapeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str = Field(min_length=1)
    side: Dimension | None = None
    width: Dimension | None = None
    height: Dimension | None = None
    radius: Dimension | None = None
    base: Dimension | None = None

    def dimensions(self) -> dict[str, float]:
        """Dimensions that were actually provided, keyed by constructor argument."""
        return self.model_dump(exclude={"kind"}, exclude_none=True)


class ChannelConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)


class WiringConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    shapes: list[ShapeConfig] = Field(default_factory=list)
    channel: ChannelConfig | None = None
    formatters: list[str] = Field(default_factory=lambda: ["json", "text"])
    reduction: Literal["sum", "max", "min"] = "sum"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> WiringConfig:
        return cls.model_validate(dict(data))


__all__ = ["ShapeConfig", "ChannelConfig", "WiringConfig"]
