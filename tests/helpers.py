# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Shared fakes for OpenMeasure tests."""

from __future__ import annotations

from dataclasses import dataclass

from openmeasure.channels import DeliveryResult


class RecordingChannel:
    """In-memory channel that records every message instead of delivering it."""

    def __init__(self, name: str = "recording") -> None:
        self.name = name
        self.sent: list[str] = []

    def send(self, message: str) -> DeliveryResult:
        self.sent.append(message)
        return DeliveryResult.success(self.name)


class FailingChannel(RecordingChannel):
    """Records messages and reports every delivery as failed."""

    def __init__(self, name: str = "failing", detail: str = "gateway unavailable") -> None:
        super().__init__(name)
        self.detail = detail

    def send(self, message: str) -> DeliveryResult:
        self.sent.append(message)
        return DeliveryResult.failure(self.name, self.detail)


@dataclass(frozen=True)
class Hexagon:
    """Variant defined outside the package; only implements ``measure``."""

    side: float

    def measure(self) -> float:
        return 3 * (3**0.5) / 2 * self.side**2


class Constant:
    def __init__(self, value: float) -> None:
        self.value = value

    def measure(self) -> float:
        return self.value
