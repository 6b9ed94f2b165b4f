# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""OpenMeasure: pluggable measure aggregation and capability-based dispatch."""

from __future__ import annotations

from .aggregate import MAX, MIN, SUM, AggregateResult, Aggregator, Reduction
from .capabilities import (
    BasicPrinter,
    Document,
    Faxable,
    FlatbedScanner,
    MultiFunctionDevice,
    Printable,
    Scannable,
    capabilities_of,
)
from .channels import (
    BaseChannel,
    DeliveryResult,
    EmailChannel,
    LoggingChannel,
    MessageChannel,
    SMSChannel,
    WebhookChannel,
)
from .computable import Circle, Computable, Rectangle, Shape, Square, Triangle
from .config import ChannelConfig, ShapeConfig, WiringConfig
from .dispatch import Dispatcher
from .errors import ConstructionError, MeasureError, OpenMeasureError, RegistryError, WiringError
from .formatters import CSVFormatter, Formatter, FormatterSet, HTMLFormatter, JSONFormatter, TextFormatter
from .registry import Registry, RegistryView
from .wiring import Assembly, Wiring


__all__ = [
    "Computable",
    "Shape",
    "Square",
    "Rectangle",
    "Circle",
    "Triangle",
    "Registry",
    "RegistryView",
    "Aggregator",
    "AggregateResult",
    "Reduction",
    "SUM",
    "MAX",
    "MIN",
    "Formatter",
    "FormatterSet",
    "JSONFormatter",
    "TextFormatter",
    "HTMLFormatter",
    "CSVFormatter",
    "Document",
    "Printable",
    "Scannable",
    "Faxable",
    "BasicPrinter",
    "FlatbedScanner",
    "MultiFunctionDevice",
    "capabilities_of",
    "MessageChannel",
    "BaseChannel",
    "DeliveryResult",
    "EmailChannel",
    "SMSChannel",
    "WebhookChannel",
    "LoggingChannel",
    "Dispatcher",
    "ShapeConfig",
    "ChannelConfig",
    "WiringConfig",
    "Wiring",
    "Assembly",
    "OpenMeasureError",
    "ConstructionError",
    "RegistryError",
    "MeasureError",
    "WiringError",
]
