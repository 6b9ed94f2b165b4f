# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Turn a :class:`~openmeasure.config.WiringConfig` into live components.

:class:`Wiring` keeps three factory tables (variants, channels, formatters).
This is the only place that maps configuration names onto concrete classes;
the aggregator and the dispatcher receive finished objects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .aggregate import REDUCTIONS, AggregateResult, Aggregator
from .channels import DeliveryResult, LoggingChannel, MessageChannel, WebhookChannel
from .computable import Circle, Computable, Rectangle, Square, Triangle
from .config import WiringConfig
from .dispatch import Dispatcher
from .errors import ConstructionError, WiringError
from .formatters import CSVFormatter, Formatter, FormatterSet, HTMLFormatter, JSONFormatter, TextFormatter
from .registry import Registry
from .utils import get_logger


_logger = get_logger("openmeasure.wiring")

ShapeFactory = Callable[..., Computable]
ChannelFactory = Callable[..., MessageChannel]
FormatterFactory = Callable[[], Formatter]


@dataclass(slots=True)
class Assembly:
    """Components produced by :meth:`Wiring.build`."""

    registry: Registry
    aggregator: Aggregator
    formatters: FormatterSet
    dispatcher: Dispatcher | None = None

    def total(self) -> AggregateResult:
        return self.aggregator.total(self.registry)

    def report(self) -> dict[str, str]:
        """Render the current total with every configured formatter."""
        return self.formatters.render_all(self.total())

    def publish(self, format_name: str) -> DeliveryResult:
        """Render the current total as ``format_name`` and notify the bound channel."""
        if self.dispatcher is None:
            raise WiringError("No channel configured; nothing to publish to")
        text = self.formatters.get(format_name).render(self.total())
        return self.dispatcher.notify(text)

    def close(self) -> None:
        """Release the bound channel's resources, if it holds any."""
        if self.dispatcher is None:
            return
        close = getattr(self.dispatcher.channel, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Assembly:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class Wiring:
    """Factory registry for configuration-driven assembly."""

    def __init__(self, *, defaults: bool = True) -> None:
        self._shapes: dict[str, ShapeFactory] = {}
        self._channels: dict[str, ChannelFactory] = {}
        self._formatters: dict[str, FormatterFactory] = {}
        if defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        for shape in (Square, Rectangle, Circle, Triangle):
            self.register_shape(shape.kind, shape)
        self.register_channel("log", LoggingChannel, aliases=("logging",))
        self.register_channel("webhook", WebhookChannel, aliases=("http",))
        for formatter in (JSONFormatter, TextFormatter, HTMLFormatter, CSVFormatter):
            self.register_formatter(formatter.name, formatter)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_shape(self, kind: str, factory: ShapeFactory) -> None:
        self._shapes[kind.lower()] = factory

    def register_channel(self, name: str, factory: ChannelFactory, *, aliases: Iterable[str] | None = None) -> None:
        self._channels[name.lower()] = factory
        for alias in aliases or ():
            self._channels[alias.lower()] = factory

    def register_formatter(self, name: str, factory: FormatterFactory) -> None:
        self._formatters[name.lower()] = factory

    @property
    def shape_kinds(self) -> list[str]:
        return sorted(self._shapes)

    @property
    def channel_names(self) -> list[str]:
        return sorted(self._channels)

    @property
    def formatter_names(self) -> list[str]:
        return sorted(self._formatters)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def shape(self, kind: str, **dimensions: float) -> Computable:
        factory = self._shapes.get(kind.lower())
        if factory is None:
            raise WiringError(f"Unknown shape kind '{kind}'.")
        try:
            return factory(**dimensions)
        except TypeError as exc:
            raise ConstructionError(f"Cannot build {kind} from {sorted(dimensions)}: {exc}") from exc

    def channel(self, name: str, options: Mapping[str, Any] | None = None) -> MessageChannel:
        factory = self._channels.get(name.lower())
        if factory is None:
            raise WiringError(f"Unsupported channel '{name}'.")
        try:
            channel = factory(**dict(options or {}))
        except TypeError as exc:
            raise WiringError(f"Cannot build channel '{name}' from {sorted(options or {})}: {exc}") from exc
        if not isinstance(channel, MessageChannel):
            raise TypeError("Channel factory must return a MessageChannel")
        return channel

    def formatter(self, name: str) -> Formatter:
        factory = self._formatters.get(name.lower())
        if factory is None:
            raise WiringError(f"Unknown formatter '{name}'.")
        return factory()

    def build(self, config: WiringConfig | Mapping[str, Any]) -> Assembly:
        if not isinstance(config, WiringConfig):
            config = WiringConfig.from_mapping(config)

        registry = Registry(self.shape(item.kind, **item.dimensions()) for item in config.shapes)
        aggregator = Aggregator(REDUCTIONS[config.reduction])
        formatters = FormatterSet(self.formatter(name) for name in config.formatters)
        dispatcher = None
        if config.channel is not None:
            dispatcher = Dispatcher(self.channel(config.channel.name, config.channel.options))

        _logger.info(
            "assembled %d shape(s)",
            len(registry),
            extra={
                "context": {
                    "reduction": config.reduction,
                    "formatters": formatters.names,
                    "channel": config.channel.name if config.channel else None,
                }
            },
        )
        return Assembly(registry=registry, aggregator=aggregator, formatters=formatters, dispatcher=dispatcher)


__all__ = ["Assembly", "Wiring"]
