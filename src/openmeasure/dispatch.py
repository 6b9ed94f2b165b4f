# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""High-level notification entry point.

:class:`Dispatcher` is bound to exactly one :class:`MessageChannel` supplied by
the caller.  It never picks or builds a channel itself; see
:mod:`openmeasure.wiring` for configuration-driven construction.
"""

from __future__ import annotations

from .channels import DeliveryResult, MessageChannel
from .utils import get_logger


_logger = get_logger("openmeasure.dispatch")


class Dispatcher:
    __slots__ = ("_channel",)

    def __init__(self, channel: MessageChannel) -> None:
        if channel is None:
            raise TypeError("Dispatcher requires a MessageChannel")
        self._channel = channel

    @property
    def channel(self) -> MessageChannel:
        """The channel bound at construction."""
        return self._channel

    def notify(self, message: str) -> DeliveryResult:
        """Send ``message`` through the bound channel and return its result as-is."""
        result = self._channel.send(message)
        _logger.debug(
            "dispatched via %s",
            getattr(self._channel, "name", type(self._channel).__name__),
            extra={"context": {"ok": getattr(result, "ok", None)}},
        )
        return result

    def __repr__(self) -> str:
        return f"Dispatcher(channel={self._channel!r})"


__all__ = ["Dispatcher"]
