# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Message channel contract and the bundled concrete channels.

A channel reports the outcome of every ``send`` as a :class:`DeliveryResult`.
Transport problems become a failed result rather than an exception, and
resources such as HTTP clients belong to the channel that opened them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any, Final, Protocol, runtime_checkable

import httpx

from .utils import get_logger


_logger = get_logger("openmeasure.channels")

SMS_MAX_LENGTH: Final[int] = 160
DEFAULT_SUBJECT: Final[str] = "OpenMeasure notification"

EmailTransport = Callable[[str, str, str], None]
SMSTransport = Callable[[str, str], None]


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of one ``send`` call.

    A result with ``ok=False`` is how a channel reports a delivery failure;
    callers receive it unchanged from :class:`~openmeasure.dispatch.Dispatcher`.
    """

    ok: bool
    channel: str
    detail: str = ""

    @classmethod
    def success(cls, channel: str, detail: str = "") -> DeliveryResult:
        return cls(ok=True, channel=channel, detail=detail)

    @classmethod
    def failure(cls, channel: str, detail: str) -> DeliveryResult:
        return cls(ok=False, channel=channel, detail=detail)

    def __bool__(self) -> bool:
        return self.ok


@runtime_checkable
class MessageChannel(Protocol):
    name: str

    def send(self, message: str) -> DeliveryResult:  # pragma: no cover - protocol
        ...


class BaseChannel(ABC):
    """Convenience base for concrete channels."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def send(self, message: str) -> DeliveryResult:
        """Deliver ``message`` and report the outcome."""

    def _failed(self, detail: str, exc: BaseException | None = None) -> DeliveryResult:
        _logger.warning(
            "delivery via %s failed: %s",
            self.name,
            detail,
            exc_info=exc,
            extra={"context": {"channel": self.name}},
        )
        return DeliveryResult.failure(self.name, detail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class EmailChannel(BaseChannel):
    """Hands messages to an SMTP-like ``transport(recipient, subject, body)``."""

    def __init__(
        self,
        recipient: str,
        transport: EmailTransport,
        *,
        subject: str = DEFAULT_SUBJECT,
        name: str = "email",
    ) -> None:
        super().__init__(name)
        if "@" not in recipient:
            raise ValueError(f"invalid email recipient: {recipient!r}")
        self.recipient = recipient
        self.subject = subject
        self._transport = transport

    def send(self, message: str) -> DeliveryResult:
        try:
            self._transport(self.recipient, self.subject, message)
        except Exception as exc:  # transport errors are reported, not raised
            return self._failed(f"{type(exc).__name__}: {exc}", exc)
        return DeliveryResult.success(self.name, self.recipient)


class SMSChannel(BaseChannel):
    """Hands messages to a gateway ``transport(number, text)``."""

    def __init__(self, number: str, transport: SMSTransport, *, name: str = "sms") -> None:
        super().__init__(name)
        digits = number.removeprefix("+")
        if not digits.isdigit():
            raise ValueError(f"invalid phone number: {number!r}")
        self.number = number
        self._transport = transport

    def send(self, message: str) -> DeliveryResult:
        if len(message) > SMS_MAX_LENGTH:
            return self._failed(f"message exceeds {SMS_MAX_LENGTH} characters ({len(message)})")
        try:
            self._transport(self.number, message)
        except Exception as exc:
            return self._failed(f"{type(exc).__name__}: {exc}", exc)
        return DeliveryResult.success(self.name, self.number)


class WebhookChannel(BaseChannel):
    """POSTs ``{"message": ...}`` as JSON to ``url``.

    Pass ``client`` to share an :class:`httpx.Client`; otherwise the channel
    creates one and closes it in :meth:`close` (or on context exit).
    """

    def __init__(
        self,
        url: str,
        *,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        name: str = "webhook",
    ) -> None:
        super().__init__(name)
        self.url = url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._headers = dict(headers or {})

    def send(self, message: str) -> DeliveryResult:
        try:
            response = self._client.post(self.url, json={"message": message}, headers=self._headers)
        except httpx.HTTPError as exc:
            return self._failed(f"{type(exc).__name__}: {exc}", exc)
        if response.is_success:
            return DeliveryResult.success(self.name, str(response.status_code))
        return self._failed(f"HTTP {response.status_code}")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> WebhookChannel:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class LoggingChannel(BaseChannel):
    """Writes messages to a logger; useful as a default sink."""

    def __init__(self, *, level: int | str = "INFO", logger_name: str = "openmeasure.notify", name: str = "log") -> None:
        super().__init__(name)
        self._logger = get_logger(logger_name)
        self._level = level if isinstance(level, int) else logging.getLevelName(str(level).upper())

    def send(self, message: str) -> DeliveryResult:
        self._logger.log(self._level, message, extra={"context": {"channel": self.name}})
        return DeliveryResult.success(self.name)


__all__ = [
    "DeliveryResult",
    "MessageChannel",
    "BaseChannel",
    "EmailChannel",
    "SMSChannel",
    "WebhookChannel",
    "LoggingChannel",
    "SMS_MAX_LENGTH",
]
