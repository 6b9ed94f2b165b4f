# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Renderers for :class:`~openmeasure.aggregate.AggregateResult`.

Each formatter sees only the result value, never the registry or the
aggregator, and keeps no state between calls.  The format is part of the
formatter's identity (its ``name``), not a parameter of ``render``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import csv
from html import escape
import io
import json
from typing import Any, Protocol, runtime_checkable

from .aggregate import AggregateResult


JsonSerializer = Callable[[dict[str, Any]], str]


@runtime_checkable
class Formatter(Protocol):
    name: str

    def render(self, result: AggregateResult) -> str:  # pragma: no cover - protocol
        ...


def _payload(result: AggregateResult) -> dict[str, Any]:
    return {"count": result.count, "reduction": result.reduction, "value": result.value}


def _sorted_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, sort_keys=True)


class JSONFormatter:
    """Machine-readable output.

    ``serializer`` can swap in a faster encoder (``orjson`` and friends) as
    long as it returns ``str``.
    """

    name = "json"

    def __init__(self, serializer: JsonSerializer | None = None) -> None:
        self._serializer = serializer or _sorted_json

    def render(self, result: AggregateResult) -> str:
        return self._serializer(_payload(result))


class TextFormatter:
    name = "text"

    def __init__(self, precision: int = 2) -> None:
        if precision < 0:
            raise ValueError("precision must be non-negative")
        self._precision = precision

    def render(self, result: AggregateResult) -> str:
        noun = "item" if result.count == 1 else "items"
        return f"Total ({result.reduction}) of {result.count} {noun}: {result.value:.{self._precision}f}"


class HTMLFormatter:
    name = "html"

    def __init__(self, precision: int = 2, css_class: str = "aggregate") -> None:
        if precision < 0:
            raise ValueError("precision must be non-negative")
        self._precision = precision
        self._css_class = css_class

    def render(self, result: AggregateResult) -> str:
        return (
            f'<p class="{escape(self._css_class)}" data-count="{result.count}" '
            f'data-reduction="{escape(result.reduction)}">{result.value:.{self._precision}f}</p>'
        )


class CSVFormatter:
    name = "csv"

    def render(self, result: AggregateResult) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["reduction", "count", "value"])
        writer.writerow([result.reduction, result.count, repr(result.value)])
        return buffer.getvalue()


class FormatterSet:
    """Named collection of formatters rendered side by side."""

    def __init__(self, formatters: Iterable[Formatter] = ()) -> None:
        self._formatters: dict[str, Formatter] = {}
        for formatter in formatters:
            self.register(formatter)

    def register(self, formatter: Formatter) -> None:
        self._formatters[formatter.name] = formatter

    def get(self, name: str) -> Formatter:
        try:
            return self._formatters[name]
        except KeyError:
            raise KeyError(f"No formatter named {name!r}") from None

    @property
    def names(self) -> list[str]:
        return list(self._formatters)

    def render_all(self, result: AggregateResult) -> dict[str, str]:
        return {name: formatter.render(result) for name, formatter in self._formatters.items()}

    def __iter__(self) -> Iterator[Formatter]:
        return iter(self._formatters.values())

    def __len__(self) -> int:
        return len(self._formatters)


def default_formatters() -> FormatterSet:
    return FormatterSet([JSONFormatter(), TextFormatter(), HTMLFormatter(), CSVFormatter()])


__all__ = [
    "Formatter",
    "FormatterSet",
    "JSONFormatter",
    "TextFormatter",
    "HTMLFormatter",
    "CSVFormatter",
    "default_formatters",
]
