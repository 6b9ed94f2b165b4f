# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Segregated device capabilities.

Each behavior gets its own minimal protocol.  There is no umbrella "machine"
interface, and a device implements only the protocols it can honour, so a
print-only device simply has no ``fax`` method.  Code that needs one behavior
annotates its parameter with that single protocol; handing it a device that
lacks the behavior is caught by the type checker, not at runtime.

The protocols are ``runtime_checkable`` so :func:`capabilities_of` can
describe a device, but nothing in this package uses that to gate a call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from .utils import get_logger


_logger = get_logger("openmeasure.capabilities")


@dataclass(frozen=True, slots=True)
class Document:
    title: str
    body: str = ""


@runtime_checkable
class Printable(Protocol):
    def print(self, document: Document) -> None:  # pragma: no cover - protocol
        ...


@runtime_checkable
class Scannable(Protocol):
    def scan(self) -> Document:  # pragma: no cover - protocol
        ...


@runtime_checkable
class Faxable(Protocol):
    def fax(self, document: Document, number: str) -> None:  # pragma: no cover - protocol
        ...


CAPABILITIES: Final[dict[str, type]] = {
    "print": Printable,
    "scan": Scannable,
    "fax": Faxable,
}


def capabilities_of(device: object) -> frozenset[str]:
    """Names of the capability protocols ``device`` satisfies."""
    return frozenset(name for name, proto in CAPABILITIES.items() if isinstance(device, proto))


# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------


class BasicPrinter:
    """Print-only device."""

    def __init__(self, name: str = "printer") -> None:
        self.name = name
        self.printed: list[Document] = []

    def print(self, document: Document) -> None:
        self.printed.append(document)
        _logger.info("printed %r", document.title, extra={"context": {"device": self.name}})


class FlatbedScanner:
    """Scan-only device that returns queued pages in order."""

    def __init__(self, pages: Iterable[Document] = (), name: str = "scanner") -> None:
        self.name = name
        self._pages = list(pages)
        self._position = 0

    def scan(self) -> Document:
        if self._position < len(self._pages):
            page = self._pages[self._position]
            self._position += 1
        else:
            page = Document(title="blank")
        _logger.info("scanned %r", page.title, extra={"context": {"device": self.name}})
        return page


class MultiFunctionDevice:
    """Prints, scans, and faxes."""

    def __init__(self, pages: Iterable[Document] = (), name: str = "mfd") -> None:
        self.name = name
        self.printed: list[Document] = []
        self.faxed: list[tuple[str, Document]] = []
        self._scanner = FlatbedScanner(pages, name=name)

    def print(self, document: Document) -> None:
        self.printed.append(document)
        _logger.info("printed %r", document.title, extra={"context": {"device": self.name}})

    def scan(self) -> Document:
        return self._scanner.scan()

    def fax(self, document: Document, number: str) -> None:
        self.faxed.append((number, document))
        _logger.info("faxed %r to %s", document.title, number, extra={"context": {"device": self.name}})


# ---------------------------------------------------------------------------
# Single-capability clients
# ---------------------------------------------------------------------------


def print_all(printer: Printable, documents: Iterable[Document]) -> int:
    count = 0
    for document in documents:
        printer.print(document)
        count += 1
    return count


def scan_pages(scanner: Scannable, pages: int) -> list[Document]:
    return [scanner.scan() for _ in range(pages)]


def fax_all(fax: Faxable, documents: Iterable[Document], number: str) -> int:
    count = 0
    for document in documents:
        fax.fax(document, number)
        count += 1
    return count


__all__ = [
    "Document",
    "Printable",
    "Scannable",
    "Faxable",
    "CAPABILITIES",
    "capabilities_of",
    "BasicPrinter",
    "FlatbedScanner",
    "MultiFunctionDevice",
    "print_all",
    "scan_pages",
    "fax_all",
]
