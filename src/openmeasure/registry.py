# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Ordered, exclusively owned collection of :class:`Computable` variants."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from .computable import Computable
from .errors import RegistryError
from .utils import get_logger


_logger = get_logger("openmeasure.registry")


class RegistryView(Sequence[Computable]):
    """Read-only window onto a registry's current elements.

    The view holds no copy; each iteration walks the live list from the start,
    so it is restartable and reflects later additions.  Mutating the registry
    while a view is being iterated is undefined, take a
    :meth:`Registry.snapshot` first.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[Computable]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> Computable: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Computable]: ...

    def __getitem__(self, index: int | slice) -> Computable | Sequence[Computable]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Computable]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"RegistryView(size={len(self._items)})"


class Registry:
    """Collects computable variants in insertion order."""

    def __init__(self, items: Iterable[Computable] | None = None) -> None:
        self._items: list[Computable] = []
        if items is not None:
            self.extend(items)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, item: Computable) -> None:
        if item is None:
            raise RegistryError("Registry does not accept None")
        if not isinstance(item, Computable):
            raise RegistryError(f"{type(item).__name__} does not provide measure()")
        self._items.append(item)
        _logger.debug("registered %s", type(item).__name__, extra={"context": {"size": len(self._items)}})

    def extend(self, items: Iterable[Computable]) -> None:
        for item in items:
            self.add(item)

    def extract(self, item: Computable) -> Computable:
        """Remove ``item`` and hand ownership back to the caller."""
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return self._items.pop(index)
        raise KeyError(item)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def items(self) -> RegistryView:
        return RegistryView(self._items)

    def snapshot(self) -> tuple[Computable, ...]:
        """Immutable copy, safe to aggregate while the registry keeps changing."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Computable]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Registry(size={len(self._items)})"


__all__ = ["Registry", "RegistryView"]
