# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

from __future__ import annotations

import pytest

from openmeasure import Circle, Registry, RegistryError, Square, Triangle


def test_add_preserves_insertion_order() -> None:
    registry = Registry()
    first, second, third = Square(1), Circle(2), Triangle(3, 4)
    registry.add(first)
    registry.add(second)
    registry.add(third)

    assert list(registry.items()) == [first, second, third]
    assert len(registry) == 3


def test_add_rejects_none() -> None:
    registry = Registry()
    with pytest.raises(RegistryError):
        registry.add(None)  # type: ignore[arg-type]
    assert len(registry) == 0


def test_add_rejects_non_computable() -> None:
    with pytest.raises(TypeError, match="measure"):
        Registry(["square"])  # type: ignore[list-item]


def test_items_view_is_restartable(registry: Registry) -> None:
    view = registry.items()
    assert list(view) == list(view)
    assert len(view) == 2


def test_items_view_is_read_only(registry: Registry) -> None:
    view = registry.items()
    assert not hasattr(view, "append")
    with pytest.raises(TypeError):
        view[0] = Square(1)  # type: ignore[index]


def test_items_view_tracks_later_additions(registry: Registry) -> None:
    view = registry.items()
    registry.add(Square(2))
    assert len(view) == 3


def test_snapshot_is_detached(registry: Registry) -> None:
    snapshot = registry.snapshot()
    registry.add(Square(2))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 2


def test_extract_transfers_ownership(registry: Registry) -> None:
    circle = registry.items()[1]
    assert registry.extract(circle) is circle
    assert circle not in registry.items()

    with pytest.raises(KeyError):
        registry.extract(circle)


def test_bool_reflects_contents() -> None:
    assert not Registry()
    assert Registry([Square(1)])
