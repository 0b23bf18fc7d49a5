"""Catalog: name-indexed view over discovered type handles."""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reflectkit.domain.model.type_handle import TypeHandle


class Catalog:
    """Canonical name → TypeHandle mapping.

    Read-only to consumers. Only the loader mutates it, through _store():
    re-inserting an existing name replaces the previous handle
    (last-write-wins).
    """

    __slots__ = ("_types", "_view")

    def __init__(self, handles: Mapping[str, TypeHandle] | None = None) -> None:
        self._types: dict[str, TypeHandle] = {}
        self._view: Mapping[str, TypeHandle] = MappingProxyType(self._types)
        for name, handle in (handles or {}).items():
            if name != handle.name:
                raise ValueError(f"catalog key '{name}' does not match handle name '{handle.name}'")
            self._types[name] = handle

    def lookup(self, name: str) -> TypeHandle | None:
        """Get handle by canonical name. Returns None if not found."""
        return self._types.get(name)

    def entries(self) -> ItemsView[str, TypeHandle]:
        """Lazy, restartable view of (name, handle) pairs."""
        return self._view.items()

    def names(self) -> frozenset[str]:
        """All canonical names."""
        return frozenset(self._types)

    @property
    def types(self) -> Mapping[str, TypeHandle]:
        """Read-only mapping of all entries."""
        return self._view

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._view)

    def __repr__(self) -> str:
        return f"Catalog({len(self._types)} types)"

    def _store(self, handle: TypeHandle) -> None:
        """Insert or replace a handle. Loader-only."""
        self._types[handle.name] = handle
