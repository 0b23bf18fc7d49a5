"""Type handle value object."""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reflectkit.domain.ports.module_scope import ModuleScopeProtocol


@dataclass(frozen=True, slots=True)
class TypeHandle:
    """Reference to a loaded class.

    Attributes:
        name: Canonical dotted name (module.Class)
        cls: The class object; constructors, methods and fields are
            enumerated from it by introspection
        origin: File or archive entry the class was loaded from,
            None for handles of runtime types
        scope: Import scope of the root the class was loaded from,
            None for classes importable the ordinary way. Not part of
            equality.
    """

    name: str
    cls: type
    origin: str | None = None
    scope: ModuleScopeProtocol | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type handle name must not be empty")

        if not isinstance(self.cls, type):
            raise TypeError(f"cls must be a class, got {type(self.cls).__name__}")

    @classmethod
    def of(cls, tp: type, scope: ModuleScopeProtocol | None = None) -> TypeHandle:
        """Handle for a runtime type, named <module>.<qualname>.

        scope is kept only when tp's module belongs to it.
        """
        if not isinstance(tp, type):
            raise TypeError(f"tp must be a class, got {type(tp).__name__}")
        if scope is not None and tp.__module__ not in scope:
            scope = None
        return cls(name=f"{tp.__module__}.{tp.__qualname__}", cls=tp, scope=scope)

    @property
    def simple_name(self) -> str:
        """Class name without the module prefix."""
        return self.name.rsplit(".", 1)[-1]

    @property
    def module(self) -> str:
        """Module part of the canonical name, empty for unqualified names."""
        parts = self.name.rsplit(".", 1)
        return parts[0] if len(parts) > 1 else ""

    def activated(self) -> AbstractContextManager[object]:
        """Enter the class's import scope (no-op without one)."""
        if self.scope is None:
            return nullcontext()
        return self.scope.activated()
