"""Invocation targets: what an Invoker wraps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reflectkit.domain.model.type_handle import TypeHandle

if TYPE_CHECKING:
    from reflectkit.domain.ports.module_scope import ModuleScopeProtocol


@dataclass(frozen=True, slots=True)
class TypeTarget:
    """Static mode: members resolve against the class itself."""

    handle: TypeHandle

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.handle, TypeHandle):
            raise TypeError(f"handle must be TypeHandle, got {type(self.handle).__name__}")

    @property
    def value(self) -> TypeHandle:
        """Wrapped value: the handle itself."""
        return self.handle


@dataclass(frozen=True, slots=True, eq=False)
class InstanceTarget:
    """Instance mode: members resolve against the value's runtime type.

    Attributes:
        handle: Handle of type(value)
        value: Wrapped instance (identity preserved)
    """

    handle: TypeHandle
    value: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.handle, TypeHandle):
            raise TypeError(f"handle must be TypeHandle, got {type(self.handle).__name__}")

        if type(self.value) is not self.handle.cls:
            raise ValueError(
                f"value of type {type(self.value).__qualname__} "
                f"does not match handle '{self.handle.name}'"
            )

    @classmethod
    def of(cls, value: object, scope: ModuleScopeProtocol | None = None) -> InstanceTarget:
        """Target for any value, with a runtime handle of its type.

        scope is carried over when the value's class was loaded in it.
        """
        return cls(TypeHandle.of(type(value), scope), value)


InvocationTarget = TypeTarget | InstanceTarget
