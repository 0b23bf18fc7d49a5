"""Invoker: name-based construction, invocation and field access.

Wraps an InvocationTarget:
  - TypeTarget: members resolve against the class (constructors,
    staticmethods, classmethods, class attributes)
  - InstanceTarget: members resolve against the value's runtime type

Constructor and method resolution is two-phase:
  1. public candidates whose declared types equal the argument types
  2. every candidate, any visibility, structurally compatible
     (boxed assignability, see resolution.resolver)

Fields are public-only, with no second phase.

Members of classes loaded from a scan run inside their root's loading
context (TypeHandle.activated), so their own imports keep resolving after
the scan returned.

Every successful call returns a new Invoker; targets are never mutated.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from reflectkit.application.resolution.members import (
    constructor_candidates,
    method_candidates,
    resolve_field,
)
from reflectkit.application.resolution.resolver import accepts, declared_types, first_match
from reflectkit.domain.exceptions import (
    FieldAccessError,
    InstantiationError,
    InvocationError,
    NoMatchingMethodError,
)
from reflectkit.domain.model.signature import ArgumentSignature
from reflectkit.domain.model.target import InstanceTarget, InvocationTarget, TypeTarget
from reflectkit.domain.model.type_handle import TypeHandle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reflectkit.application.resolution.members import Candidate

logger = logging.getLogger(__name__)


class Invoker:
    """Reflective facade over a type handle or an instance.

    Example:
        >>> calc = Invoker(catalog.lookup("pkg.B")).instantiate()
        >>> calc.invoke("sum", 2, 3).unwrap()
        5
    """

    __slots__ = ("_target",)

    def __init__(self, target: InvocationTarget | TypeHandle) -> None:
        """Initialize with a target, or a handle for static mode.

        Raises:
            TypeError: If target is neither a TypeHandle nor an InvocationTarget
        """
        if isinstance(target, TypeHandle):
            target = TypeTarget(target)
        if not isinstance(target, (TypeTarget, InstanceTarget)):
            raise TypeError(f"target must be TypeHandle or InvocationTarget, got {type(target).__name__}")

        self._target: InvocationTarget = target

    @classmethod
    def for_type(cls, handle: TypeHandle) -> Invoker:
        """Static mode invoker over a type handle."""
        return cls(TypeTarget(handle))

    @classmethod
    def for_value(cls, value: object) -> Invoker:
        """Instance mode invoker over any value."""
        return cls(InstanceTarget.of(value))

    def __repr__(self) -> str:
        match self._target:
            case TypeTarget(handle=handle):
                return f"Invoker(type {handle.name})"
            case InstanceTarget(handle=handle):
                return f"Invoker(instance of {handle.name})"

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def target(self) -> InvocationTarget:
        """Wrapped invocation target."""
        return self._target

    @property
    def handle(self) -> TypeHandle:
        """Handle of the wrapped type (static mode) or of the value's type."""
        return self._target.handle

    @property
    def is_static(self) -> bool:
        """Check if the invoker wraps a type rather than an instance."""
        return isinstance(self._target, TypeTarget)

    def unwrap(self) -> object:
        """Raw wrapped value: the TypeHandle in static mode, else the instance."""
        return self._target.value

    # =========================================================================
    # Operations
    # =========================================================================

    def instantiate(self, *args: object) -> Invoker:
        """Create an instance of the wrapped type.

        Raises:
            InstantiationError: If no constructor accepts args, or the
                constructor raised (chained as __cause__)
        """
        handle = self.handle
        arguments = ArgumentSignature.of(args)
        candidates = constructor_candidates(handle.cls)

        chosen = self._resolve(candidates, arguments)
        if chosen is None:
            raise InstantiationError(handle.name, arguments.types)

        try:
            with handle.activated():
                instance = chosen.call(*args)
        # BLE001: constructors are arbitrary code; failure is wrapped, not swallowed
        except Exception as e:  # noqa: BLE001
            raise InstantiationError(handle.name, arguments.types, f"{type(e).__name__}: {e}") from e

        return Invoker(self._wrap(instance))

    def invoke(self, name: str, *args: object) -> Invoker:
        """Call a method by name.

        A method declared to return None (or unannotated and returning None)
        yields an invoker over the same target, for chaining.

        Raises:
            NoMatchingMethodError: If no method named name accepts args
            InvocationError: If the method raised (chained as __cause__)
        """
        if not name:
            raise ValueError("method name must not be empty")

        handle = self.handle
        arguments = ArgumentSignature.of(args)
        candidates = method_candidates(
            handle.cls, name, self._owner(), static=self.is_static, include_hidden=True
        )
        chosen = self._resolve(candidates, arguments)
        if chosen is None:
            raise NoMatchingMethodError(handle.name, name, arguments.types)

        try:
            with handle.activated():
                result = chosen.call(*args)
        # BLE001: methods are arbitrary code; failure is wrapped, not swallowed
        except Exception as e:  # noqa: BLE001
            raise InvocationError(handle.name, chosen.name, e) from e

        if chosen.declares_none or (result is None and _unannotated(chosen)):
            return Invoker(self._target)
        return Invoker(self._wrap(result))

    def get_field(self, name: str) -> object:
        """Current value of a public field.

        Raises:
            FieldAccessError: If the field is absent, not public, a method,
                or declared but unset
            InvocationError: If a property getter raised
        """
        handle = self.handle
        owner = self._owner()
        resolve_field(handle.name, handle.cls, owner, name)

        try:
            with handle.activated():
                return getattr(owner, name)
        except AttributeError as e:
            raise FieldAccessError(handle.name, name, f"not readable: {e}") from e
        # BLE001: property getters are arbitrary code
        except Exception as e:  # noqa: BLE001
            raise InvocationError(handle.name, name, e) from e

    def set_field(self, name: str, value: object) -> Invoker:
        """Assign a public field. Returns this invoker.

        Raises:
            FieldAccessError: If the field is absent, not public, a method,
                read-only, or value is not assignable to its annotation
            InvocationError: If a property setter raised
        """
        handle = self.handle
        owner = self._owner()
        field = resolve_field(handle.name, handle.cls, owner, name)

        if field.is_declared and not accepts(field.annotation, type(value)):
            expected = " | ".join(t.__qualname__ for t in declared_types(field.annotation))
            raise FieldAccessError(
                handle.name,
                name,
                f"{type(value).__qualname__} is not assignable to {expected}",
            )

        try:
            with handle.activated():
                setattr(owner, name, value)
        except (AttributeError, TypeError) as e:
            raise FieldAccessError(handle.name, name, f"not assignable: {e}") from e
        # BLE001: property setters are arbitrary code
        except Exception as e:  # noqa: BLE001
            raise InvocationError(handle.name, name, e) from e

        return self

    # =========================================================================
    # Internals
    # =========================================================================

    def _owner(self) -> object:
        return self.handle.cls if self.is_static else self._target.value

    def _resolve(self, candidates: Sequence[Candidate], arguments: ArgumentSignature) -> Candidate | None:
        """Two-phase resolution: exact public first, structural fallback."""
        chosen = first_match((c for c in candidates if c.is_public), arguments, exact=True)
        if chosen is not None:
            return chosen

        chosen = first_match(candidates, arguments)
        if chosen is not None:
            logger.debug(
                "Resolved %s.%s%s by structural match",
                self.handle.name,
                chosen.name,
                arguments.types,
            )
        return chosen

    def _wrap(self, value: object) -> InstanceTarget:
        """Instance target for a produced value, reusing the known handle when possible."""
        if type(value) is self.handle.cls:
            return InstanceTarget(self.handle, value)
        return InstanceTarget.of(value, self.handle.scope)


def _unannotated(candidate: Candidate) -> bool:
    return candidate.returns is inspect.Signature.empty
