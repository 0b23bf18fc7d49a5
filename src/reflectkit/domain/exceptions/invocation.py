"""Reflective invocation exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reflectkit.domain.exceptions.base import ReflectKitError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _format_types(argument_types: Sequence[type]) -> str:
    return ", ".join(t.__qualname__ for t in argument_types)


class OverloadResolutionError(ReflectKitError):
    """No declared member, visible or not, accepts the call.

    Attributes:
        type_name: Canonical name of the type searched
        member: Member name searched
        argument_types: Runtime types of the call's arguments
    """

    def __init__(self, type_name: str, member: str, argument_types: Sequence[type]) -> None:
        # FAIL-FIRST validation
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not member:
            raise ValueError("member must not be empty")

        self.type_name = type_name
        self.member = member
        self.argument_types = tuple(argument_types)
        super().__init__(self._message())

    def _message(self) -> str:
        return (
            f"No member '{self.member}' of {self.type_name} accepts "
            f"({_format_types(self.argument_types)})"
        )


class InstantiationError(OverloadResolutionError):
    """Instance could not be created.

    Raised when no constructor signature accepts the arguments, or with
    __cause__ set when the selected constructor itself raised.
    """

    def __init__(self, type_name: str, argument_types: Sequence[type], reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(type_name, "__init__", argument_types)

    def _message(self) -> str:
        args = _format_types(self.argument_types)
        if self.reason:
            return f"Cannot instantiate {self.type_name}({args}): {self.reason}"
        return f"No constructor of {self.type_name} accepts ({args})"


class NoMatchingMethodError(OverloadResolutionError, AttributeError):
    """No method with the given name accepts the arguments.

    Inherits AttributeError: the requested callable attribute does not exist
    for this argument list.
    """


class InvocationError(ReflectKitError):
    """Resolved member raised during execution.

    The original exception is chained as __cause__.

    Attributes:
        type_name: Canonical name of the target type
        member: Member that was invoked
        error: Exception raised by the member
    """

    def __init__(self, type_name: str, member: str, error: BaseException) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not member:
            raise ValueError("member must not be empty")
        if error is None:
            raise TypeError("error must not be None")

        self.type_name = type_name
        self.member = member
        self.error = error
        super().__init__(f"{self.type_name}.{member} raised {type(error).__name__}: {error}")


class FieldAccessError(ReflectKitError, AttributeError):
    """Field absent, not public, or not assignable.

    Attributes:
        type_name: Canonical name of the target type
        field: Field name
        reason: Why access failed
    """

    def __init__(self, type_name: str, field: str, reason: str) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.type_name = type_name
        self.field = field
        self.reason = reason
        super().__init__(f"Cannot access field '{field}' of {type_name}: {reason}")
