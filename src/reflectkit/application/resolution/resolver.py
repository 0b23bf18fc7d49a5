"""Structural overload matching.

Assignability rule for one position:

    issubclass(boxed(actual), boxed(declared))

which covers exact match, subtype covariance and primitive/boxed
equivalence (ctypes.c_int ↔ int). No numeric widening: int is not accepted
where float is declared.

The first matching candidate in enumeration order wins. Enumeration order
is not ranked by type distance; callers must not rely on a particular
winner when several candidates match.
"""

from __future__ import annotations

import inspect
import types
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    ClassVar,
    Final,
    Literal,
    Protocol,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from reflectkit.domain.model.primitives import boxed

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reflectkit.domain.model.signature import ArgumentSignature, ParameterSignature

_WRAPPERS = (Annotated, ClassVar, Final)


class HasParameters(Protocol):
    """Anything carrying a declared ParameterSignature."""

    @property
    def parameters(self) -> ParameterSignature: ...


_C = TypeVar("_C", bound=HasParameters)


def declared_types(annotation: object) -> tuple[type, ...]:
    """Normalize an annotation to the classes it accepts.

    Rules:
        missing / Any / TypeVar / unresolved string → (object,)
        None → (NoneType,)
        X | Y, Optional[X], Union[...] → flattened members
        Annotated[X, ...], ClassVar[X], Final[X] → X
        Literal[a, b] → types of the literal values
        list[int], Callable[..., X] → origin class
        NewType → its supertype
    """
    if annotation is inspect.Parameter.empty or annotation is Any:
        return (object,)
    if annotation is None or annotation is types.NoneType:
        return (types.NoneType,)
    if isinstance(annotation, (str, TypeVar)):
        return (object,)

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Union or origin is types.UnionType:
        return _unique(t for arg in args for t in declared_types(arg))
    if origin in _WRAPPERS:
        return declared_types(args[0]) if args else (object,)
    if origin is Literal:
        return _unique(type(value) for value in args)
    if origin is not None:
        annotation = origin

    if isinstance(annotation, type):
        return (annotation,)

    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return declared_types(supertype)

    # ParamSpec, ForwardRef and other typing constructs carry no runtime class
    return (object,)


def accepts(annotation: object, actual: type) -> bool:
    """Check if a value of type actual can be passed where annotation is declared."""
    source = boxed(actual)
    return any(_assignable(boxed(declared), source) for declared in declared_types(annotation))


def accepts_exactly(annotation: object, actual: type) -> bool:
    """Check if actual is one of the declared classes (no boxing, no subtypes)."""
    return actual in declared_types(annotation)


def matches(parameters: ParameterSignature, arguments: ArgumentSignature, *, exact: bool = False) -> bool:
    """Check if a declared signature accepts an argument signature.

    Counts must agree, except that a *args parameter absorbs any surplus
    arguments assignable to its annotation.
    """
    accept = accepts_exactly if exact else accepts
    declared_count = len(parameters.types)
    actual_count = len(arguments.types)

    if actual_count < declared_count:
        return False
    if actual_count > declared_count and not parameters.has_rest:
        return False

    for declared, actual in zip(parameters.types, arguments.types, strict=False):
        if not accept(declared, actual):
            return False

    return all(accept(parameters.rest, actual) for actual in arguments.types[declared_count:])


def matches_exactly(parameters: ParameterSignature, arguments: ArgumentSignature) -> bool:
    """Check if every argument type is one of its position's declared classes."""
    return matches(parameters, arguments, exact=True)


def first_match(candidates: Iterable[_C], arguments: ArgumentSignature, *, exact: bool = False) -> _C | None:
    """First candidate, in enumeration order, whose parameters match."""
    for candidate in candidates:
        if matches(candidate.parameters, arguments, exact=exact):
            return candidate
    return None


def _assignable(declared: object, actual: object) -> bool:
    if declared is object:
        return True
    if not isinstance(declared, type) or not isinstance(actual, type):
        return False
    try:
        return issubclass(actual, declared)
    except TypeError:
        # protocols with data members refuse issubclass(); the call decides
        return True


def _unique(items: Iterable[type]) -> tuple[type, ...]:
    return tuple(dict.fromkeys(items))
