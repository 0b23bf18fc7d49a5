"""Member enumeration by introspection.

Constructors, methods and fields are read from the class object itself
(inspect + typing). Each callable contributes one Candidate per declared
signature and accepted arity:

  - typing.overload variants, when declared, in declaration order
  - otherwise the implementation's own signature
  - parameters with defaults expand into one candidate per arity,
    shortest first

Visibility follows the naming convention (see Visibility.of).
"""

from __future__ import annotations

import inspect
import logging
import sys
import typing
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from reflectkit.domain.exceptions import FieldAccessError
from reflectkit.domain.model.enums import Visibility
from reflectkit.domain.model.signature import ParameterSignature

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# Accepts any positional arguments: used when a callable has no introspectable signature
_OPEN_SIGNATURE = ParameterSignature(types=(), rest=object, has_rest=True)


@dataclass(frozen=True, slots=True)
class Candidate:
    """One callable signature considered during resolution.

    Attributes:
        name: Attribute name as stored on the class (mangled for __private)
        visibility: Visibility of the requested member name
        parameters: Declared positional parameters of this arity
        returns: Declared return annotation, Signature.empty when absent
        call: Callable to invoke with the positional arguments
    """

    name: str
    visibility: Visibility
    parameters: ParameterSignature
    returns: Any
    call: Callable[..., object]

    @property
    def is_public(self) -> bool:
        """Check if the member is publicly visible."""
        return self.visibility is Visibility.PUBLIC

    @property
    def declares_none(self) -> bool:
        """Check if the declared return is None (void)."""
        return self.returns is None or self.returns == "None"


@dataclass(frozen=True, slots=True)
class FieldInfo:
    """Public field resolved on a class or instance.

    Attributes:
        name: Field name
        annotation: Declared annotation, Signature.empty when undeclared
    """

    name: str
    annotation: Any = inspect.Parameter.empty

    @property
    def is_declared(self) -> bool:
        """Check if the field carries a type annotation."""
        return self.annotation is not inspect.Parameter.empty


# =============================================================================
# Signatures
# =============================================================================


def signature_variants(
    signature: inspect.Signature | None,
    *,
    skip_first: bool = False,
) -> tuple[ParameterSignature, ...]:
    """Expand a callable signature into one ParameterSignature per arity.

    Args:
        signature: Signature to expand, None when not introspectable
        skip_first: Drop the first parameter (self/cls of unbound overloads)

    Returns:
        Variants from required-only to all positional parameters; the last
        one carries *args when present. Empty when a keyword-only
        parameter is required (not callable positionally).
    """
    if signature is None:
        return (_OPEN_SIGNATURE,)

    params = list(signature.parameters.values())
    if skip_first:
        params = params[1:]

    if any(p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty for p in params):
        return ()

    positional = [p for p in params if p.kind in _POSITIONAL]
    variadic = next((p for p in params if p.kind is inspect.Parameter.VAR_POSITIONAL), None)
    declared = tuple(_annotation_of(p) for p in positional)

    required = next((i for i, p in enumerate(positional) if p.default is not p.empty), len(positional))

    variants: list[ParameterSignature] = []
    for arity in range(required, len(positional) + 1):
        if arity == len(positional) and variadic is not None:
            variants.append(ParameterSignature(declared[:arity], rest=_annotation_of(variadic), has_rest=True))
        else:
            variants.append(ParameterSignature(declared[:arity]))
    return tuple(variants)


def _annotation_of(param: inspect.Parameter) -> Any:
    return object if param.annotation is param.empty else param.annotation


def _signature(fn: Callable[..., object]) -> inspect.Signature | None:
    """Signature with string annotations evaluated when possible."""
    try:
        return inspect.signature(fn, eval_str=True)
    # BLE001: evaluating annotations runs arbitrary expressions; fall back to raw strings
    except Exception:  # noqa: BLE001
        pass
    try:
        return inspect.signature(fn)
    except (ValueError, TypeError):
        return None


def _overloads(fn: object) -> list[Callable[..., object]]:
    func = getattr(fn, "__func__", fn)
    if not inspect.isfunction(func):
        return []
    return typing.get_overloads(func)


# =============================================================================
# Constructors
# =============================================================================


def constructor_candidates(cls: type) -> tuple[Candidate, ...]:
    """Constructor signatures of a class.

    Overloads of __init__ when declared, otherwise the signature of calling
    the class (covers __init__, __new__ and dataclass-generated __init__).
    All constructors are public; calling any of them calls cls.
    """
    overloads = _overloads(cls.__init__)
    if overloads:
        signatures = [(_signature(o), True) for o in overloads]
    else:
        signatures = [(_signature(cls), False)]

    return tuple(
        Candidate(name="__init__", visibility=Visibility.PUBLIC, parameters=variant, returns=cls, call=cls)
        for signature, skip_first in signatures
        for variant in signature_variants(signature, skip_first=skip_first)
    )


# =============================================================================
# Methods
# =============================================================================


def _method_kind(raw: object) -> str | None:
    """Classify a statically looked-up attribute.

    Returns "static", "class", "instance", or None for non-methods
    (data, properties, nested classes).
    """
    if isinstance(raw, staticmethod):
        return "static"
    if isinstance(raw, classmethod) or type(raw).__name__ == "classmethod_descriptor":
        return "class"
    if isinstance(raw, (property, type)):
        return None
    if inspect.isfunction(raw) or inspect.ismethoddescriptor(raw) or inspect.isbuiltin(raw):
        return "instance"
    return None


def _lookup_names(cls: type, name: str, include_hidden: bool) -> list[str]:
    if not include_hidden:
        return [name] if Visibility.of(name) is Visibility.PUBLIC else []
    names = [name]
    if Visibility.of(name) is Visibility.PRIVATE:
        names.extend(f"_{klass.__name__.lstrip('_')}{name}" for klass in cls.__mro__)
    return list(dict.fromkeys(names))


def method_candidates(
    cls: type,
    name: str,
    owner: object,
    *,
    static: bool,
    include_hidden: bool,
) -> tuple[Candidate, ...]:
    """Method signatures named name, in MRO then declaration order.

    Args:
        cls: Class to search
        name: Requested member name
        owner: Object the callables are bound to (cls itself in static mode)
        static: Only staticmethod/classmethod members are eligible
        include_hidden: Also consider _protected, __private and the
            name-mangled forms of __private

    Returns:
        Candidates; empty when no eligible member exists
    """
    candidates: list[Candidate] = []

    for attr in _lookup_names(cls, name, include_hidden):
        try:
            raw = inspect.getattr_static(owner, attr)
        except AttributeError:
            continue

        kind = _method_kind(raw)
        if kind is None and not static and callable(raw) and not isinstance(raw, type):
            # callable stored as instance data
            kind = "static"
        if kind is None or (static and kind == "instance"):
            continue

        bound = getattr(owner, attr)
        visibility = Visibility.of(name)
        overloads = _overloads(raw)
        if overloads:
            signatures = [(_signature(o), kind != "static") for o in overloads]
        else:
            signatures = [(_signature(bound), False)]

        for signature, skip_first in signatures:
            returns = signature.return_annotation if signature is not None else inspect.Signature.empty
            candidates.extend(
                Candidate(name=attr, visibility=visibility, parameters=variant, returns=returns, call=bound)
                for variant in signature_variants(signature, skip_first=skip_first)
            )

    return tuple(candidates)


# =============================================================================
# Fields
# =============================================================================


def _namespace_of(klass: type) -> dict[str, Any] | None:
    """Globals of the module that defined klass.

    Falls back to the globals of one of its functions when the module is
    no longer in sys.modules (classes loaded by a LoadingContext).
    """
    module = sys.modules.get(klass.__module__)
    if module is not None and getattr(module, klass.__name__, None) is klass:
        return vars(module)

    for value in vars(klass).values():
        func = getattr(value, "__func__", None) or getattr(value, "fget", None) or value
        namespace = getattr(func, "__globals__", None)
        if namespace is not None:
            return namespace
    return None


def class_annotations(cls: type) -> dict[str, Any]:
    """Annotations of cls merged over its MRO, most derived wins.

    String annotations are evaluated in the defining module's namespace;
    those that fail to evaluate stay strings.
    """
    merged: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            annotations = inspect.get_annotations(klass, globals=_namespace_of(klass), eval_str=True)
        # BLE001: evaluating annotations runs arbitrary expressions; fall back to raw strings
        except Exception:  # noqa: BLE001
            try:
                annotations = inspect.get_annotations(klass)
            except Exception:  # noqa: BLE001
                logger.debug("Ignoring unreadable annotations of %s", klass.__qualname__)
                continue
        merged.update(annotations)
    return merged


def resolve_field(type_name: str, cls: type, owner: object, name: str) -> FieldInfo:
    """Resolve a public field on a class (static mode) or an instance.

    Fields are non-callable attributes: instance __dict__ entries, slots,
    properties, class data attributes and annotated class attributes.

    Raises:
        FieldAccessError: If name is not public, absent, or a method
    """
    if Visibility.of(name) is not Visibility.PUBLIC:
        raise FieldAccessError(type_name, name, "field is not public")

    static = owner is cls
    annotations: Mapping[str, Any] = class_annotations(cls)

    try:
        raw = inspect.getattr_static(owner, name)
    except AttributeError:
        if name in annotations:
            return FieldInfo(name, annotations[name])
        raise FieldAccessError(type_name, name, "no such field") from None

    if not static and name in getattr(owner, "__dict__", {}):
        return FieldInfo(name, annotations.get(name, inspect.Parameter.empty))

    if isinstance(raw, property):
        if static:
            raise FieldAccessError(type_name, name, "property requires an instance")
        annotation = annotations.get(name, inspect.Parameter.empty)
        if annotation is inspect.Parameter.empty and raw.fget is not None:
            signature = _signature(raw.fget)
            if signature is not None:
                annotation = signature.return_annotation
        return FieldInfo(name, annotation)

    if inspect.ismemberdescriptor(raw) or inspect.isgetsetdescriptor(raw):
        if static:
            raise FieldAccessError(type_name, name, "slot requires an instance")
        return FieldInfo(name, annotations.get(name, inspect.Parameter.empty))

    if isinstance(raw, type) or _method_kind(raw) is not None:
        raise FieldAccessError(type_name, name, "member is not a field")

    return FieldInfo(name, annotations.get(name, inspect.Parameter.empty))
