"""Parameter and argument signatures for overload resolution."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParameterSignature:
    """Declared positional parameter annotations of one callable arity.

    Attributes:
        types: Declared annotation per position (object when unannotated)
        rest: Annotation of *args, None when the callable has no *args
    """

    types: tuple[Any, ...] = ()
    rest: Any = None
    has_rest: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.rest is not None and not self.has_rest:
            raise ValueError("rest annotation given without has_rest=True")

    def __len__(self) -> int:
        return len(self.types)


@dataclass(frozen=True, slots=True)
class ArgumentSignature:
    """Runtime types of a call's positional arguments."""

    types: tuple[type, ...] = ()

    @classmethod
    def of(cls, args: Iterable[object]) -> ArgumentSignature:
        """Build from actual argument values (None contributes NoneType)."""
        return cls(tuple(type(arg) for arg in args))

    def __len__(self) -> int:
        return len(self.types)
