"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Member visibility by naming convention."""

    PUBLIC = auto()  # no underscore, or __dunder__
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name (mangled)

    @classmethod
    def of(cls, name: str) -> "Visibility":
        """Determine visibility from Python naming convention.

        Rules:
            __name__ (dunder) → PUBLIC (special methods)
            __name (not __name__) → PRIVATE (mangled)
            _name → PROTECTED
            name → PUBLIC
        """
        if name.startswith("__") and name.endswith("__"):
            return cls.PUBLIC
        if name.startswith("__"):
            return cls.PRIVATE
        if name.startswith("_"):
            return cls.PROTECTED
        return cls.PUBLIC
