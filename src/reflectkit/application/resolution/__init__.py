"""Overload resolution and member enumeration.

Resolution is structural: a declared parameter signature accepts an
argument signature when the counts agree and every declared type, boxed,
is assignable from the boxed runtime type of the argument.
"""

from reflectkit.application.resolution.members import (
    Candidate,
    FieldInfo,
    class_annotations,
    constructor_candidates,
    method_candidates,
    resolve_field,
    signature_variants,
)
from reflectkit.application.resolution.resolver import (
    accepts,
    accepts_exactly,
    declared_types,
    first_match,
    matches,
    matches_exactly,
)

__all__ = [
    "Candidate",
    "FieldInfo",
    "accepts",
    "accepts_exactly",
    "class_annotations",
    "constructor_candidates",
    "declared_types",
    "first_match",
    "matches",
    "matches_exactly",
    "method_candidates",
    "resolve_field",
    "signature_variants",
]
