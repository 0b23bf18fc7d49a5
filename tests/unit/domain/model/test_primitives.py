"""Tests for domain/model/primitives.py."""

import ctypes
from types import NoneType

import pytest

from reflectkit.domain.model.primitives import PRIMITIVE_EQUIVALENTS, boxed


class TestPrimitiveEquivalents:
    """Tests for the primitive → boxed table."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (ctypes.c_int, int),
            (ctypes.c_long, int),
            (ctypes.c_double, float),
            (ctypes.c_bool, bool),
            (ctypes.c_char, bytes),
            (ctypes.c_wchar, str),
            (None, NoneType),
        ],
    )
    def test_boxed(self, kind: object, expected: type) -> None:
        """Primitive kinds box to their builtin equivalents."""
        assert boxed(kind) is expected

    def test_non_primitive_unchanged(self) -> None:
        """Non-primitive classes box to themselves."""
        assert boxed(str) is str
        assert boxed(list) is list

    def test_unhashable_unchanged(self) -> None:
        """Unhashable annotations pass through."""
        annotation = ["not", "hashable"]
        assert boxed(annotation) is annotation

    def test_table_is_read_only(self) -> None:
        """Equivalence table cannot be mutated."""
        with pytest.raises(TypeError):
            PRIMITIVE_EQUIVALENTS[ctypes.c_int] = float  # type: ignore[index]
