"""Tests for domain/model/type_handle.py."""

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from reflectkit.domain.model.type_handle import TypeHandle


class Sample:
    class Nested:
        pass


class RecordingScope:
    """Scope that counts activations."""

    def __init__(self, modules: set[str]) -> None:
        self.modules = modules
        self.entered = 0

    @contextmanager
    def activated(self) -> Iterator["RecordingScope"]:
        self.entered += 1
        yield self

    def __contains__(self, module_name: object) -> bool:
        return module_name in self.modules


class TestTypeHandle:
    """Tests for TypeHandle value object."""

    def test_valid(self) -> None:
        """Fields are stored as given."""
        handle = TypeHandle("pkg.mod.Sample", Sample, origin="pkg/mod.py")
        assert handle.name == "pkg.mod.Sample"
        assert handle.cls is Sample
        assert handle.origin == "pkg/mod.py"
        assert handle.scope is None

    def test_is_frozen(self) -> None:
        """Handles are immutable."""
        handle = TypeHandle("pkg.Sample", Sample)
        with pytest.raises(AttributeError):
            handle.name = "other"  # type: ignore[misc]

    def test_empty_name_raises(self) -> None:
        """Empty name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            TypeHandle("", Sample)

    def test_non_class_raises(self) -> None:
        """cls must be a class object."""
        with pytest.raises(TypeError, match="must be a class"):
            TypeHandle("pkg.sample", Sample())  # type: ignore[arg-type]

    def test_equality_by_value(self) -> None:
        """Handles with the same fields are equal."""
        assert TypeHandle("pkg.Sample", Sample) == TypeHandle("pkg.Sample", Sample)

    def test_scope_not_part_of_equality(self) -> None:
        """Handles differing only in scope are equal."""
        scoped = TypeHandle("pkg.Sample", Sample, scope=RecordingScope(set()))
        assert scoped == TypeHandle("pkg.Sample", Sample)

    def test_simple_name_and_module(self) -> None:
        """Name splits into module and class name."""
        handle = TypeHandle("pkg.mod.Sample", Sample)
        assert handle.simple_name == "Sample"
        assert handle.module == "pkg.mod"

    def test_unqualified_name(self) -> None:
        """Unqualified names have an empty module."""
        handle = TypeHandle("Sample", Sample)
        assert handle.simple_name == "Sample"
        assert handle.module == ""


class TestTypeHandleActivated:
    """Tests for TypeHandle.activated."""

    def test_without_scope_is_noop(self) -> None:
        """Handles without a scope enter a null context."""
        with TypeHandle("pkg.Sample", Sample).activated() as entered:
            assert entered is None

    def test_enters_scope(self) -> None:
        """Handles with a scope enter it."""
        scope = RecordingScope(set())
        with TypeHandle("pkg.Sample", Sample, scope=scope).activated():
            assert scope.entered == 1


class TestTypeHandleOf:
    """Tests for TypeHandle.of runtime handles."""

    def test_builtin(self) -> None:
        """Builtins are named after the builtins module."""
        handle = TypeHandle.of(int)
        assert handle.name == "builtins.int"
        assert handle.cls is int
        assert handle.origin is None

    def test_nested_uses_qualname(self) -> None:
        """Nested classes keep their qualified name."""
        handle = TypeHandle.of(Sample.Nested)
        assert handle.name.endswith("Sample.Nested")

    def test_rejects_instance(self) -> None:
        """Only classes can be wrapped."""
        with pytest.raises(TypeError):
            TypeHandle.of(42)  # type: ignore[arg-type]

    def test_scope_kept_for_own_module(self) -> None:
        """Scope is kept when the class's module belongs to it."""
        scope = RecordingScope({Sample.__module__})
        assert TypeHandle.of(Sample, scope).scope is scope

    def test_scope_dropped_for_foreign_module(self) -> None:
        """Scope is dropped for classes loaded elsewhere."""
        assert TypeHandle.of(int, RecordingScope({"pkg"})).scope is None
