"""Canonical name derivation from entry paths and loaded modules."""

from __future__ import annotations

import keyword
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import ModuleType

_PACKAGE_INIT = "__init__"


def derive_module_name(entry_name: str, source_suffix: str = ".py") -> tuple[str, bool] | None:
    """Derive a dotted module name from a path relative to the scan root.

    Both / and \\ separate path segments, so names are identical whatever
    platform produced the archive or walked the tree.

    Args:
        entry_name: Relative path of a source entry (e.g. "a/b.py")
        source_suffix: Source extension to strip

    Returns:
        (module name, is_package), or None for the root __init__ which
        has no name of its own

    Raises:
        ValueError: If entry_name lacks the suffix, or a segment is not a
            valid identifier (e.g. "B$Inner.py", "my-module.py", "class.py")

    Example:
        >>> derive_module_name("a\\\\b/__init__.py")
        ('a.b', True)
    """
    if not entry_name.endswith(source_suffix):
        raise ValueError(f"not a {source_suffix} entry: {entry_name}")

    stem = entry_name[: -len(source_suffix)]
    parts = [part for part in stem.replace("\\", "/").split("/") if part and part != "."]

    is_package = bool(parts) and parts[-1] == _PACKAGE_INIT
    if is_package:
        parts = parts[:-1]

    if not parts:
        return None

    for part in parts:
        if not part.isidentifier() or keyword.iskeyword(part):
            raise ValueError(f"'{part}' is not a valid module name segment")

    return ".".join(parts), is_package


def canonical_name(module_name: str, class_name: str) -> str:
    """Catalog key of a top-level class: module.Class."""
    if not module_name:
        raise ValueError("module_name must not be empty")
    if not class_name:
        raise ValueError("class_name must not be empty")
    return f"{module_name}.{class_name}"


def top_level_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined at module level, in definition order.

    Excludes nested classes (qualname contains "." or "<locals>") and
    classes imported from other modules. Aliases yield the class once.
    """
    seen: set[int] = set()
    for value in vars(module).values():
        if not isinstance(value, type) or id(value) in seen:
            continue
        if value.__module__ != module.__name__ or value.__qualname__ != value.__name__:
            continue
        seen.add(id(value))
        yield value
