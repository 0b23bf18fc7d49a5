"""pytest plugin for reflectkit.

Provides fixtures for tests that drive discovered classes:
    type_catalog_scan: (Catalog, LoadReport) from the configured path
    type_catalog: Catalog from the configured path
    invoker_for: Factory canonical name -> Invoker (static mode)

Enable with ``-p reflectkit.presentation.pytest_plugin`` or
``pytest_plugins = ["reflectkit.presentation.pytest_plugin"]``.

Configuration (pytest.ini or pyproject.toml):
    reflectkit_catalog_path: Archive or directory to scan (required)
    reflectkit_nested_archives: Scan archives nested in the directory
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from reflectkit.presentation.pytest_plugin.fixtures import (
    invoker_for,
    type_catalog,
    type_catalog_scan,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "invoker_for",
    "type_catalog",
    "type_catalog_scan",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "reflectkit_catalog_path",
        "Archive or directory scanned by the type_catalog fixture",
        default="",
    )
    parser.addini(
        "reflectkit_nested_archives",
        "Scan archives nested in the catalog directory",
        type="bool",
        default=False,
    )
