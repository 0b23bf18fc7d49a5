"""pytest fixtures for catalog-driven tests.

The catalog is scanned once per session from the configured path.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from reflectkit.application.discovery import CatalogLoader
from reflectkit.application.invocation import Invoker
from reflectkit.domain.model.configuration import LoaderConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from reflectkit.domain.model.catalog import Catalog
    from reflectkit.domain.model.load_report import LoadReport


@pytest.fixture(scope="session")
def type_catalog_scan(request: pytest.FixtureRequest) -> tuple[Catalog, LoadReport]:
    """Scan the configured archive or directory.

    Relative paths resolve against the pytest rootdir.

    Returns:
        Catalog and LoadReport of the scan
    """
    configured = str(request.config.getini("reflectkit_catalog_path"))
    if not configured:
        raise pytest.UsageError("reflectkit_catalog_path is not configured in pytest.ini or pyproject.toml")

    root_dir = Path(str(request.config.rootpath))
    source_path = root_dir / configured

    if not source_path.exists():
        raise FileNotFoundError(
            f"reflectkit_catalog_path '{source_path}' does not exist. "
            f"Configure reflectkit_catalog_path in pytest.ini or pyproject.toml."
        )

    nested = bool(request.config.getini("reflectkit_nested_archives"))
    loader = CatalogLoader(LoaderConfig(include_nested_archives=nested))

    if source_path.is_dir():
        return loader.load_directory(source_path, nested)
    return loader.load_archive(source_path)


@pytest.fixture(scope="session")
def type_catalog(type_catalog_scan: tuple[Catalog, LoadReport]) -> Catalog:
    """Catalog of the configured path."""
    return type_catalog_scan[0]


@pytest.fixture
def invoker_for(type_catalog: Catalog) -> Callable[[str], Invoker]:
    """Factory for static-mode invokers by canonical name.

    Fails the test when the name is not in the catalog.
    """

    def factory(name: str) -> Invoker:
        handle = type_catalog.lookup(name)
        if handle is None:
            pytest.fail(f"'{name}' not found in catalog ({len(type_catalog)} types)")
        return Invoker.for_type(handle)

    return factory
