"""CatalogLoader: archive and directory scans into a Catalog.

Per-entry problems never abort a scan: they are logged and recorded in
the returned LoadReport. Only a top-level path that cannot be opened or
listed raises SourceUnavailableError.

Ordering:
  - archive entries load in archive listing order
  - directory files load in sorted depth-first order, then nested
    archives in the same order
  - a canonical name seen twice keeps the last handle (last-write-wins)
"""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING

from reflectkit.application.discovery.names import canonical_name, derive_module_name, top_level_classes
from reflectkit.domain.exceptions import DiscoveryError, SourceUnavailableError
from reflectkit.domain.model.catalog import Catalog
from reflectkit.domain.model.configuration import LoaderConfig
from reflectkit.domain.model.load_report import LoadFailure, LoadReport
from reflectkit.domain.model.type_handle import TypeHandle
from reflectkit.infrastructure.loading_context import LoadingContext
from reflectkit.infrastructure.scanning import ScanEntry, iter_archive, iter_directory

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class _FailureLog:
    """Accumulates per-entry failures of one load call."""

    __slots__ = ("_failures",)

    def __init__(self) -> None:
        self._failures: list[LoadFailure] = []

    def record(self, path: str, reason: str) -> None:
        logger.warning("Skipping %s: %s", path, reason)
        self._failures.append(LoadFailure(path=path, reason=reason))

    def record_error(self, error: DiscoveryError | SourceUnavailableError) -> None:
        self.record(error.path, error.reason)

    def report(self) -> LoadReport:
        return LoadReport(tuple(self._failures))


class CatalogLoader:
    """Builds catalogs of top-level classes from archives and source trees.

    Stateless between calls; configuration is fixed at construction.
    """

    def __init__(self, config: LoaderConfig | None = None) -> None:
        """Initialize loader.

        Args:
            config: Scan configuration. Uses defaults if None.
        """
        self._config = config or LoaderConfig()

    @property
    def config(self) -> LoaderConfig:
        """Scan configuration."""
        return self._config

    def load_archive(self, path: PathLike) -> tuple[Catalog, LoadReport]:
        """Scan a zip-format archive.

        All modules of the archive share one loading context, so they can
        import each other.

        Raises:
            SourceUnavailableError: If the archive cannot be opened
        """
        catalog = Catalog()
        log = _FailureLog()
        self._scan_archive(catalog, Path(path), log)
        return catalog, log.report()

    def load_directory(
        self,
        path: PathLike,
        include_nested_archives: bool = False,
    ) -> tuple[Catalog, LoadReport]:
        """Scan a directory tree of source files.

        Args:
            path: Root directory; module names are relative to it
            include_nested_archives: Also scan archives found in the tree

        Raises:
            SourceUnavailableError: If path is not a listable directory
        """
        catalog = Catalog()
        log = _FailureLog()
        self._scan_directory(catalog, Path(path), include_nested_archives, log)
        return catalog, log.report()

    def add(self, catalog: Catalog, path: PathLike) -> LoadReport:
        """Scan an archive or directory into an existing catalog, in place.

        Directories use config.include_nested_archives. Existing names are
        replaced by newly loaded ones.

        Raises:
            SourceUnavailableError: If path is neither a directory nor an archive
        """
        root = Path(path)
        log = _FailureLog()

        if root.is_dir():
            self._scan_directory(catalog, root, self._config.include_nested_archives, log)
        elif root.is_file() and (self._config.is_archive(root.name) or zipfile.is_zipfile(root)):
            self._scan_archive(catalog, root, log)
        else:
            raise SourceUnavailableError(str(root), "not a directory or archive")

        return log.report()

    # =========================================================================
    # Scans
    # =========================================================================

    def _scan_archive(self, catalog: Catalog, path: Path, log: _FailureLog) -> None:
        origin = str(path)
        try:
            archive = zipfile.ZipFile(path)
        except (OSError, zipfile.BadZipFile) as e:
            raise SourceUnavailableError(origin, f"cannot open archive: {e}") from e

        with archive:
            context = LoadingContext(origin)
            entries = (
                entry
                for entry in iter_archive(archive, origin)
                if not self._in_skipped_directory(entry.name)
            )
            module_names = self._register(context, entries, log)
            self._load(catalog, context, module_names, log)

    def _scan_directory(
        self,
        catalog: Catalog,
        root: Path,
        include_nested_archives: bool,
        log: _FailureLog,
    ) -> None:
        try:
            files = iter_directory(
                root,
                self._config.skip_directories,
                on_error=lambda p, e: log.record(str(p), f"cannot list directory: {e}"),
            )
        except OSError as e:
            raise SourceUnavailableError(str(root), f"cannot list directory: {e}") from e

        sources: list[ScanEntry] = []
        archives: list[Path] = []
        for file in files:
            if self._config.is_archive(file.name):
                if include_nested_archives:
                    archives.append(file)
                else:
                    logger.debug("Skipping nested archive %s", file)
            elif self._config.is_source(file.name):
                sources.append(ScanEntry.for_file(file, root))

        context = LoadingContext(str(root))
        module_names = self._register(context, sources, log)
        self._load(catalog, context, module_names, log)

        for archive in archives:
            try:
                self._scan_archive(catalog, archive, log)
            except SourceUnavailableError as e:
                log.record_error(e)

    # =========================================================================
    # Loading
    # =========================================================================

    def _register(self, context: LoadingContext, entries: Iterable[ScanEntry], log: _FailureLog) -> list[str]:
        """Register source entries; return loadable module names in entry order."""
        module_names: list[str] = []
        for entry in entries:
            if not self._config.is_source(entry.name):
                continue

            try:
                derived = derive_module_name(entry.name, self._config.source_suffix)
            except ValueError as e:
                log.record(entry.origin, str(e))
                continue

            if derived is None:
                logger.debug("Skipping root package file %s", entry.origin)
                continue

            module_name, is_package = derived
            try:
                context.register(module_name, entry, is_package=is_package)
            except DiscoveryError as e:
                log.record_error(e)
                continue
            module_names.append(module_name)
        return module_names

    def _load(
        self,
        catalog: Catalog,
        context: LoadingContext,
        module_names: list[str],
        log: _FailureLog,
    ) -> None:
        if not module_names:
            return

        with context.activated():
            for module_name in module_names:
                try:
                    module = context.load(module_name)
                except DiscoveryError as e:
                    log.record_error(e)
                    continue

                origin = module.__spec__.origin if module.__spec__ else None
                for cls in top_level_classes(module):
                    handle = TypeHandle(
                        name=canonical_name(module_name, cls.__name__),
                        cls=cls,
                        origin=origin,
                        scope=context,
                    )
                    if handle.name in catalog:
                        logger.debug("Replacing %s with class from %s", handle.name, origin)
                    catalog._store(handle)  # noqa: SLF001

    def _in_skipped_directory(self, entry_name: str) -> bool:
        segments = entry_name.replace("\\", "/").split("/")[:-1]
        return any(segment in self._config.skip_directories for segment in segments)


def load_archive(path: PathLike, config: LoaderConfig | None = None) -> tuple[Catalog, LoadReport]:
    """Scan a zip-format archive. See CatalogLoader.load_archive."""
    return CatalogLoader(config).load_archive(path)


def load_directory(
    path: PathLike,
    include_nested_archives: bool = False,
    config: LoaderConfig | None = None,
) -> tuple[Catalog, LoadReport]:
    """Scan a directory tree. See CatalogLoader.load_directory."""
    return CatalogLoader(config).load_directory(path, include_nested_archives)


def add(catalog: Catalog, path: PathLike, config: LoaderConfig | None = None) -> LoadReport:
    """Scan into an existing catalog. See CatalogLoader.add."""
    return CatalogLoader(config).add(catalog, path)
