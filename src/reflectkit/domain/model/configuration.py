"""Loader configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ARCHIVE_SUFFIXES = frozenset({".zip", ".pyz", ".whl", ".egg"})
DEFAULT_SKIP_DIRECTORIES = frozenset({"__pycache__"})


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Scan configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        source_suffix: Extension of loadable source files
        archive_suffixes: Extensions treated as zip-format archives
        skip_directories: Directory names never descended into
        include_nested_archives: Default for directory scans when the
            caller does not pass the flag (add() uses it)
    """

    source_suffix: str = ".py"
    archive_suffixes: frozenset[str] = DEFAULT_ARCHIVE_SUFFIXES
    skip_directories: frozenset[str] = DEFAULT_SKIP_DIRECTORIES
    include_nested_archives: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source_suffix.startswith(".") or len(self.source_suffix) < 2:
            raise ValueError(f"source_suffix must look like '.ext', got {self.source_suffix!r}")

        for suffix in self.archive_suffixes:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"archive suffix must look like '.ext', got {suffix!r}")

        if self.source_suffix in self.archive_suffixes:
            raise ValueError(f"source_suffix {self.source_suffix!r} is also an archive suffix")

    def is_archive(self, name: str) -> bool:
        """Check if a file name carries an archive suffix."""
        lowered = name.lower()
        return any(lowered.endswith(suffix) for suffix in self.archive_suffixes)

    def is_source(self, name: str) -> bool:
        """Check if a file name carries the source suffix."""
        return name.endswith(self.source_suffix)
