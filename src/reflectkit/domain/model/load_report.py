"""Load report: per-entry failures of a scan."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoadFailure:
    """Single entry that could not be loaded.

    Attributes:
        path: File path or archive member path
        reason: Why it failed
    """

    path: str
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class LoadReport:
    """Ordered failures accumulated during a scan.

    Empty report means every loadable entry was loaded.
    """

    failures: tuple[LoadFailure, ...] = ()

    def __len__(self) -> int:
        return len(self.failures)

    def __iter__(self) -> Iterator[LoadFailure]:
        return iter(self.failures)

    def __bool__(self) -> bool:
        return bool(self.failures)

    @property
    def paths(self) -> tuple[str, ...]:
        """Failed paths in report order."""
        return tuple(f.path for f in self.failures)
