"""Discovery exceptions."""

from __future__ import annotations

from reflectkit.domain.exceptions.base import ReflectKitError


class DiscoveryError(ReflectKitError):
    """Single scan entry could not be read or loaded.

    Never escapes a load call: the loader records it as a LoadFailure
    and moves on to the next entry.

    Attributes:
        path: Entry that failed (file path or archive member path)
        reason: Why loading failed
    """

    def __init__(self, path: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not path:
            raise ValueError("path must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class SourceUnavailableError(ReflectKitError):
    """Top-level scan path cannot be opened or listed.

    Attributes:
        path: Path passed to the load call
        reason: Why it cannot be scanned
    """

    def __init__(self, path: str, reason: str) -> None:
        if not path:
            raise ValueError("path must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan {path}: {reason}")
