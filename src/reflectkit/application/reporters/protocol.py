"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reflectkit.domain.model.catalog import Catalog
    from reflectkit.domain.model.load_report import LoadReport


class ReporterProtocol(Protocol):
    """Protocol for scan result reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, catalog: Catalog, load_report: LoadReport) -> str:
        """Format a scan result as string.

        Args:
            catalog: Catalog produced by the scan.
            load_report: Failures recorded during the scan.

        Returns:
            Formatted string representation.
        """
        ...
