"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output format
- Type table truncation (max_types, show_types)
- Load failure section rendering
"""

import pytest

from reflectkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from reflectkit.domain.model.catalog import Catalog
from reflectkit.domain.model.load_report import LoadFailure, LoadReport
from reflectkit.domain.model.type_handle import TypeHandle


class Alpha:
    pass


class Beta:
    pass


def make_catalog() -> Catalog:
    return Catalog(
        {
            "pkg.Alpha": TypeHandle("pkg.Alpha", Alpha, origin="pkg.py"),
            "pkg.Beta": TypeHandle("pkg.Beta", Beta),
        }
    )


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.show_types is True
        assert config.max_types is None
        assert config.width == 120

    def test_negative_max_types_raises(self) -> None:
        """Negative max_types is rejected."""
        with pytest.raises(ValueError, match="max_types"):
            ConsoleConfig(max_types=-1)

    def test_narrow_width_raises(self) -> None:
        """Too narrow width is rejected."""
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=10)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains CATALOG header."""
        output = ConsoleReporter().report(Catalog(), LoadReport())
        assert "CATALOG" in output
        assert "Types:" in output
        assert "Failures:" in output

    def test_report_lists_types_sorted(self) -> None:
        """report() lists catalog names in sorted order."""
        output = ConsoleReporter().report(make_catalog(), LoadReport())
        assert output.index("pkg.Alpha") < output.index("pkg.Beta")

    def test_report_shows_origin(self) -> None:
        """report() shows the origin of each type."""
        output = ConsoleReporter().report(make_catalog(), LoadReport())
        assert "pkg.py" in output

    def test_hide_types(self) -> None:
        """show_types=False keeps only the summary."""
        output = ConsoleReporter(ConsoleConfig(show_types=False)).report(make_catalog(), LoadReport())
        assert "pkg.Alpha" not in output

    def test_max_types_truncates(self) -> None:
        """max_types limits rows and reports the remainder."""
        output = ConsoleReporter(ConsoleConfig(max_types=1)).report(make_catalog(), LoadReport())
        assert "pkg.Alpha" in output
        assert "pkg.Beta" not in output
        assert "1 more" in output

    def test_no_failure_section_when_clean(self) -> None:
        """No failures section for a clean scan."""
        output = ConsoleReporter().report(make_catalog(), LoadReport())
        assert "LOAD FAILURES" not in output

    def test_failure_section(self) -> None:
        """report() renders each failure path and reason."""
        report = LoadReport((LoadFailure("broken.py", "syntax error"),))
        output = ConsoleReporter().report(Catalog(), report)
        assert "LOAD FAILURES" in output
        assert "broken.py" in output
        assert "syntax error" in output

    def test_markup_in_reason_is_escaped(self) -> None:
        """Brackets in reasons are printed literally, not as markup."""
        report = LoadReport((LoadFailure("x.py", "[bold]not markup[/bold]"),))
        output = ConsoleReporter().report(Catalog(), report)
        assert "[bold]not markup[/bold]" in output
