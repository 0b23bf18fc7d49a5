"""Tests for domain/model/load_report.py."""

import pytest

from reflectkit.domain.model.load_report import LoadFailure, LoadReport


class TestLoadFailure:
    """Tests for LoadFailure."""

    def test_valid(self) -> None:
        """Failure renders as path and reason."""
        failure = LoadFailure("a/b.py", "SyntaxError: invalid syntax")
        assert str(failure) == "a/b.py: SyntaxError: invalid syntax"

    def test_empty_path_raises(self) -> None:
        """Empty path is rejected."""
        with pytest.raises(ValueError, match="path"):
            LoadFailure("", "reason")

    def test_empty_reason_raises(self) -> None:
        """Empty reason is rejected."""
        with pytest.raises(ValueError, match="reason"):
            LoadFailure("a.py", "")


class TestLoadReport:
    """Tests for LoadReport."""

    def test_empty_is_falsy(self) -> None:
        """Empty report is falsy and has no paths."""
        report = LoadReport()
        assert not report
        assert len(report) == 0
        assert report.paths == ()

    def test_preserves_order(self) -> None:
        """Failures keep insertion order."""
        report = LoadReport((LoadFailure("b.py", "x"), LoadFailure("a.py", "y")))
        assert report
        assert report.paths == ("b.py", "a.py")
        assert [f.reason for f in report] == ["x", "y"]
