"""Tests for domain/model/configuration.py."""

import pytest

from reflectkit.domain.model.configuration import LoaderConfig


class TestLoaderConfigDefaults:
    """Tests for default configuration."""

    def test_defaults(self) -> None:
        """Defaults cover .py sources and common archive suffixes."""
        config = LoaderConfig()
        assert config.source_suffix == ".py"
        assert ".zip" in config.archive_suffixes
        assert "__pycache__" in config.skip_directories
        assert config.include_nested_archives is False

    def test_is_frozen(self) -> None:
        """Configuration is immutable."""
        config = LoaderConfig()
        with pytest.raises(AttributeError):
            config.source_suffix = ".pyw"  # type: ignore[misc]


class TestLoaderConfigValidation:
    """Tests for FAIL-FIRST validation."""

    def test_source_suffix_without_dot_raises(self) -> None:
        """Source suffix must start with a dot."""
        with pytest.raises(ValueError, match="source_suffix"):
            LoaderConfig(source_suffix="py")

    def test_bare_dot_raises(self) -> None:
        """A lone dot is not a suffix."""
        with pytest.raises(ValueError, match="source_suffix"):
            LoaderConfig(source_suffix=".")

    def test_bad_archive_suffix_raises(self) -> None:
        """Archive suffixes must start with a dot."""
        with pytest.raises(ValueError, match="archive suffix"):
            LoaderConfig(archive_suffixes=frozenset({"zip"}))

    def test_overlapping_suffixes_raise(self) -> None:
        """Source suffix cannot double as an archive suffix."""
        with pytest.raises(ValueError, match="also an archive suffix"):
            LoaderConfig(source_suffix=".zip")


class TestLoaderConfigPredicates:
    """Tests for is_archive and is_source."""

    def test_is_archive_case_insensitive(self) -> None:
        """Archive detection ignores case."""
        config = LoaderConfig()
        assert config.is_archive("lib.zip")
        assert config.is_archive("LIB.ZIP")
        assert config.is_archive("tool-1.0-py3-none-any.whl")
        assert not config.is_archive("mod.py")

    def test_is_source(self) -> None:
        """Only the source suffix counts as source."""
        config = LoaderConfig()
        assert config.is_source("mod.py")
        assert not config.is_source("mod.pyc")
        assert not config.is_source("notes.txt")
