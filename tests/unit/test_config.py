"""Unit tests for settings loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tocfilter.config import (
    CONFIG_FILE_ENV,
    CONFIG_FILE_NAME,
    FilterSettings,
    LoggingSettings,
    Settings,
    config_file_candidates,
    find_config_file,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaults:
    def test_filter_name(self) -> None:
        assert FilterSettings().name == "toc"

    def test_logging_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.enabled is False
        assert settings.level == "WARNING"
        assert settings.format == "text"


class TestSources:
    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOCFILTER__LOGGING__LEVEL", "DEBUG")
        monkeypatch.setenv("TOCFILTER__FILTER__NAME", "contents")
        settings = Settings()
        assert settings.logging.level == "DEBUG"
        assert settings.filter.name == "contents"

    def test_init_args_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOCFILTER__FILTER__NAME", "contents")
        settings = Settings(filter={"name": "toc"})
        assert settings.filter.name == "toc"

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            Settings(logging={"level": "LOUD"})


class TestConfigFile:
    """The YAML file is found when Settings is built, not at import."""

    def test_explicit_file_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "site.yaml"
        config.write_text("filter:\n  name: contents\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_FILE_ENV, str(config))

        assert find_config_file() == config
        assert Settings().filter.name == "contents"

    def test_file_in_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / CONFIG_FILE_NAME).write_text(
            "logging:\n  enabled: true\n  format: json\n", encoding="utf-8"
        )

        settings = Settings()
        assert settings.logging.enabled is True
        assert settings.logging.format == "json"

    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "site.yaml"
        config.write_text("filter:\n  name: from_file\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_FILE_ENV, str(config))
        monkeypatch.setenv("TOCFILTER__FILTER__NAME", "from_env")

        assert Settings().filter.name == "from_env"

    def test_explicit_file_checked_first(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_FILE_ENV, "/etc/site/toc.yaml")
        assert str(config_file_candidates()[0]) == "/etc/site/toc.yaml"

    def test_missing_explicit_file_is_skipped(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "absent.yaml"))
        (tmp_path / CONFIG_FILE_NAME).write_text("filter:\n  name: local\n", encoding="utf-8")

        assert Settings().filter.name == "local"
