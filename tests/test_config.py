"""Tests for settings resolution."""

import logging
from pathlib import Path

from nvimtool.config import (
    DEFAULT_ECHO_TOKEN,
    DEFAULT_NVIM_BIN,
    ECHO_TOKEN_ENV,
    LOG_LEVEL_ENV,
    NVIM_BIN_ENV,
    ROOT_DIR_ENV,
    get_settings,
)


class TestGetSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        for key in (ROOT_DIR_ENV, NVIM_BIN_ENV, ECHO_TOKEN_ENV, LOG_LEVEL_ENV):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.chdir(tmp_path)

        settings = get_settings()

        assert settings.root_dir == tmp_path.resolve()
        assert settings.nvim_bin == DEFAULT_NVIM_BIN
        assert settings.echo_token == DEFAULT_ECHO_TOKEN
        assert settings.log_level == "INFO"

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ROOT_DIR_ENV, str(tmp_path))
        monkeypatch.setenv(NVIM_BIN_ENV, "nvim-nightly")
        monkeypatch.setenv(ECHO_TOKEN_ENV, "s3cret")
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        settings = get_settings()

        assert settings.root_dir == tmp_path.resolve()
        assert settings.nvim_bin == "nvim-nightly"
        assert settings.echo_token == "s3cret"
        assert settings.log_level == "DEBUG"

    def test_arguments_override_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ROOT_DIR_ENV, "/somewhere/else")
        monkeypatch.setenv(NVIM_BIN_ENV, "nvim-nightly")

        settings = get_settings(root_dir=str(tmp_path), nvim_bin="/usr/bin/nvim")

        assert settings.root_dir == tmp_path.resolve()
        assert settings.nvim_bin == "/usr/bin/nvim"

    def test_expands_user(self, monkeypatch):
        settings = get_settings(root_dir="~")

        assert settings.root_dir == Path.home().resolve()

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch, caplog):
        monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")

        with caplog.at_level(logging.WARNING, logger="nvimtool.config"):
            settings = get_settings()

        assert settings.log_level == "INFO"
        assert "VERBOSE" in caplog.text
        assert logging.getLevelName(settings.log_level) == logging.INFO

    def test_warn_alias_is_accepted(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "warn")

        assert get_settings().log_level == "WARN"
