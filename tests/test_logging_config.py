"""Tests for logging configuration."""

import io
import logging

import pytest
from rich.logging import RichHandler

from nvimtool.tool_utils.logging_config import (
    RedactionFilter,
    StreamToLogger,
    ToolFormatter,
    configure_root_logger,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def make_record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("nvimtool.test", level, __file__, 1, msg, None, None)


class TestRedactionFilter:
    @pytest.mark.parametrize(
        "message,secret",
        [
            ("Authorization: Bearer abc.def-123", "abc.def-123"),
            ("echo token=hunter2 accepted", "hunter2"),
            ('{"token": "hunter2"}', "hunter2"),
            ("jwt eyJhbGciOi.eyJzdWIiOi.sig", "eyJhbGciOi"),
        ],
    )
    def test_redacts_secrets(self, message, secret):
        record = make_record(message)

        assert RedactionFilter().filter(record) is True
        assert secret not in record.msg
        assert "[TOKEN]" in record.msg

    def test_leaves_plain_messages(self):
        record = make_record("Running nvim command 'Lazy update'")

        RedactionFilter().filter(record)

        assert record.msg == "Running nvim command 'Lazy update'"


class TestToolFormatter:
    def test_includes_level_and_name(self):
        line = ToolFormatter().format(make_record("hello", logging.WARNING))

        assert "WARN" in line
        assert "nvimtool.test: hello" in line


class TestConfigureRootLogger:
    def test_installs_single_plain_handler(self, restore_root_logger):
        configure_root_logger(logging.DEBUG, use_rich=False)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ToolFormatter)
        assert root.level == logging.DEBUG

    def test_rich_handler(self, restore_root_logger):
        configure_root_logger("INFO", use_rich=True)

        assert isinstance(logging.getLogger().handlers[0], RichHandler)

    def test_reconfigure_replaces_handlers(self, restore_root_logger):
        configure_root_logger(use_rich=False)
        configure_root_logger(use_rich=False)

        assert len(logging.getLogger().handlers) == 1


class TestStreamToLogger:
    def test_writes_lines_to_logger(self, caplog):
        logger = logging.getLogger("nvimtool.stdout")
        stream = StreamToLogger(logger, logging.INFO)

        with caplog.at_level(logging.INFO, logger="nvimtool.stdout"):
            stream.write("first\nsecond\n")

        assert [r.getMessage() for r in caplog.records] == ["first", "second"]

    def test_has_no_fileno(self):
        stream = StreamToLogger(logging.getLogger("x"), logging.INFO)

        with pytest.raises(io.UnsupportedOperation):
            stream.fileno()
