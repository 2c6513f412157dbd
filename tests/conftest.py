"""
Pytest fixtures for the Neovim tool.

A fake ProcessExecutor records every launch so tests can assert exactly
what would have been spawned, without nvim installed.
"""

from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from nvimtool.config import ToolSettings
from nvimtool.core.nvim_runner import NvimRunner, ProcessOutput
from nvimtool.core.tool import NeovimTool
from nvimtool.headless import state


# === Fake process executor ===


class FakeExecutor:
    """ProcessExecutor that returns a canned result and records calls."""

    def __init__(
        self,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        raises: Optional[Exception] = None,
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.raises = raises
        self.calls: List[tuple[list[str], Path]] = []

    async def execute(self, argv: Sequence[str], cwd: Path) -> ProcessOutput:
        self.calls.append((list(argv), cwd))
        if self.raises is not None:
            raise self.raises
        return ProcessOutput(self.returncode, self.stdout, self.stderr)

    @property
    def launched(self) -> bool:
        return bool(self.calls)

    @property
    def last_command(self) -> str:
        """The command passed via the first -c flag."""
        argv, _ = self.calls[-1]
        return argv[3]


@pytest.fixture
def executor_factory():
    """Factory for FakeExecutor instances with custom outcomes."""
    return FakeExecutor


@pytest.fixture
def fake_executor():
    """Executor whose process exits 0 with empty output."""
    return FakeExecutor()


@pytest.fixture
def root_dir(tmp_path):
    """Temporary nvim working directory."""
    root = tmp_path / "nvim-config"
    root.mkdir()
    return root


@pytest.fixture
def runner(root_dir, fake_executor):
    return NvimRunner(root_dir, "nvim", fake_executor)


@pytest.fixture
def tool(runner):
    return NeovimTool(runner)


@pytest.fixture
def test_settings(root_dir):
    return ToolSettings(
        root_dir=root_dir,
        nvim_bin="nvim",
        echo_token="test-token",
        log_level="DEBUG",
    )


@pytest.fixture
def installed_tool(monkeypatch, test_settings, fake_executor):
    """Install a fake-backed tool as the headless singleton."""
    state.reset_state()
    fake_tool = NeovimTool.from_settings(test_settings, executor=fake_executor)
    monkeypatch.setattr(state, "_settings", test_settings)
    monkeypatch.setattr(state, "_tool", fake_tool)
    yield fake_tool
    state.reset_state()
