"""
Nvim Runner - single-shot headless Neovim invocations.

Launches `nvim --headless -c <command> -c qa!` in the configured root
directory, buffers stdout and stderr until the process exits, and folds
every outcome into an ExecutionResult. There is no timeout and no retry: a
hung nvim blocks its request.

Process launching sits behind the ProcessExecutor interface so tests can
substitute a fake without spawning anything.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from nvimtool.models.contracts import ExecutionResult
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)

QUIT_COMMAND = "qa!"


@dataclass(frozen=True)
class ProcessOutput:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: str
    stderr: str


class ProcessExecutor(Protocol):
    """Runs an external command and returns its captured output."""

    async def execute(self, argv: Sequence[str], cwd: Path) -> ProcessOutput: ...


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class AsyncioProcessExecutor:
    """ProcessExecutor backed by asyncio subprocesses (no shell)."""

    async def execute(self, argv: Sequence[str], cwd: Path) -> ProcessOutput:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(cwd),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        returncode = proc.returncode if proc.returncode is not None else -1
        return ProcessOutput(returncode, _decode(stdout), _decode(stderr))


class NvimRunner:
    """Runs one Neovim command per call in headless batch mode."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        binary: str = "nvim",
        executor: Optional[ProcessExecutor] = None,
    ):
        self.root_dir = Path(root_dir)
        self.binary = binary
        self._executor = executor or AsyncioProcessExecutor()

    def build_argv(self, command: str) -> list[str]:
        """Argument vector: the command first, then an unconditional quit."""
        return [self.binary, "--headless", "-c", command, "-c", QUIT_COMMAND]

    async def run(self, command: str) -> ExecutionResult:
        """Execute a resolved command and normalize the outcome.

        Returns:
            success with stdout on exit code 0; otherwise error with stderr,
            else stdout, else a description of the failure.
        """
        argv = self.build_argv(command)
        logger.info(f"Running nvim command '{command}' in {self.root_dir}")

        try:
            result = await self._executor.execute(argv, self.root_dir)
        except OSError as e:
            logger.warning(f"Failed to start {self.binary}: {e}")
            return ExecutionResult.failure(f"Failed to start {self.binary}: {e}")

        if result.returncode == 0:
            return ExecutionResult.success(result.stdout)

        logger.warning(
            f"nvim command '{command}' failed with exit code {result.returncode}"
        )
        return ExecutionResult.failure(
            result.stderr
            or result.stdout
            or f"{self.binary} exited with code {result.returncode}"
        )
