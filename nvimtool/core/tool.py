"""
Neovim Tool

Single structured entry point: validate the request, resolve it through the
command table, run it in headless nvim and return the normalized result.
"""

from typing import Any, Optional

from nvimtool.config import ToolSettings, get_settings
from nvimtool.core.commands import resolve_command
from nvimtool.core.nvim_runner import NvimRunner, ProcessExecutor
from nvimtool.core.validation import validate_request
from nvimtool.models.contracts import ACTION_NAMES, ExecutionResult
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)

TOOL_NAME = "NeovimTool"

TOOL_DESCRIPTION = """Manages Neovim operations including:
- Running health checks
- Managing plugins (status, update, clean, install)
- Running formatters
- Managing LSP servers

Examples:
- Check Neovim health: { action: "health" }
- Update plugins: { action: "plugins", subAction: "update" }
- Format a file: { action: "format", subAction: "run", target: "path/to/file" }
- Install LSP server: { action: "lsp", subAction: "install", target: "lua_ls" }"""

INPUT_SCHEMA: dict[str, Any] = {
    "json": {
        "type": "object",
        "properties": {
            "action": {
                "type": "string",
                "enum": list(ACTION_NAMES),
                "description": (
                    "The action to perform:\n"
                    "- health: Run health checks\n"
                    "- plugins: Manage plugins\n"
                    "- format: Run formatters\n"
                    "- lsp: Manage LSP servers"
                ),
            },
            "subAction": {
                "type": "string",
                "description": (
                    "Sub-action to perform:\n"
                    "- For plugins: status, update, clean, install\n"
                    "- For format: run, check\n"
                    "- For lsp: info, install, uninstall"
                ),
            },
            "target": {
                "type": "string",
                "description": (
                    "Target for the action (e.g., plugin name, file path, "
                    "LSP server name)"
                ),
            },
        },
        "required": ["action"],
        "additionalProperties": False,
    }
}


class NeovimTool:
    """Validates, resolves and runs Neovim management requests."""

    name = TOOL_NAME
    description = TOOL_DESCRIPTION
    input_schema = INPUT_SCHEMA

    def __init__(self, runner: NvimRunner):
        self.runner = runner

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ToolSettings] = None,
        executor: Optional[ProcessExecutor] = None,
    ) -> "NeovimTool":
        settings = settings or get_settings()
        return cls(NvimRunner(settings.root_dir, settings.nvim_bin, executor))

    def resolve(self, params: Any) -> str:
        """Validate and resolve a request without launching anything."""
        return resolve_command(validate_request(params))

    async def execute(self, params: Any) -> ExecutionResult:
        """Run a request end to end.

        Raises:
            SchemaViolation, MissingTarget, UnsafeTarget: before any process
                is launched.
            UnknownAction: the command table has no row for the action.
        """
        command = self.resolve(params)
        return await self.runner.run(command)
