"""Neovim Handlers.

Runs and resolves NeovimTool requests. The IPC payload is the tool request
itself: {"action": ..., "subAction": ..., "target": ...}.

Contract errors raised here are turned into error envelopes by the dispatcher.
"""

from typing import Any

from nvimtool.core.commands import resolve_command
from nvimtool.core.validation import validate_request
from nvimtool.headless.responses import result_response, success_response
from nvimtool.headless.state import get_tool


async def handle_nvim_execute(cmd_id: int, payload: Any) -> dict[str, Any]:
    """Run a Neovim request in headless mode.

    Args:
        cmd_id: IPC command identifier.
        payload: Tool request.

    Returns:
        Success response whose data is the ExecutionResult (which itself may
        have status "error" when nvim failed).

    Raises:
        ContractError: The request was refused before launching nvim.
    """
    result = await get_tool().execute(payload)
    return result_response(cmd_id, result)


def handle_nvim_resolve(cmd_id: int, payload: Any) -> dict[str, Any]:
    """Resolve a request to its command and argv without running it."""
    command = resolve_command(validate_request(payload))

    return success_response(
        cmd_id,
        {
            "command": command,
            "argv": get_tool().runner.build_argv(command),
        },
    )
