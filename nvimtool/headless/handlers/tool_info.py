"""Tool Introspection Handlers."""

from typing import Any

from nvimtool.core.commands import describe_table
from nvimtool.core.tool import INPUT_SCHEMA, TOOL_DESCRIPTION, TOOL_NAME
from nvimtool.headless.responses import success_response


def handle_get_tool_schema(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Describe the tool to a caller that builds requests for it.

    Args:
        cmd_id: IPC command identifier.
        payload: Command payload (unused).

    Returns:
        Success response with the tool name, description and JSON input schema.
    """
    return success_response(
        cmd_id,
        {
            "name": TOOL_NAME,
            "description": TOOL_DESCRIPTION,
            "inputSchema": INPUT_SCHEMA,
        },
    )


def handle_get_commands(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """List every row of the command table.

    Args:
        cmd_id: IPC command identifier.
        payload: Command payload (unused).

    Returns:
        Success response with {"commands": [...]}, one entry per
        action/subAction pair, including which rows need a target.
    """
    return success_response(cmd_id, {"commands": describe_table()})
