"""Command Dispatcher.

Looks up the handler for an IPC command and applies the engine's error
policy around it:

- unregistered command   -> UNKNOWN_COMMAND
- ContractError          -> its own code (request refused, nothing launched)
- any other exception    -> HANDLER_ERROR, logged with traceback

UnknownAction is deliberately not a ContractError. It signals a request that
slipped past validation, so it lands on the HANDLER_ERROR path.
"""

import inspect
from typing import Any

from nvimtool.core.errors import ContractError
from nvimtool.headless.handlers import HANDLER_REGISTRY, HandlerFunc
from nvimtool.headless.responses import error_response, rejection_response
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)


async def _call(handler: HandlerFunc, cmd_id: int, payload: Any) -> dict[str, Any]:
    response = handler(cmd_id, payload)
    if inspect.isawaitable(response):
        response = await response
    return response


async def dispatch(cmd: dict[str, Any]) -> dict[str, Any]:
    """Run one IPC command and return its response envelope.

    Args:
        cmd: Message with 'command', 'id' and 'payload' keys. A missing
            payload is passed to the handler as None, which tool handlers
            reject as a schema violation.

    Returns:
        Success or error envelope carrying the same id as the command.

    Example:
        >>> await dispatch({"command": "nvim_resolve", "id": 1, "payload": {"action": "lsp"}})
        {"id": 1, "status": "success", "data": {"command": "Mason", "argv": [...]}}
    """
    command = cmd.get("command", "")
    cmd_id = cmd.get("id", 0)

    handler = HANDLER_REGISTRY.get(command)
    if handler is None:
        logger.warning(f"Unknown command received: {command}")
        return error_response(cmd_id, "UNKNOWN_COMMAND", f"Unknown command: {command}")

    try:
        return await _call(handler, cmd_id, cmd.get("payload"))
    except ContractError as e:
        logger.warning(f"'{command}' rejected ({e.code}): {e.message}")
        return rejection_response(cmd_id, e)
    except Exception as e:
        logger.error(f"Handler error for '{command}': {e}", exc_info=True)
        return error_response(cmd_id, "HANDLER_ERROR", str(e))


def get_available_commands() -> list[str]:
    """Registered command names, sorted."""
    return sorted(HANDLER_REGISTRY)


def is_command_registered(command: str) -> bool:
    return command in HANDLER_REGISTRY
