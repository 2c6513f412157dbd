"""IPC Envelopes for the Neovim engine.

Every reply to an IPC command is one of two envelopes:

    {"id": 1, "status": "success", "data": {...}}
    {"id": 1, "status": "error", "error": {"code": "...", "message": "..."}}

The error envelope is reserved for requests the engine refused or could not
handle. A request that reached nvim always gets the success envelope, with the
ExecutionResult as data, even when nvim itself failed:

    {"id": 1, "status": "success", "data": {"status": "error", "output": "..."}}
"""

from typing import Any

from nvimtool.core.errors import ContractError
from nvimtool.models.contracts import ExecutionResult


def success_response(cmd_id: int, data: Any) -> dict[str, Any]:
    """Wrap handler data in the success envelope."""
    return {"id": cmd_id, "status": "success", "data": data}


def error_response(cmd_id: int, code: str, message: str) -> dict[str, Any]:
    """Build the error envelope.

    Args:
        cmd_id: IPC command identifier for response correlation.
        code: Stable error code, e.g. "MISSING_TARGET" or "UNKNOWN_COMMAND".
        message: Human-readable reason.
    """
    return {"id": cmd_id, "status": "error", "error": {"code": code, "message": message}}


def result_response(cmd_id: int, result: ExecutionResult) -> dict[str, Any]:
    """Envelope for a request that ran nvim, whatever its exit status."""
    return success_response(cmd_id, result.model_dump())


def rejection_response(cmd_id: int, error: ContractError) -> dict[str, Any]:
    """Envelope for a request refused before any process was launched.

    The error code is the contract error's own code (SCHEMA_VIOLATION,
    MISSING_TARGET or UNSAFE_TARGET), so callers can branch on it.
    """
    return error_response(cmd_id, error.code, error.message)
