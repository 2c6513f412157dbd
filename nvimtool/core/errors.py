# core/errors.py
"""
Structured error types for the Neovim tool.

Contract errors (schema, missing or unsafe target) are raised before any
process is launched and map to stable error codes at the IPC boundary.
Process failures are never raised; they come back as an ExecutionResult
with status "error".
"""

from typing import Optional


class NvimToolError(Exception):
    """Base error for the Neovim tool."""

    code = "NVIM_TOOL_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "field": self.field,
        }


class ContractError(NvimToolError):
    """Caller-facing request error. No side effects have happened."""


class SchemaViolation(ContractError):
    """Request failed structural validation."""

    code = "SCHEMA_VIOLATION"

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid '{field}': {message}", field=field)


class MissingTarget(ContractError):
    """A sub-action that needs a target was called without one."""

    code = "MISSING_TARGET"

    def __init__(self, action: str, sub_action: str, label: str = "Target"):
        super().__init__(
            f"{label} is required for {action} {sub_action} action "
            f"(missing 'target')",
            field="target",
        )
        self.action = action
        self.sub_action = sub_action


class UnsafeTarget(ContractError):
    """Target contains characters the Ex command line would interpret."""

    code = "UNSAFE_TARGET"

    def __init__(self, target: str, character: str):
        super().__init__(
            f"Target {target!r} contains disallowed character {character!r}",
            field="target",
        )
        self.target = target
        self.character = character


class UnknownAction(NvimToolError):
    """Action has no entry in the command table.

    Unreachable for validated requests; raised as a hard error.
    """

    code = "UNKNOWN_ACTION"

    def __init__(self, action: object):
        super().__init__(f"Unknown action: {action}", field="action")
        self.action = action
