"""
Tool Data Contracts

Pydantic models for the request accepted by the Neovim tool and the
normalized result it returns.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ActionName = Literal["health", "plugins", "format", "lsp"]

ACTION_NAMES: tuple[str, ...] = ("health", "plugins", "format", "lsp")


# =============================================================================
# REQUEST
# =============================================================================


class ToolRequest(BaseModel):
    """
    Structured request for a single Neovim operation.

    Field names on the wire are `action`, `subAction` and `target`. No other
    fields are accepted and values are never coerced.
    """

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    action: ActionName = Field(..., description="Top-level operation category")
    sub_action: Optional[str] = Field(
        None, alias="subAction", description="Refinement within the action"
    )
    target: Optional[str] = Field(
        None, description="Plugin name, file path or LSP server name"
    )

    def to_payload(self) -> dict:
        """Wire representation, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# RESULT
# =============================================================================


class ExecutionResult(BaseModel):
    """Normalized outcome of one headless Neovim invocation."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success", "error"]
    output: str

    @classmethod
    def success(cls, output: str) -> "ExecutionResult":
        return cls(status="success", output=output)

    @classmethod
    def failure(cls, output: str) -> "ExecutionResult":
        return cls(status="error", output=output)
