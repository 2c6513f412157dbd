"""Handler Registry.

This module exports all command handlers and provides the handler registry
used by the dispatcher for command routing.

Handler Naming Convention:
    - Handlers are named `handle_{command_name}`
    - Async handlers use `async def`
    - Sync handlers use `def`
    - All handlers return `dict[str, Any]` matching IPC contract

Handler Domains:
    - health: Engine health and status
    - nvim: Running and resolving Neovim tool requests
    - tool_info: Tool schema and command table introspection
"""

from typing import Any, Callable, Coroutine, Union

from nvimtool.headless.handlers.health import handle_get_health
from nvimtool.headless.handlers.nvim import handle_nvim_execute, handle_nvim_resolve
from nvimtool.headless.handlers.tool_info import (
    handle_get_commands,
    handle_get_tool_schema,
)

# Type alias for handler functions
HandlerFunc = Union[
    Callable[[int, dict[str, Any]], dict[str, Any]],
    Callable[[int, dict[str, Any]], Coroutine[Any, Any, dict[str, Any]]],
]

# Handler registry mapping command names to handler functions
HANDLER_REGISTRY: dict[str, HandlerFunc] = {
    # Health
    "get_health": handle_get_health,
    "get_engine_health": handle_get_health,
    # Neovim
    "nvim_execute": handle_nvim_execute,
    "run_tool": handle_nvim_execute,
    "nvim_resolve": handle_nvim_resolve,
    # Tool info
    "get_tool_schema": handle_get_tool_schema,
    "get_commands": handle_get_commands,
}

__all__ = [
    # Registry
    "HANDLER_REGISTRY",
    "HandlerFunc",
    # Health
    "handle_get_health",
    # Neovim
    "handle_nvim_execute",
    "handle_nvim_resolve",
    # Tool info
    "handle_get_tool_schema",
    "handle_get_commands",
]
