"""Headless Engine Core.

This package wraps the Neovim tool in an IPC engine:
- dispatcher: Command routing and dispatch logic
- handlers: Handlers for tool execution, introspection and health
- transports: IPC layer (Stdin/Stdout and Echo-Bridge HTTP)
- responses: Standard response format helpers
- state: Lazily created NeovimTool singleton
- lifecycle: Session initialization
"""

# Response helpers
from nvimtool.headless.responses import (
    error_response,
    rejection_response,
    result_response,
    success_response,
)

# State singletons
from nvimtool.headless.state import (
    configure_tool,
    get_tool,
    get_tool_settings,
    reset_state,
)

# Lifecycle management
from nvimtool.headless.lifecycle import (
    get_session_id,
    get_start_time,
    setup_session,
)

# Dispatcher
from nvimtool.headless.dispatcher import (
    dispatch,
    get_available_commands,
    is_command_registered,
)

__all__ = [
    # Responses
    "success_response",
    "error_response",
    "result_response",
    "rejection_response",
    # State
    "configure_tool",
    "get_tool",
    "get_tool_settings",
    "reset_state",
    # Lifecycle
    "setup_session",
    "get_session_id",
    "get_start_time",
    # Dispatcher
    "dispatch",
    "get_available_commands",
    "is_command_registered",
]
