from .contracts import ACTION_NAMES, ActionName, ExecutionResult, ToolRequest

__all__ = [
    "ACTION_NAMES",
    "ActionName",
    "ExecutionResult",
    "ToolRequest",
]
