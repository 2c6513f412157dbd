"""Singleton State.

Provides the lazily created NeovimTool shared by all handlers. The tool is
built from environment settings on first access, or from explicit overrides
set by the entry point via configure_tool().
"""

from typing import TYPE_CHECKING, Optional

from nvimtool.config import ToolSettings, get_settings
from nvimtool.tool_utils.logging_config import get_logger

if TYPE_CHECKING:
    from nvimtool.core.tool import NeovimTool

logger = get_logger(__name__)

# Module-level singletons (lazy-initialized)
_tool: "NeovimTool | None" = None
_settings: Optional[ToolSettings] = None


def configure_tool(
    root_dir: Optional[str] = None, nvim_bin: Optional[str] = None
) -> ToolSettings:
    """Set the settings used for the tool singleton.

    Drops any existing tool so the next get_tool() call picks them up.
    """
    global _tool, _settings
    _settings = get_settings(root_dir=root_dir, nvim_bin=nvim_bin)
    _tool = None
    logger.info(
        f"Tool configured: nvim={_settings.nvim_bin}, root={_settings.root_dir}"
    )
    return _settings


def get_tool_settings() -> ToolSettings:
    """Get the active settings, reading the environment if none were set."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def get_tool() -> "NeovimTool":
    """Get or create the NeovimTool singleton."""
    global _tool
    if _tool is None:
        from nvimtool.core.tool import NeovimTool

        logger.debug("Initializing NeovimTool singleton")
        _tool = NeovimTool.from_settings(get_tool_settings())
    return _tool


def reset_state() -> None:
    """Reset all singletons (for testing only)."""
    global _tool, _settings
    logger.debug("Resetting headless state singletons")
    _tool = None
    _settings = None
