"""Health Check Handler.

Provides engine health and status information. This is the engine's own
health, not Neovim's :checkhealth (that is the `health` tool action).
"""

import shutil
import time
from typing import Any

from nvimtool import __version__
from nvimtool.headless.lifecycle import get_session_id, get_start_time
from nvimtool.headless.responses import success_response
from nvimtool.headless.state import get_tool_settings
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)

VERSION = __version__


def handle_get_health(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Get engine health status.

    Returns version, uptime, and the nvim binary and root directory the
    tool will use.

    Args:
        cmd_id: IPC command identifier.
        payload: Command payload (unused).

    Returns:
        Success response with health data.
    """
    settings = get_tool_settings()
    nvim_path = shutil.which(settings.nvim_bin)
    uptime = time.time() - get_start_time()

    return success_response(
        cmd_id,
        {
            "version": VERSION,
            "sessionId": get_session_id(),
            "uptimeSeconds": round(uptime, 1),
            "nvimBinary": settings.nvim_bin,
            "nvimPath": nvim_path,
            "nvimAvailable": nvim_path is not None,
            "rootDir": str(settings.root_dir),
        },
    )
