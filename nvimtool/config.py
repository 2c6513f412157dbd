import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from nvimtool.tool_utils.logging_config import get_logger

load_dotenv()

logger = get_logger(__name__)

DEFAULT_NVIM_BIN = "nvim"
DEFAULT_ECHO_TOKEN = "dev-echo-bridge-secret"
DEFAULT_LOG_LEVEL = "INFO"

# ===== ENVIRONMENT KEYS =====
ROOT_DIR_ENV = "NVIMTOOL_ROOT_DIR"
NVIM_BIN_ENV = "NVIMTOOL_NVIM_BIN"
ECHO_TOKEN_ENV = "NVIMTOOL_ECHO_TOKEN"
LOG_LEVEL_ENV = "NVIMTOOL_LOG_LEVEL"


@dataclass(frozen=True)
class ToolSettings:
    """Runtime settings for the headless Neovim tool."""

    root_dir: Path
    nvim_bin: str
    echo_token: str
    log_level: str


def get_settings(
    root_dir: Optional[str] = None, nvim_bin: Optional[str] = None
) -> ToolSettings:
    """Build settings from the environment, with optional overrides.

    Explicit arguments (e.g. from CLI flags) win over environment variables,
    which win over defaults. The root directory defaults to the current
    working directory.
    """
    resolved_root = root_dir or os.getenv(ROOT_DIR_ENV) or os.getcwd()

    log_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(
            f"Unknown {LOG_LEVEL_ENV} value {log_level!r}, using {DEFAULT_LOG_LEVEL}"
        )
        log_level = DEFAULT_LOG_LEVEL

    return ToolSettings(
        root_dir=Path(resolved_root).expanduser().resolve(),
        nvim_bin=nvim_bin or os.getenv(NVIM_BIN_ENV, DEFAULT_NVIM_BIN),
        echo_token=os.getenv(ECHO_TOKEN_ENV, DEFAULT_ECHO_TOKEN),
        log_level=log_level,
    )
