"""Headless Engine Lifecycle Management.

Handles session initialization:
- Session ID generation and start time
- Root logger configuration
- stdout/stderr redirection in HTTP mode
"""

import logging
import sys
import time
import uuid
from typing import Union

from nvimtool.tool_utils.logging_config import (
    StreamToLogger,
    configure_root_logger,
    get_logger,
)

logger = get_logger(__name__)

# Module-level session state
_session_id: str = "unknown"
_start_time: float = 0.0


def get_session_id() -> str:
    """Get the current session ID.

    Returns:
        UUID string identifying this engine session.
    """
    return _session_id


def get_start_time() -> float:
    """Get the session start timestamp.

    Returns:
        Unix timestamp when the session was initialized.
    """
    return _start_time


def setup_session(
    http_mode: bool = False, log_level: Union[int, str] = logging.INFO
) -> str:
    """Initialize a new engine session.

    Creates a unique session ID and configures logging.

    Args:
        http_mode: If True, redirect stdout/stderr to loggers (for Echo-Bridge).
        log_level: Root log level.

    Returns:
        The generated session ID.

    Note:
        In stdin mode stdout carries IPC responses only, so logging always
        goes to stderr.
    """
    global _session_id, _start_time

    _session_id = str(uuid.uuid4())
    _start_time = time.time()

    configure_root_logger(level=log_level, session_id=_session_id)

    if http_mode:
        sys.stdout = StreamToLogger(get_logger("STDOUT"), logging.INFO)
        sys.stderr = StreamToLogger(get_logger("STDERR"), logging.WARNING)

    logger.info(f"Session started: {_session_id}")
    return _session_id
