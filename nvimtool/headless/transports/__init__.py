"""IPC Transport Layer.

This package provides two transport mechanisms for the headless engine:
- stdin_loop: Production transport using stdin/stdout JSON lines
- echo_bridge: Development transport using HTTP/FastAPI

Both transports use the same dispatcher and handler infrastructure.
"""

from nvimtool.headless.transports.stdin_loop import run_stdin_loop
from nvimtool.headless.transports.echo_bridge import create_app, run_echo_bridge

__all__ = [
    "run_stdin_loop",
    "run_echo_bridge",
    "create_app",
]
