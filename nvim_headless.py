#!/usr/bin/env python3
"""nvimtool Headless Engine - Entry Point.

This is the thin entry point for the headless engine.
All logic is in the nvimtool package.

Usage:
    python nvim_headless.py                      # Stdin/stdout IPC mode
    python nvim_headless.py --http               # HTTP Echo-Bridge mode (development)
    python nvim_headless.py --root-dir ~/.config/nvim --nvim /usr/local/bin/nvim
"""

import argparse
import asyncio
import sys

# Configure stdout line buffering
try:
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if reconfig:
        reconfig(line_buffering=True)
except Exception:
    pass

from nvimtool.tool_utils.logging_config import get_logger


def global_exception_handler(exctype, value, tb):
    """Log unhandled exceptions before crashing."""
    logger = get_logger("NvimHeadless")
    logger.critical("Unhandled exception", exc_info=(exctype, value, tb))
    sys.__excepthook__(exctype, value, tb)


sys.excepthook = global_exception_handler


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="nvimtool Headless Engine")
    parser.add_argument(
        "--http", action="store_true", help="Start HTTP server (Echo-Bridge)"
    )
    parser.add_argument("--port", type=int, default=5001, help="HTTP server port")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="HTTP server host")
    parser.add_argument(
        "--root-dir", type=str, default=None, help="Working directory for nvim"
    )
    parser.add_argument("--nvim", type=str, default=None, help="nvim binary to run")
    args = parser.parse_args()

    from nvimtool.headless import configure_tool, setup_session
    from nvimtool.headless.transports import run_echo_bridge, run_stdin_loop

    settings = configure_tool(root_dir=args.root_dir, nvim_bin=args.nvim)
    setup_session(http_mode=args.http, log_level=settings.log_level)

    if args.http:
        run_echo_bridge(args.host, args.port)
    else:
        asyncio.run(run_stdin_loop())


if __name__ == "__main__":
    main()
