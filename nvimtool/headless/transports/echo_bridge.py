"""Echo-Bridge HTTP Transport.

Development transport that mirrors the stdin/stdout IPC protocol over HTTP:
- POST /command - Execute IPC command (same format as stdin)
- GET / - Server status
- GET /health - Health check
"""

from contextlib import asynccontextmanager
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from nvimtool import __version__
from nvimtool.headless.dispatcher import dispatch
from nvimtool.headless.lifecycle import get_session_id
from nvimtool.headless.state import get_tool_settings
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)

VERSION = __version__

# Commands that don't need logging (high frequency)
QUIET_COMMANDS = {
    "get_health",
    "get_engine_health",
    "get_tool_schema",
}


def create_app(echo_token: Optional[str] = None) -> FastAPI:
    """Build the Echo-Bridge FastAPI application.

    Args:
        echo_token: Token expected in the X-Echo-Bridge-Token header.
            Defaults to the configured NVIMTOOL_ECHO_TOKEN.
    """
    token_expected = echo_token or get_tool_settings().echo_token

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Echo-Bridge started, session: {get_session_id()}")
        yield
        logger.info("Echo-Bridge shutting down")

    app = FastAPI(
        title="nvimtool Echo-Bridge",
        description="Development HTTP transport for the headless Neovim tool",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/command")
    async def http_command(request: Request) -> dict[str, Any]:
        """Execute an IPC command via HTTP.

        Request Headers:
            X-Echo-Bridge-Token: Authentication token

        Request Body:
            {"command": "...", "id": 1, "payload": {...}}
        """
        token = request.headers.get("X-Echo-Bridge-Token")
        if token != token_expected:
            logger.warning("Echo-Bridge: Unauthorized request")
            return {
                "id": 0,
                "status": "error",
                "error": {"code": "UNAUTHORIZED", "message": "Invalid token"},
            }

        try:
            cmd = await request.json()
            command = cmd.get("command", "")

            if command not in QUIET_COMMANDS:
                logger.info(f"Echo-Bridge: {command}")

            return await dispatch(cmd)
        except Exception as e:
            logger.error(f"Echo-Bridge Error: {e}", exc_info=True)
            return {
                "id": 0,
                "status": "error",
                "error": {"code": "HTTP_ERROR", "message": str(e)},
            }

    @app.get("/")
    async def http_root() -> dict[str, str]:
        """Server status endpoint."""
        return {
            "status": "online",
            "mode": "Echo-Bridge",
            "version": VERSION,
        }

    @app.get("/health")
    async def http_health() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "ok",
            "version": VERSION,
            "sessionId": get_session_id(),
        }

    return app


def run_echo_bridge(host: str = "127.0.0.1", port: int = 5001) -> None:
    """Run the Echo-Bridge HTTP server.

    Args:
        host: Bind address.
        port: Listen port (default: 5001).
    """
    app = create_app()
    logger.info(f"Starting Echo-Bridge on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_config=None)
