"""Stdin/Stdout IPC Transport.

Production transport for communication with a parent process.
Uses JSON lines over stdin/stdout; logs never go to stdout.
"""

import asyncio
import json
import os
import sys
from concurrent.futures import ThreadPoolExecutor

from nvimtool import __version__
from nvimtool.headless.dispatcher import dispatch
from nvimtool.headless.lifecycle import get_session_id
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)

VERSION = __version__


def _emit(message: dict) -> None:
    print(json.dumps(message))
    sys.stdout.flush()


async def run_stdin_loop() -> None:
    """Run the stdin/stdout command loop.

    Protocol:
        1. On startup, emits a ready signal: {"status": "ready", "version": "...", "pid": ...}
        2. Reads one JSON command per line from stdin
        3. Dispatches command to handler
        4. Writes JSON response to stdout
        5. Repeats until stdin closes or KeyboardInterrupt

    Note:
        Uses a ThreadPoolExecutor for blocking stdin.readline() to avoid
        blocking the asyncio event loop.
    """
    _emit(
        {
            "status": "ready",
            "version": VERSION,
            "pid": os.getpid(),
        }
    )

    logger.info(f"Stdin loop started, session: {get_session_id()}")

    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="stdin")

    while True:
        try:
            line = await loop.run_in_executor(executor, sys.stdin.readline)

            if not line:
                # EOF - parent process closed stdin
                logger.info("Stdin closed, shutting down")
                break

            line = line.strip()
            if not line:
                continue

            try:
                cmd = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid JSON received: {e}")
                _emit(
                    {
                        "id": 0,
                        "status": "error",
                        "error": {
                            "code": "INVALID_JSON",
                            "message": f"Failed to parse JSON: {e}",
                        },
                    }
                )
                continue

            response = await dispatch(cmd)
            _emit(response)

        except KeyboardInterrupt:
            logger.info("Keyboard interrupt, shutting down")
            break
        except Exception as e:
            logger.error(f"Stdin loop error: {e}", exc_info=True)
            _emit(
                {
                    "id": 0,
                    "status": "error",
                    "error": {"code": "INTERNAL_ERROR", "message": str(e)},
                }
            )

    executor.shutdown(wait=False)
    logger.info("Stdin loop terminated")
