import io
import logging
import re
import sys
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


class RedactionFilter(logging.Filter):
    PATTERNS = [
        (r"(?i)bearer\s+[A-Za-z0-9._~+/=-]+", "Bearer [TOKEN]"),
        (r"(?i)(token[\"']?\s*[:=]\s*[\"']?)[^\s\"',}]+", r"\1[TOKEN]"),
        (r"eyJ[A-Za-z0-9-_=]+\.[A-Za-z0-9-_=]+\.?[A-Za-z0-9-_.+/=]*", "[TOKEN]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True

        msg = record.msg
        for pattern, replacement in self.PATTERNS:
            msg = re.sub(pattern, replacement, msg)

        record.msg = msg
        return True


class ToolFormatter(logging.Formatter):
    PREFIX = "  \033[90mNVIM\033[0m > "

    COLORS = {
        "DEBUG": "\033[90mDEBUG\033[0m",
        "INFO": "\033[34mINFO \033[0m",
        "WARNING": "\033[33mWARN \033[0m",
        "ERROR": "\033[31mERROR\033[0m",
        "CRITICAL": "\033[31mFATAL\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_name = record.levelname
        color_level = self.COLORS.get(level_name, level_name)

        log_fmt = f"{self.PREFIX}{color_level} {record.name}: {record.getMessage()}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            if record.exc_text:
                log_fmt += f"\n{record.exc_text}"

        return log_fmt


class StreamToLogger:
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def write(self, buf):
        for line in buf.rstrip().splitlines():
            self.logger.log(self.level, line.rstrip())

    def flush(self):
        pass

    def isatty(self):
        return False

    def fileno(self):
        raise io.UnsupportedOperation("StreamToLogger has no file descriptor")

    def readable(self):
        return False

    def writable(self):
        return True

    def seekable(self):
        return False

    @property
    def closed(self):
        return False


def _log_stream():
    # After an HTTP-mode redirect sys.stderr feeds back into logging.
    if isinstance(sys.stderr, StreamToLogger):
        return sys.__stderr__
    return sys.stderr


def _is_terminal(stream) -> bool:
    return Console(file=stream).is_terminal


def _build_handler(use_rich: bool, stream) -> logging.Handler:
    if use_rich:
        handler: logging.Handler = RichHandler(
            console=Console(file=stream), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(ToolFormatter())
    handler.addFilter(RedactionFilter())
    return handler


def configure_root_logger(
    level: Union[int, str] = logging.INFO,
    session_id: Optional[str] = None,
    use_rich: Optional[bool] = None,
):
    """Install the single stderr handler on the root logger.

    stdout is reserved for IPC traffic, so every log line goes to stderr.
    Rich output is used when stderr is an interactive terminal.
    """
    root = logging.getLogger()
    root.setLevel(level)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)

    for h in root.handlers[:]:
        root.removeHandler(h)

    stream = _log_stream()
    if use_rich is None:
        use_rich = _is_terminal(stream)

    root.addHandler(_build_handler(use_rich, stream))

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers = []
        uv_logger.propagate = True

    if session_id:
        logging.getLogger(__name__).debug(f"Logging configured for session {session_id}")


def get_logger(name: str) -> logging.Logger:
    """
    Returns a named logger.
    Assumes configure_root_logger() has been called.
    """
    return logging.getLogger(name)
