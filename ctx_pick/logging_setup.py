"""
Logging bootstrap for the CLI.
Console warnings go to stderr through Rich; an optional JSONL sink records
every log line for later inspection.
"""

import json
import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Attributes every LogRecord has; anything else on a record came from ``extra=``
_RESERVED_ATTRS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    }
)


class JsonlHandler(logging.Handler):
    """Append one JSON object per record to a file."""

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        base = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "ctx-pick.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS:
                continue
            base.setdefault(k, v if isinstance(v, (str, int, float, bool, type(None))) else str(v))
        return base

    def emit(self, record: logging.LogRecord) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(self.format_record(record), ensure_ascii=False) + "\n")
        except Exception:
            # Standard logging contract: report via handleError, never raise into the caller
            self.handleError(record)


def init_logging(level: str = "WARNING", path: str | Path | None = None, console: Console | None = None) -> None:
    """Configure the ``ctx_pick`` logger.

    Args:
        level: Level name for both handlers
        path: Optional JSONL log file
        console: Console the Rich handler writes to (default: a stderr console)
    """
    logger = logging.getLogger("ctx_pick")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Re-initialisation (tests, repeated CLI invocations) must not stack handlers
    for h in list(logger.handlers):
        if isinstance(h, (RichHandler, JsonlHandler)):
            logger.removeHandler(h)
            h.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    logger.addHandler(rich_handler)

    if path:
        logger.addHandler(JsonlHandler(path))
