"""
Structured logging for configinject with run-label support.
"""

import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime

# Which demonstration run (hard-coded, injected) is currently executing
run_label_ctx: ContextVar[str | None] = ContextVar("run_label", default=None)

# Global logger cache
_loggers: dict[str, "StructuredLogger"] = {}

# LogRecord attributes that must not be passed through ``extra``
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
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
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
    }
)


class StructuredFormatter(logging.Formatter):
    """Single-line key=value formatter carrying the current run label."""

    def format(self, record: logging.LogRecord) -> str:
        run = getattr(record, "run", None) or run_label_ctx.get() or "-"

        parts = record.name.split(".")
        mod = parts[-1] if parts else record.name
        op = getattr(record, "op", record.funcName or "-")

        timestamp = datetime.now(UTC).isoformat()
        msg = record.getMessage()

        extra_fields = ""
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in {"run", "op"}:
                continue
            extra_fields += f" {key}={value}"

        line = (
            f't={timestamp} level={record.levelname} run={run} mod={mod} op={op} '
            f'msg="{msg}"{extra_fields}'
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger:
    """Structured logger taking keyword fields instead of format args."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, **kwargs):
        extra = {k: v for k, v in kwargs.items() if k not in _RESERVED_ATTRS}
        extra["run"] = run_label_ctx.get()
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for the given module."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def setup_logging(level: str = "INFO") -> None:
    """Route all logging to stderr through the structured formatter.

    stdout is left to the demonstration output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))


def set_run_label(label: str) -> None:
    """Set the run label in the current context."""
    run_label_ctx.set(label)


def get_run_label() -> str | None:
    return run_label_ctx.get()


def clear_run_label() -> None:
    run_label_ctx.set(None)
