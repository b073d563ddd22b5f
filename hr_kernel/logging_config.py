"""
Structured JSON logging for the HR kernel.

Every record under the ``hr_kernel`` logger is written as one JSON object
per line.  Services bind the operation they run, and the department or
employee it concerns, through ``LogContext.bind()``; those fields land on
every record emitted inside the binding::

    {"ts": "2024-01-01T12:00:00+00:00", "level": "INFO",
     "logger": "hr_kernel.services.onboarding", "message": "hire_completed",
     "operation": "hire", "department_id": "5b0c...", "employee_number": 7}

Records logged with ``exc_info`` also carry an ``error`` object: the
exception type and message, the HrKernelError ``code`` when there is one,
and the exception's public attributes.
"""

__all__ = [
    "CONTEXT_FIELDS",
    "LogContext",
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, Iterator

ROOT_LOGGER_NAME = "hr_kernel"

# Fields a service may bind; anything else is a programming error
CONTEXT_FIELDS: tuple[str, ...] = ("operation", "department_id", "employee_number")

_bound: ContextVar[dict[str, str] | None] = ContextVar("hr_log_context", default=None)


class LogContext:
    """Context-local fields added to every hr_kernel log record."""

    @classmethod
    def current(cls) -> dict[str, str]:
        return dict(_bound.get() or {})

    @classmethod
    @contextmanager
    def bind(cls, **fields: str | None) -> Iterator[None]:
        """
        Add fields for the duration of a ``with`` block.

        None values leave an outer binding in place.  The previous context
        is restored on exit, including after an exception.

        Raises:
            TypeError: a field outside CONTEXT_FIELDS.
        """
        unknown = sorted(set(fields) - set(CONTEXT_FIELDS))
        if unknown:
            raise TypeError(f"Unknown log context field(s): {', '.join(unknown)}")

        merged = cls.current()
        merged.update({k: v for k, v in fields.items() if v is not None})
        token = _bound.set(merged)
        try:
            yield
        finally:
            _bound.reset(token)

    @classmethod
    def clear(cls) -> None:
        _bound.set(None)


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


def _json_default(value: Any) -> Any:
    # UUID, Decimal, enums and exceptions all render as their str()
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _error_payload(exc: BaseException) -> dict[str, Any]:
    error: dict[str, Any] = {
        "type": type(exc).__name__,
        "message": str(exc),
    }
    code = getattr(exc, "code", None)
    if code is not None:
        error["code"] = code
    for name, value in vars(exc).items():
        if not name.startswith("_") and name not in error:
            error[name] = value
    return error


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.  Bound context wins over extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload[key] = value
        payload.update(LogContext.current())

        if record.exc_info and record.exc_info[1] is not None:
            payload["error"] = _error_payload(record.exc_info[1])
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=_json_default)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def get_logger(name: str) -> logging.Logger:
    """Logger for a kernel component, e.g. ``get_logger("services.salary")``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """
    Attach a JSON handler to the hr_kernel logger.

    Only the first call has an effect until ``reset_logging()``; engine
    initialization calls this too, so an earlier call from a script or
    test harness keeps its level and stream.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return

    target = handler or logging.StreamHandler(stream or sys.stderr)
    target.setFormatter(StructuredFormatter())
    root.addHandler(target)
    root.setLevel(_resolve_level(level))
    root.propagate = False


def reset_logging() -> None:
    """Detach every hr_kernel handler.  Tests only."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(logging.WARNING)
    root.propagate = True
