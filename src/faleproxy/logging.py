"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
import uuid
from typing import Any

from rich.logging import RichHandler


_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "faleproxy_request_id", default="-"
)


class _ContextFilter(logging.Filter):
    """Inject request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(request_id: str | None = None) -> Any:
    """Temporarily bind a request id for log records emitted in this context.

    Args:
        request_id: Request identifier. A short random id is generated when omitted.
    """

    token = _request_id_var.set(request_id or uuid.uuid4().hex[:12])
    try:
        yield _request_id_var.get()
    finally:
        _request_id_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s req=%(request_id)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                if not any(isinstance(f, _ContextFilter) for f in h.filters):
                    h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
