"""
structlog setup for the Task Lists API.

Per-request fields are bound through ``structlog.contextvars``: the HTTP
middleware opens a scope carrying ``request_id`` and the identity resolver adds
``user_id`` once the bearer token maps to a user. Every event logged while the
request is handled picks both up; fields passed explicitly to a log call win.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)

REQUEST_ID_HEADER = "x-request-id"


def configure_logging(log_level: str = "info", json_output: bool = True) -> None:
    """Route structlog through stdlib logging on stdout.

    ``json_output=False`` renders colored console lines for local development.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Return a random 16-character url-safe id."""
    return secrets.token_urlsafe(12)


def bind_request(request_id: str | None = None) -> str:
    """Open a fresh logging scope for one request and return its id.

    A caller-supplied id (from the ``x-request-id`` header) is kept so traces
    line up with upstream proxies.
    """
    clear_contextvars()
    request_id = request_id or new_request_id()
    bind_contextvars(request_id=request_id)
    return request_id


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to the current request scope."""
    bind_contextvars(user_id=user_id)


def end_request() -> None:
    clear_contextvars()


def current_request_id() -> str | None:
    return get_contextvars().get("request_id")


def current_user_id() -> str | None:
    return get_contextvars().get("user_id")
