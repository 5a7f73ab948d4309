"""JSON logging with per-request correlation IDs.

Every record carries the service name, environment and the ID of the
request it was emitted under, so one signup can be traced across the
access log, the service log and Sentry.
"""

import contextvars
import logging
import uuid

from pythonjsonlogger.json import JsonFormatter

REQUEST_ID_HEADER = "X-Request-ID"

# Third-party loggers that flood DEBUG output
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpcore", "httpx")

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")


class RequestIdFilter(logging.Filter):
    """Stamp each record with the request ID bound to the current context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("")  # type: ignore[attr-defined]
        return True


def bind_request_id(incoming: str | None = None) -> str:
    """Bind the caller's request ID to this context, minting one if absent."""
    request_id = incoming or uuid.uuid4().hex[:16]
    request_id_var.set(request_id)
    return request_id


def build_formatter(service: str, environment: str) -> JsonFormatter:
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s",
        rename_fields={"asctime": "timestamp", "levelname": "level"},
        static_fields={"service": service, "environment": environment},
    )


def setup_logging(
    *,
    debug: bool = False,
    service: str = "waitlist-api",
    environment: str = "development",
) -> None:
    """Send JSON records from the root logger to stderr."""
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(service, environment))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
