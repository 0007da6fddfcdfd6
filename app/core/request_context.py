"""Per-request context variables.

RequestIDMiddleware stores the request id here so every log record
written while handling the request carries it.
"""

from contextvars import ContextVar

# Current request ID (set by middleware, read by the logging filter).
current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def get_request_id() -> str | None:
    """Return the current request ID if set."""
    return current_request_id.get()
