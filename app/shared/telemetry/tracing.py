"""Tracing helpers for search and filter operations."""

from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

_tracer = trace.get_tracer("app.search")

SpanValue = str | int | float | bool


@contextmanager
def record_span(name: str, **attributes: SpanValue) -> Iterator[trace.Span]:
    """Open a span, set attributes, and mark ERROR (re-raising) on failure.

    Attribute values must never carry query text or record ids; pass
    kinds, counts and page numbers only.
    """
    with _tracer.start_as_current_span(
        name, record_exception=False, set_status_on_exception=False
    ) as span:
        for key, value in attributes.items():
            span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, type(e).__name__))
            span.record_exception(e)
            raise
        else:
            span.set_status(Status(StatusCode.OK))


def add_span_attributes(**attributes: SpanValue) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
