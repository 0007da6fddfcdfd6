"""Exporter selection, span helpers and log record request ids."""

import logging

import pytest
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from app.core.request_context import current_request_id
from app.shared.telemetry.logging import RequestIdFilter
from app.shared.telemetry.telemetry import build_exporter
from app.shared.telemetry.tracing import add_span_attributes, record_span


def test_none_exporter_exports_nothing() -> None:
    assert build_exporter("none", None) is None


@pytest.mark.parametrize(
    ("kind", "endpoint"),
    [("console", None), ("otlp", None), ("zipkin", "http://collector:9411")],
)
def test_console_is_the_fallback_exporter(kind: str, endpoint: str | None) -> None:
    assert isinstance(build_exporter(kind, endpoint), ConsoleSpanExporter)


def test_record_span_reraises_failures() -> None:
    with pytest.raises(KeyError):
        with record_span("search.test", page=1):
            add_span_attributes(total=0)
            raise KeyError("boom")


def test_request_id_filter_reads_context() -> None:
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "msg", None, None)
    token = current_request_id.set("req-7")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        current_request_id.reset(token)
    assert record.request_id == "req-7"

    RequestIdFilter().filter(record)
    assert record.request_id == "-"
