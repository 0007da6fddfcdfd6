"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from app.shared.telemetry.logging import RequestIdFilter, setup_logging
from app.shared.telemetry.telemetry import (
    Telemetry,
    get_telemetry,
    set_telemetry,
)
from app.shared.telemetry.tracing import add_span_attributes, record_span

__all__ = [
    "setup_logging",
    "RequestIdFilter",
    "Telemetry",
    "get_telemetry",
    "set_telemetry",
    "record_span",
    "add_span_attributes",
]
