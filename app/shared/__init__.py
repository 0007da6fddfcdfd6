"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    escape_like,
    generate_cuid,
    run_concurrently,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "escape_like",
    "generate_cuid",
    "run_concurrently",
    "utc_now",
]
