"""Shared utilities: datetime, generators, sanitization, concurrency."""

from app.shared.utils.concurrency import first_leaf, run_concurrently
from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import generate_cuid
from app.shared.utils.sanitization import escape_like

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "escape_like",
    "first_leaf",
    "run_concurrently",
]
