"""Wrap record-store calls so failures surface as SearchBackendException."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

from app.domain.enums import RecordKind
from app.domain.exceptions import PolicyVaultException, SearchBackendException

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded(kind: RecordKind, operation: str, call: Awaitable[T]) -> T:
    """Await a store call; log and re-raise any non-domain error as SearchBackendException.

    Domain exceptions pass through unchanged. Cancellation is not caught.
    No retry is attempted.
    """
    try:
        return await call
    except PolicyVaultException:
        raise
    except Exception as e:
        logger.exception("Record store %s failed for kind=%s", operation, kind.value)
        raise SearchBackendException(kind.value, operation) from e
