"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (record store, telemetry, DB
engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: record store (memory backend), telemetry (if enabled).
    Shutdown order: telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.database_backend == "memory":
        if getattr(app.state, "memory_store", None) is None:
            from app.infrastructure.persistence.repositories import InMemoryRecordStore

            app.state.memory_store = (
                InMemoryRecordStore.from_json_file(settings.memory_seed_path)
                if settings.memory_seed_path
                else InMemoryRecordStore()
            )
        logger.info("Using in-memory record store")

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import Telemetry, set_telemetry

        telemetry = Telemetry.from_settings(settings)
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if settings.database_backend == "postgres":
            from app.infrastructure.persistence import database

            database.get_session_factory()
            telemetry.instrument_sqlalchemy(database.engine)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
