"""SQL repository fixtures: a file-backed SQLite database per test (aiosqlite).

A file (not :memory:) lets concurrent sessions each use their own
connection, the same way the Postgres pool is used in production.
"""

import dataclasses
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import Claim, Document, InsurancePolicy, User
from tests.factories import scenario_claims, scenario_documents, scenario_policies


def _row(record, *, drop: tuple[str, ...] = ()) -> dict:
    return {k: v for k, v in dataclasses.asdict(record).items() if k not in drop}


@pytest.fixture
async def session_factory(tmp_path: Path):
    """Session factory over an empty schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'records.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    yield factory
    await engine.dispose()


async def insert_records(factory, policies=(), claims=(), documents=()) -> None:
    """Persist read-model records (and their owners) as ORM rows."""
    async with factory() as session:
        async with session.begin():
            owners = {r.user_id for r in (*policies, *claims, *documents)}
            session.add_all(User(id=u, email=f"{u}@example.com") for u in sorted(owners))
            await session.flush()
            session.add_all(InsurancePolicy(**_row(p)) for p in policies)
            await session.flush()
            session.add_all(Claim(**_row(c, drop=("policy",))) for c in claims)
            await session.flush()
            session.add_all(
                Document(**_row(d, drop=("policy_number", "claim_number")))
                for d in documents
            )


@pytest.fixture
async def scenario_db(session_factory):
    """Scenario records for user-1 and user-2."""
    await insert_records(
        session_factory, scenario_policies(), scenario_claims(), scenario_documents()
    )
    return session_factory
