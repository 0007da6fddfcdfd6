"""Seed dev data from scripts/seed-data.json into Postgres.

Inserts users, insurance policies, claims and documents. Rows whose id
already exists are skipped, so the script can be re-run. The same file can
back the memory backend (MEMORY_SEED_PATH).

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL (Postgres) and a migrated DB (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import dispose_engine, get_session_factory
from app.infrastructure.persistence.models import Claim, Document, InsurancePolicy, User
from app.infrastructure.persistence.repositories.memory_repo import SeedData


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _columns(record: Any, *, drop: tuple[str, ...] = ()) -> dict[str, Any]:
    """Record DTO fields minus joined/derived ones."""
    return {k: v for k, v in dataclasses.asdict(record).items() if k not in drop}


async def _insert_missing(session: AsyncSession, model: type, rows: list[dict[str, Any]]) -> int:
    inserted = 0
    for row in rows:
        if await session.get(model, row["id"]) is not None:
            continue
        session.add(model(**row))
        inserted += 1
    await session.flush()
    return inserted


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        raw = json.load(f)
    seed = SeedData.model_validate(raw)
    users = raw.get("users", [])

    session_factory = get_session_factory()
    async with session_factory() as session:
        async with session.begin():
            n_users = await _insert_missing(session, User, users)
            n_policies = await _insert_missing(
                session, InsurancePolicy, [_columns(p) for p in seed.policies]
            )
            n_claims = await _insert_missing(
                session, Claim, [_columns(c, drop=("policy",)) for c in seed.claims]
            )
            n_documents = await _insert_missing(
                session,
                Document,
                [
                    _columns(d, drop=("policy_number", "claim_number"))
                    for d in seed.documents
                ],
            )
    await dispose_engine()
    print(
        f"Seed completed: users={n_users} policies={n_policies} "
        f"claims={n_claims} documents={n_documents}"
    )


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
