"""Database fixtures for integration tests.

Each test gets a fresh file-backed SQLite database (aiosqlite) holding the
owned tables plus a copy of the legacy directory table.
"""

import pytest_asyncio

from directory_gate.infrastructure.persistence import Database, legacy_metadata


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    async with db.engine.begin() as conn:
        await conn.run_sync(legacy_metadata.create_all)
    yield db
    await db.close()
