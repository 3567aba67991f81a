"""Integration tests for Alembic database migrations.

Verify that the initial migration creates the transactions table with its
constraints and indexes, and that it can be rolled back.
"""

import os
from pathlib import Path
from typing import AsyncGenerator

import asyncpg
import pytest
from alembic import command
from alembic.config import Config


pytestmark = pytest.mark.integration

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def test_db_url(monkeypatch) -> str:
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not set - skipping migration tests")
    # alembic/env.py reads DATABASE_URL
    monkeypatch.setenv("DATABASE_URL", url)
    return url


@pytest.fixture
async def test_db_connection(test_db_url) -> AsyncGenerator[asyncpg.Connection, None]:
    """Create a test database connection.

    Yields:
        asyncpg.Connection: Database connection for testing
    """
    conn = await asyncpg.connect(test_db_url)
    try:
        yield conn
    finally:
        await conn.close()


@pytest.fixture
def alembic_config() -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    return config


async def _table_exists(conn: asyncpg.Connection, name: str) -> bool:
    return await conn.fetchval(
        """
        SELECT EXISTS (
            SELECT FROM information_schema.tables
            WHERE table_schema = 'public' AND table_name = $1
        )
        """,
        name
    )


@pytest.mark.asyncio
async def test_migration_upgrade(alembic_config: Config, test_db_connection: asyncpg.Connection):
    """Apply the initial migration from a clean slate."""
    await test_db_connection.execute("DROP TABLE IF EXISTS transactions CASCADE")
    await test_db_connection.execute("DROP TABLE IF EXISTS alembic_version CASCADE")

    command.upgrade(alembic_config, "head")

    version = await test_db_connection.fetchval("SELECT version_num FROM alembic_version")
    assert version == "001_initial"
    assert await _table_exists(test_db_connection, "transactions")

    indexes = await test_db_connection.fetch(
        "SELECT indexname FROM pg_indexes WHERE tablename = 'transactions'"
    )
    names = {row["indexname"] for row in indexes}
    assert {
        "idx_transactions_timestamp",
        "idx_transactions_status",
        "idx_transactions_created_at",
    } <= names


@pytest.mark.asyncio
async def test_constraints_reject_invalid_rows(
    alembic_config: Config, test_db_connection: asyncpg.Connection
):
    command.upgrade(alembic_config, "head")
    await test_db_connection.execute("DELETE FROM transactions")

    insert = """
        INSERT INTO transactions (id, timestamp, name, type, amount, status)
        VALUES ($1, 1, 'A', $2, $3, $4)
    """

    with pytest.raises(asyncpg.CheckViolationError):
        await test_db_connection.execute(insert, "bad-type", "TRANSFER", 1, "SUCCESS")

    with pytest.raises(asyncpg.CheckViolationError):
        await test_db_connection.execute(insert, "bad-amount", "DEBIT", -1, "SUCCESS")

    with pytest.raises(asyncpg.CheckViolationError):
        await test_db_connection.execute(insert, "bad-status", "DEBIT", 1, "DONE")


@pytest.mark.asyncio
async def test_migration_downgrade(alembic_config: Config, test_db_connection: asyncpg.Connection):
    command.upgrade(alembic_config, "head")

    command.downgrade(alembic_config, "base")

    assert not await _table_exists(test_db_connection, "transactions")

    # Leave the schema in place for other integration tests
    command.upgrade(alembic_config, "head")
