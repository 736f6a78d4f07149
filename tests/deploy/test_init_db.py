"""Tests for deploy/init_db.py."""

import sys
from pathlib import Path

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from deploy.init_db import init_db


@pytest.mark.asyncio
async def test_init_db_creates_tables(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'init.db'}"
    await init_db(url)
    # Idempotent
    await init_db(url)

    engine = create_async_engine(url)
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    await engine.dispose()

    assert {"users", "game_activity_types"} <= set(tables)
