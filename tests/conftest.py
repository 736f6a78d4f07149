import os
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

ALICE_ID = uuid.UUID("5f0c6a52-8a8e-4d47-9a39-0b7c5d2e1a01")


@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture(scope="session")
def game_data_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("game-data")


@pytest.fixture(scope="session")
def app(test_db_url: str, game_data_path: Path):
    # Ensure env is set before importing the app
    os.environ["DATABASE_URL"] = test_db_url
    os.environ["APP_DEBUG"] = "true"
    os.environ["GAME_DATA_DIR"] = str(game_data_path)
    from timeline.main import app as litestar_app
    return litestar_app


@pytest.fixture()
def game_data(game_data_path: Path) -> Path:
    """Game data directory, emptied before each test."""
    for path in game_data_path.glob("*.json"):
        path.unlink()
    return game_data_path


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest_asyncio.fixture()
async def seeded(client, test_db_url: str) -> None:
    """Insert the reference users and activity types (tables exist once the app started)."""
    from timeline.models import ActivityType, User
    
    engine = create_async_engine(test_db_url)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await session.merge(User(
            id=ALICE_ID,
            email="alice@example.com",
            username="alice",
            name="Alice Souza",
            avatar="/game/assets/avatar/alice.png",
            created_at=datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc),
        ))
        # Inserted out of order on purpose
        await session.merge(ActivityType(
            id="work", label_pt="Trabalho", coins=10, xp=5, health_change=-5, stress_change=10,
        ))
        await session.merge(ActivityType(
            id="exercise", label_pt="Exercício", coins=2, xp=3, health_change=10, stress_change=-5,
        ))
        await session.commit()
    await engine.dispose()
