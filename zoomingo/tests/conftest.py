"""
Pytest fixtures for Zoomingo tests.

Every test gets its own SQLite file with the tables created and the
catalog seeded.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from ..db.session import get_db, make_engine, make_sessionmaker
from ..main import app
from ..services.games import create_game
from ..services.seeding import init_db

SIZES = [9, 25, 49]


def _database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'zoomingo-test.db'}"


@pytest.fixture
async def engine(tmp_path):
    """Seeded async engine on a throwaway database file."""
    engine = make_engine(_database_url(tmp_path), poolclass=NullPool)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def new_game(db):
    """Factory creating a game through the lifecycle service."""

    async def _new_game(name: str = "Alice", size: int = 9):
        return await create_game(
            db,
            player_name=name,
            board_size=size,
            allowed_sizes=SIZES,
            default_size=25,
        )

    return _new_game


@pytest.fixture
def client(tmp_path):
    """TestClient whose requests use a seeded throwaway database."""
    engine = make_engine(_database_url(tmp_path), poolclass=NullPool)
    asyncio.run(init_db(engine))
    factory = make_sessionmaker(engine)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
