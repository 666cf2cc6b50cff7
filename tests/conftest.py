"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time, point them at an in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("API_TITLE", "Teacher API Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")

from typing import AsyncGenerator, Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from teacher_api.application import create_app  # noqa: E402
from teacher_api.config import Settings  # noqa: E402
from teacher_api.models.teacher import Teacher  # noqa: E402
from teacher_api.utils.db import build_engine, create_schema, get_db_session  # noqa: E402

SEED_TEACHERS = [
    ("Vanya", "Kyiv", True),
    ("Tanya", "Dnipro", False),
    ("Sanya", "Lviv", True),
    ("Danya", "Lviv", False),
    ("Jenya", "Kyiv", True),
]


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings instance."""
    return Settings()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    engine = build_engine("sqlite+aiosqlite://")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session bound to the in-memory database."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session over a database holding five teachers with ids 1-5."""
    for name, address, is_working in SEED_TEACHERS:
        db_session.add(
            Teacher(
                name=name,
                address=address,
                is_working=is_working,
                secret=f"{name}'s secret",
            )
        )
    await db_session.commit()
    return db_session


@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    """Create FastAPI application instance for testing."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(
    app: FastAPI, seeded_session: AsyncSession
) -> AsyncGenerator[AsyncClient, None]:
    """Async client whose requests share the seeded test session."""

    async def override_db_session():
        yield seeded_session

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
