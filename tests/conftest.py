"""Shared pytest fixtures for unit and integration tests."""

import os

# Settings are read at import time; pin them before the app is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

load_dotenv()

import app.models  # noqa: F401
from app.config import settings
from app.core.rate_limit import limiter
from app.database import Base, get_db
from app.main import app as fastapi_app
from app.models.user import Admin, Teacher, Parent, Student


@pytest.fixture
async def db_engine():
    """Fresh in-memory database with every table created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_people(session_factory):
    """
    Insert the given number of rows per table.

    Returns an async callable: ``await seed_people(teachers=3, students=2)``.
    Students get a parent created for them when none is requested.
    """
    created = {"n": 0}

    def _next() -> int:
        created["n"] += 1
        return created["n"]

    async def _seed(admins: int = 0, teachers: int = 0, parents: int = 0, students: int = 0) -> None:
        async with session_factory() as session:
            for _ in range(admins):
                session.add(Admin(username=f"admin{_next()}"))
            for _ in range(teachers):
                i = _next()
                session.add(Teacher(username=f"teacher{i}", name="T", surname=str(i), address=""))
            parent_rows = []
            for _ in range(parents or (1 if students else 0)):
                i = _next()
                parent_rows.append(Parent(username=f"parent{i}", name="P", surname=str(i), address=""))
            session.add_all(parent_rows)
            await session.flush()
            for _ in range(students):
                i = _next()
                session.add(Student(
                    username=f"student{i}", name="S", surname=str(i), address="",
                    parent_id=parent_rows[0].id,
                ))
            await session.commit()

    return _seed


@pytest.fixture
def api_base() -> str:
    """Base URL for API requests."""
    return f"http://test{settings.API_V1_PREFIX}"


@pytest.fixture
async def async_client(session_factory, api_base: str):
    """Async HTTP client bound to the in-memory database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    limiter.reset()
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url=api_base, timeout=30.0) as client:
        yield client
    fastapi_app.dependency_overrides.clear()
