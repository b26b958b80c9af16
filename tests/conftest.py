"""Shared fixtures: an in-memory SQLite database and an HTTP client bound to it."""

import os

# users.py refuses to import without a secret
os.environ.setdefault("SECRET", "test-secret-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from types import SimpleNamespace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portfolio_site.database import Base, get_db
from portfolio_site import models  # noqa: F401  registers tables on Base
from portfolio_site.services import versions
from portfolio_site.services.seed import SeedDocument, seed_portfolio

SEED = {
    "profile": {
        "name": "Avery Chen",
        "title": "Analyst",
        "description": "Numbers person.",
        "email": "avery@example.com",
        "location": "Boston, MA",
    },
    "hero": {"title": "A", "subtitle": "Subtitle", "status": "Open to work"},
    "theme": {"colors": {"primary": "#112233"}},
    "experiences": [
        {
            "company": "Acme",
            "role": "Intern",
            "type": "Internship",
            "location": "Remote",
            "startDate": "May 2024",
            "endDate": "Aug 2024",
            "bullets": ["Reconciled accounts", "Wrote reports"],
        },
    ],
    "education": [
        {
            "school": "State University",
            "degree": "B.A. Economics",
            "dates": "2021 - 2025",
            "courses": [{"name": "Accounting I"}],
        },
    ],
    "skills": [{"name": "Excel"}, {"name": "SQL"}],
}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def published(db):
    """The seeded published aggregate."""
    await seed_portfolio(db, SeedDocument.model_validate(SEED))
    return await versions.get_published(db)


def _override_db(session_maker):
    async def _get_db():
        async with session_maker() as session:
            yield session
    return _get_db


@pytest_asyncio.fixture
async def client(session_maker):
    """Client whose every request is made by an authorized admin."""
    from portfolio_site.main import app
    from portfolio_site.utils import require_admin_user

    app.dependency_overrides[get_db] = _override_db(session_maker)
    app.dependency_overrides[require_admin_user] = lambda: SimpleNamespace(
        id=1, email="admin@example.com", username="admin", is_superuser=True
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anon_client(session_maker):
    from portfolio_site.main import app

    app.dependency_overrides[get_db] = _override_db(session_maker)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
