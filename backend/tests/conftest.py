"""
Unitip Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session for service unit tests
    ├── db_engine:       In-memory SQLite engine with the full schema
    ├── db_session:      Session on that engine, for seeding and assertions
    ├── make_user:       Factory creating a user + session token
    └── test_client:     HTTPX AsyncClient talking to the app, with
                         get_db_session overridden to use db_engine
"""

import os

# Settings are read at import time: configure them before importing unitip
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import uuid
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from unitip.database import Base, get_db_session
from unitip.models import Job, MultiOffer, SingleOffer, User, UserSession
from unitip.models.user import Role

BASE_TIME = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.execute.return_value = MagicMock(one=lambda: row)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """A fresh in-memory database per test; StaticPool shares one connection."""
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
async def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with db_session_factory() as session:
        yield session


@pytest.fixture
def make_user(db_session):
    """
    Factory: create a user with an active session.

    Usage:
        user, token = await make_user(role="freelancer")
    """

    async def _make_user(
        name: str = "Budi",
        role: str = Role.FREELANCER,
        gender: str = "male",
        email: str | None = None,
    ):
        user = User(
            name=name,
            email=email or f"{uuid.uuid4().hex[:8]}@unitip.test",
            gender=gender,
        )
        db_session.add(user)
        await db_session.flush()

        token = f"token-{uuid.uuid4().hex}"
        db_session.add(UserSession(token=token, user=user.id, role=role))
        await db_session.commit()
        return user, token

    return _make_user


@pytest.fixture
def make_single_offer(db_session):
    """Factory: a jasa-titip offer created `minutes` after BASE_TIME."""

    async def _make(freelancer: User, title: str, minutes: int = 0, **fields):
        offer = SingleOffer(
            title=title,
            description=fields.pop("description", f"{title} description"),
            type="jasa-titip",
            price=fields.pop("price", 10000),
            pickup_area=fields.pop("pickup_area", "Gedung A"),
            delivery_area=fields.pop("delivery_area", "Asrama B"),
            available_until=fields.pop("available_until", BASE_TIME + timedelta(days=1)),
            freelancer=freelancer.id,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            updated_at=BASE_TIME + timedelta(minutes=minutes),
            **fields,
        )
        db_session.add(offer)
        await db_session.commit()
        return offer

    return _make


@pytest.fixture
def make_multi_offer(db_session):
    """Factory: an antar-jemput offer created `minutes` after BASE_TIME."""

    async def _make(freelancer: User, title: str, minutes: int = 0, **fields):
        offer = MultiOffer(
            title=title,
            description=fields.pop("description", f"{title} description"),
            price=fields.pop("price", 15000),
            location=fields.pop("location", "Kampus Utama"),
            available_until=fields.pop("available_until", BASE_TIME + timedelta(days=1)),
            freelancer=freelancer.id,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            updated_at=BASE_TIME + timedelta(minutes=minutes),
            **fields,
        )
        db_session.add(offer)
        await db_session.commit()
        return offer

    return _make


@pytest.fixture
def make_job(db_session):
    async def _make(customer: User, title: str = "Antar dokumen"):
        job = Job(title=title, description="Ke gedung rektorat", customer=customer.id)
        db_session.add(job)
        await db_session.commit()
        return job

    return _make


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    HTTPX AsyncClient routed directly into the app (no server).

    get_db_session is overridden with the same commit/rollback behaviour on
    the test engine. App exceptions are not re-raised, so the catch-all
    500 handler can be asserted on.
    """
    from unitip.main import app

    async def _override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()