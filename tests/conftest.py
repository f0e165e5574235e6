"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tasklists.auth.context import RequestContext
from tasklists.auth.credentials import CredentialService
from tasklists.dbmodels import Base, Users
from tasklists.store import DataStore

TEST_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def credentials() -> CredentialService:
    """Credential service with a cheap bcrypt cost factor."""
    return CredentialService(
        secret_key=TEST_SECRET,
        issuer="test-tasklists",
        audience="test-api",
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def store(tmp_path: Path) -> AsyncGenerator[DataStore, None]:
    """DataStore backed by a fresh SQLite database file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasklists.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, autoflush=False, expire_on_commit=False
    )
    yield DataStore(session_factory)

    await engine.dispose()


@pytest_asyncio.fixture
async def user(store: DataStore, credentials: CredentialService) -> Users:
    """A registered user with password 'hunter22'."""
    return await store.insert_user(
        name="Ada",
        email="ada@example.com",
        password=credentials.hash_password("hunter22"),
    )


@pytest_asyncio.fixture
async def other_user(store: DataStore, credentials: CredentialService) -> Users:
    return await store.insert_user(
        name="Grace",
        email="grace@example.com",
        password=credentials.hash_password("cobol4ever"),
        avatar="https://example.com/grace.png",
    )


@pytest.fixture
def make_context(store: DataStore, credentials: CredentialService):
    """Build a RequestContext for an optional current user."""

    def _make(current_user: Users | None = None) -> RequestContext:
        return RequestContext(store=store, credentials=credentials, current_user=current_user)

    return _make


@pytest.fixture
def auth_ctx(make_context, user: Users) -> RequestContext:
    """Request context authenticated as ``user``."""
    return make_context(user)


@pytest.fixture
def anon_ctx(make_context) -> RequestContext:
    """Request context without an identity."""
    return make_context(None)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
