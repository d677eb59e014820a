"""Shared test fixtures and utilities for all tests."""
import asyncio
import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from src.app.config import Settings
from src.app.containers import Container
from src.app.main import create_app
from src.client import BlogClient
from src.shared.database.database import Database, DatabaseSettings
from tests.factories import SEED_SIZE, make_blog_post


@pytest.fixture(scope="module")
def async_db_url(tmp_path_factory):
    """
    Async URL of the database the tests run against. Module-scoped for reuse.

    TEST_DATABASE_URL wins when set. TEST_DATABASE_BACKEND=postgres starts a
    throwaway PostgreSQL container. Otherwise each test module gets its own
    SQLite file.
    """
    test_database_url = Settings().test_database_url
    if test_database_url:
        yield test_database_url
    elif os.environ.get("TEST_DATABASE_BACKEND", "").lower() == "postgres":
        with PostgresContainer("postgres:16-alpine") as postgres:
            connection_url = postgres.get_connection_url()
            yield connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    else:
        db_path = tmp_path_factory.mktemp("storage") / "blog.db"
        yield f"sqlite+aiosqlite:///{db_path}"


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Args:
        db: Database instance to test
        max_attempts: Maximum number of connection attempts

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Start each test from empty tables and drop them again afterwards.
    """
    await db.drop_tables()
    await db.create_tables()
    yield db
    await db.drop_tables()


@pytest.fixture(scope="function")
def test_container(async_db_url, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()
    container.config.override(providers.Singleton(Settings, database_url=async_db_url))
    container.database.override(providers.Object(clean_database))
    yield container
    container.database.reset_override()
    container.config.reset_override()
    container.unwire()


@asynccontextmanager
async def _tables_ready_lifespan(app: FastAPI):
    # Tables are already created by the clean_database fixture
    yield


@pytest.fixture(scope="function")
def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    return create_app(test_container, lifespan=_tables_ready_lifespan)


@pytest_asyncio.fixture
async def http_client(test_app):
    """Raw HTTP client against the test app, for asserting on status codes and bodies."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def blog_client(http_client):
    """Typed Blog API client sharing the test app transport."""
    async with BlogClient(base_url="http://test", client=http_client) as client:
        yield client


# =========================================================================
# Storage fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def blog_post_repository(test_container):
    """Get blog post repository from container."""
    return test_container.blog_post_repository()


@pytest.fixture
def unit_of_work(test_container):
    """Get unit of work from container."""
    return test_container.unit_of_work()


@pytest.fixture
def blog_post_service(test_container):
    """Get blog post service from container."""
    return test_container.blog_post_service()


@pytest_asyncio.fixture
async def seeded_posts(unit_of_work):
    """Insert SEED_SIZE random posts and return them."""
    posts = [make_blog_post() for _ in range(SEED_SIZE)]
    async with unit_of_work:
        unit_of_work.add_all(posts)
    return posts
