from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from alembic.config import Config
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from alembic import command
from tests.helpers import CANONICAL_USER_ID, InMemoryUserImageStore
from userimage.api.deps import get_user_image_store
from userimage.db.session import close_engine
from userimage.main import create_app
from userimage.settings import Settings, settings

RESET_SQL = text("TRUNCATE TABLE users")


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def image_dir(public_dir: Path) -> Path:
    path = public_dir / "profile-images"
    path.mkdir(exist_ok=True)
    return path


@pytest.fixture
def user_store() -> InMemoryUserImageStore:
    return InMemoryUserImageStore({CANONICAL_USER_ID: None})


@pytest.fixture
def app_settings(public_dir: Path) -> Settings:
    return Settings(public_dir=str(public_dir), profile_image_max_bytes=1024)


@pytest.fixture
def api_app(app_settings: Settings, user_store: InMemoryUserImageStore) -> FastAPI:
    application = create_app(app_settings)
    application.dependency_overrides[get_user_image_store] = lambda: user_store
    return application


@pytest.fixture
def client(api_app: FastAPI) -> Iterator[TestClient]:
    with TestClient(api_app) as test_client:
        yield test_client


def _resolve_test_database_url() -> str | None:
    explicit = (os.getenv("TEST_DATABASE_URL") or "").strip()
    if explicit:
        return explicit

    base = (os.getenv("DATABASE_URL") or "").strip()
    if not base:
        return None

    parsed = make_url(base)
    if not parsed.database:
        return None
    derived_database = parsed.database if parsed.database.endswith("_test") else f"{parsed.database}_test"
    return parsed.set(database=derived_database).render_as_string(hide_password=False)


def pytest_runtest_setup(item: pytest.Item) -> None:
    if "integration" in item.keywords and not _resolve_test_database_url():
        pytest.skip("DATABASE_URL (or TEST_DATABASE_URL) is required for integration tests")


@pytest.fixture(scope="session")
def database_url() -> str:
    value = _resolve_test_database_url()
    if not value:
        pytest.skip("DATABASE_URL (or TEST_DATABASE_URL) is required for database tests")
    return value


@pytest.fixture(scope="session")
def alembic_config(database_url: str) -> Config:
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", database_url)
    return config


@pytest.fixture(scope="session")
def migrated_database(alembic_config: Config, database_url: str) -> Iterator[None]:
    previous_settings_database_url = settings.database_url
    object.__setattr__(settings, "database_url", database_url)
    asyncio.run(close_engine())
    command.upgrade(alembic_config, "head")

    try:
        yield
    finally:
        object.__setattr__(settings, "database_url", previous_settings_database_url)
        asyncio.run(close_engine())


@pytest.fixture
async def db_session(
    migrated_database: None,
    database_url: str,
) -> AsyncIterator[AsyncSession]:
    engine = create_async_engine(database_url, pool_pre_ping=True)
    async with engine.begin() as connection:
        await connection.execute(RESET_SQL)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()

    await engine.dispose()
