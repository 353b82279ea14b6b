import sys
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.db.base import Base, get_db
from app.db import models  # noqa: F401  registers the tables on Base.metadata
from app.server import app
from app.services.auth_service import create_admin, create_admin_token


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, future=True
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async_session = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(session):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin(session):
    return await create_admin("manager@restaurant.com", "manager123", "Manager", session)


@pytest_asyncio.fixture
async def super_admin(session):
    return await create_admin("owner@restaurant.com", "owner123", "Owner", session, role="super_admin")


@pytest_asyncio.fixture
async def auth_headers(admin):
    return {"Authorization": f"Bearer {create_admin_token(admin)}"}


@pytest_asyncio.fixture
async def super_auth_headers(super_admin):
    return {"Authorization": f"Bearer {create_admin_token(super_admin)}"}
