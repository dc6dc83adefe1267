import asyncio
import os
import tempfile
import time

# Настройки читаются при импорте rawpasta, поэтому окружение задается до него
TOTP_SECRET = "JBSWY3DPEHPK3PXP"
os.environ["TOTP_SECRET"] = TOTP_SECRET
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="rawpasta-"), "rawpasta.db"
)

import pyotp
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from rawpasta.core.db import get_db, init_models
from rawpasta.main import app


def current_otp() -> str:
    """Токен для момента "сейчас + 30 секунд", который проверяет сервис"""
    return pyotp.TOTP(TOTP_SECRET).at(int(time.time()) + 30)


def _make_session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    return engine, factory


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine, factory = _make_session_factory(tmp_path)
    await init_models(engine)
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(tmp_path):
    """TestClient с отдельной SQLite-базой на каждый тест"""
    engine, factory = _make_session_factory(tmp_path)
    asyncio.run(init_models(engine))

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def api_key(client):
    response = client.post("/create-key", params={"otp": current_otp()})
    assert response.status_code == 200
    return response.json()[0]


@pytest.fixture
def auth_headers(api_key):
    return {"apikey": api_key["key"]}
