"""
Shared pytest fixtures.

Settings are read once at import time, so the environment is pointed at a
throwaway SQLite file and upload directory BEFORE anything from ``suby`` is
imported. Every API test gets freshly created tables.
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

_TMP = tempfile.mkdtemp(prefix="suby_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP}/test.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"  # fastest cost bcrypt accepts
os.environ["AUDIT_ENABLED"] = "false"
os.environ["APP_ENV"] = "test"


@pytest_asyncio.fixture
async def database():
    """Drop and recreate every table."""
    import suby.domain  # noqa: F401
    from suby.db.base import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """HTTPX AsyncClient talking to the app in-process."""
    from suby.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def upload_dir():
    from suby.core.config import settings

    os.makedirs(settings.upload_dir, exist_ok=True)
    return settings.upload_dir


@pytest.fixture
def png_bytes():
    """Smallest useful PNG-looking payload (signature + IEND)."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\x00IEND\xaeB`\x82"


async def register(client: AsyncClient, username="Spice Hub", email="Owner@Example.com", password="s3cret!"):
    return await client.post(
        "/api/v1/vendors/register",
        json={"username": username, "email": email, "password": password},
    )


async def login(client: AsyncClient, email="owner@example.com", password="s3cret!"):
    return await client.post("/api/v1/vendors/login", json={"email": email, "password": password})


@pytest_asyncio.fixture
async def vendor_token(test_client):
    """Register + log in the default vendor; return its token."""
    await register(test_client)
    resp = await login(test_client)
    return resp.json()["data"]["token"]
