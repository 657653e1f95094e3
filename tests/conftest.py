from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from rapport.core.config import get_settings  # noqa: E402
from tokens import mint_token  # noqa: E402

TEST_DB_PATH = ROOT / "test.db"
if TEST_DB_PATH.exists():
    TEST_DB_PATH.unlink()
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["AUTH_JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["AUTH_JWT_AUDIENCE"] = "authenticated"
os.environ["APP_ENV"] = "test"
get_settings.cache_clear()

ADA_ID = "5d0c1c2e-0000-4000-8000-00000000a0a0"
GRACE_ID = "5d0c1c2e-0000-4000-8000-00000000b0b0"


async def _reset_database() -> None:
    from rapport.core.db import engine
    from rapport.models import Base

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)


@pytest.fixture()
async def client() -> AsyncIterator[AsyncClient]:
    from rapport.main import app

    await _reset_database()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
async def session():
    from rapport.core.db import AsyncSessionLocal

    await _reset_database()

    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture()
def auth_headers() -> Callable[..., dict[str, str]]:
    def build(user_id: str = ADA_ID, email: str | None = "ada@x.com") -> dict[str, str]:
        return {"Authorization": f"Bearer {mint_token(user_id, email)}"}

    return build


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"
