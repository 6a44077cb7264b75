import time

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.models.base import Base
# Import all models so they register with Base.metadata for create_all
import app.models  # noqa: F401

# In-memory SQLite shared across the test's connections
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_JWT_SECRET = "test-jwt-secret-with-enough-length-for-hs256"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def jwt_secret():
    from app.config import settings

    original = settings.auth_jwt_secret
    settings.auth_jwt_secret = TEST_JWT_SECRET
    yield TEST_JWT_SECRET
    settings.auth_jwt_secret = original


@pytest.fixture
async def client(db_session, jwt_secret):
    from app.database import get_db
    from app.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def _mint_token(
    user_id: str = "user-1",
    email: str | None = "exporter@example.com",
    *,
    secret: str = TEST_JWT_SECRET,
    expires_in: int = 3600,
    audience: str | None = "authenticated",
) -> str:
    claims = {"sub": user_id, "exp": int(time.time()) + expires_in}
    if email is not None:
        claims["email"] = email
    if audience is not None:
        claims["aud"] = audience
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def make_token():
    """Factory for Supabase-style access tokens."""
    return _mint_token


@pytest.fixture
def auth_headers():
    """Factory for Authorization headers for a given user."""

    def _headers(user_id: str = "user-1", email: str | None = "exporter@example.com") -> dict:
        return {"Authorization": f"Bearer {_mint_token(user_id, email)}"}

    return _headers
