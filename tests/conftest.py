import os
import time

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_todoapp.db"
os.environ["ENVIRONMENT"] = "test"

from unittest.mock import AsyncMock

import pyotp
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from todoapp.core.config import settings
from todoapp.core.database import AsyncSessionLocal, Base, engine
from todoapp.main import app
from todoapp.models.user import User
import todoapp.models  # noqa: F401

API = settings.API_V1_STR
PASSWORD = "secret123"


@pytest.fixture
async def setup_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def smtp_send(monkeypatch):
    """Replace the SMTP transport; every outgoing message is recorded on the mock."""
    send = AsyncMock(return_value=({}, "OK"))
    monkeypatch.setattr("todoapp.core.mailer.aiosmtplib.send", send)
    return send


@pytest.fixture
async def db(setup_database):
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(setup_database, smtp_send):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def otp_secret_for(email: str) -> str:
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(User).filter(User.email == email.lower()))
        return result.scalars().first().otp_secret


async def current_code(email: str) -> str:
    secret = await otp_secret_for(email)
    return pyotp.TOTP(secret, interval=settings.OTP_STEP_SECONDS).now()


def wrong_code(secret: str) -> str:
    """A six digit code outside every window the verifier accepts."""
    totp = pyotp.TOTP(secret, interval=settings.OTP_STEP_SECONDS)
    now = time.time()
    window = settings.OTP_VALID_WINDOW + 1
    accepted = {totp.at(now, counter_offset=offset) for offset in range(-window, window + 1)}
    for candidate in ("000000", "111111", "123456", "999999", "424242", "808080"):
        if candidate not in accepted:
            return candidate
    raise AssertionError("could not pick a rejected code")


async def register(client, email="jane@example.com", name="Jane", password=PASSWORD):
    return await client.post(f"{API}/auth/register", json={"name": name, "email": email, "password": password})


async def register_verified(client, email="jane@example.com", name="Jane") -> dict:
    """Register, verify the email and return the bearer headers."""
    response = await register(client, email=email, name=name)
    assert response.status_code == 201
    code = await current_code(email)
    response = await client.post(f"{API}/auth/verify-email", json={"email": email, "token": code})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def auth_headers(client):
    return await register_verified(client)
