from sqlalchemy import select

from todoapp.core.config import settings
from todoapp.models.user import User
from tests.conftest import API, PASSWORD, current_code, otp_secret_for, register, register_verified, wrong_code


async def test_register_sends_verification_code(client, smtp_send):
    response = await register(client, email="Jane@Example.com")
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "jane@example.com"
    assert data["require_email_verification"] is True
    assert "id" in data
    assert "token" not in data

    smtp_send.assert_awaited_once()
    message = smtp_send.await_args.args[0]
    assert message["To"] == "jane@example.com"
    assert message["Subject"] == "Your Todo App Verification Code"


async def test_register_duplicate_email(client):
    await register(client)
    response = await register(client, name="Other")
    assert response.status_code == 400
    assert "exists" in response.json()["detail"].lower()


async def test_register_validation(client):
    response = await register(client, email="not-an-email")
    assert response.status_code == 422

    response = await register(client, password="12345")
    assert response.status_code == 422

    response = await register(client, name="   ")
    assert response.status_code == 422


async def test_login_requires_verified_email(client, smtp_send):
    await register(client)
    smtp_send.reset_mock()

    response = await client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
    assert response.status_code == 403
    data = response.json()
    assert data["require_email_verification"] is True
    assert data["email"] == "jane@example.com"
    assert "token" not in data
    smtp_send.assert_awaited_once()


async def test_login_bad_credentials(client):
    await register_verified(client)

    response = await client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": "wrong-pass"})
    assert response.status_code == 401

    response = await client.post(f"{API}/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert response.status_code == 401


async def test_verify_email_flow(client, db):
    await register(client)
    secret = await otp_secret_for("jane@example.com")

    response = await client.post(
        f"{API}/auth/verify-email",
        json={"email": "jane@example.com", "token": wrong_code(secret)},
    )
    assert response.status_code == 401

    result = await db.execute(select(User).filter(User.email == "jane@example.com"))
    assert result.scalars().first().email_verified is False

    code = await current_code("jane@example.com")
    response = await client.post(f"{API}/auth/verify-email", json={"email": "jane@example.com", "token": code})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Email verified successfully"
    assert data["token"]

    response = await client.post(f"{API}/auth/verify-email", json={"email": "jane@example.com", "token": "000000"})
    assert response.status_code == 200
    assert response.json()["message"] == "Email already verified"

    response = await client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["token"]


async def test_verify_email_unknown_user(client):
    response = await client.post(f"{API}/auth/verify-email", json={"email": "ghost@example.com", "token": "123456"})
    assert response.status_code == 404


async def test_profile(client, auth_headers):
    response = await client.get(f"{API}/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "jane@example.com"
    assert data["email_verified"] is True
    assert "hashed_password" not in data
    assert "otp_secret" not in data


async def test_profile_requires_token(client):
    response = await client.get(f"{API}/auth/me")
    assert response.status_code == 401

    response = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


async def test_push_token(client, auth_headers):
    response = await client.put(f"{API}/auth/push-token", json={"push_token": "device-123"}, headers=auth_headers)
    assert response.status_code == 200

    response = await client.get(f"{API}/auth/me", headers=auth_headers)
    assert response.json()["push_token"] == "device-123"


async def test_otp_second_factor(client, auth_headers):
    response = await client.post(f"{API}/auth/otp/enable", headers=auth_headers)
    assert response.status_code == 200
    secret = response.json()["otp_secret"]
    assert secret == await otp_secret_for("jane@example.com")

    response = await client.post(f"{API}/auth/otp/verify", json={"token": wrong_code(secret)}, headers=auth_headers)
    assert response.status_code == 401

    code = await current_code("jane@example.com")
    response = await client.post(f"{API}/auth/otp/verify", json={"token": code}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["otp_enabled"] is True

    response = await client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
    assert response.status_code == 200
    data = response.json()
    assert data["require_otp"] is True
    assert "token" not in data

    response = await client.post(
        f"{API}/auth/otp/validate",
        json={"email": "jane@example.com", "token": wrong_code(secret)},
    )
    assert response.status_code == 401

    code = await current_code("jane@example.com")
    response = await client.post(f"{API}/auth/otp/validate", json={"email": "jane@example.com", "token": code})
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["otp_enabled"] is True
    assert data["otp_verified"] is True

    response = await client.post(f"{API}/auth/otp/disable", headers=auth_headers)
    assert response.status_code == 200
    assert await otp_secret_for("jane@example.com") is None

    response = await client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["token"]


async def test_otp_validate_without_second_factor(client, auth_headers):
    code = await current_code("jane@example.com")
    response = await client.post(f"{API}/auth/otp/validate", json={"email": "jane@example.com", "token": code})
    assert response.status_code == 401


async def test_email_failure_is_simulated_outside_production(client, smtp_send):
    smtp_send.side_effect = OSError("connection refused")
    response = await register(client)
    assert response.status_code == 201


async def test_email_failure_in_production(client, smtp_send, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    smtp_send.side_effect = OSError("connection refused")

    response = await register(client)
    assert response.status_code == 503


async def test_debug_route_only_in_development(client):
    response = await client.get(f"{API}/auth/debug/otp/jane@example.com")
    assert response.status_code == 404
