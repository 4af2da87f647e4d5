"""
Integration tests for the password reset flow

- Requesting a reset opens a 10 hour window and emails the link
- The link can be checked without being consumed
- Completing the reset swaps the password and closes the window
- Expired and superseded tokens are rejected
"""
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import Account
from tests.integration.helpers import fetch_account, register_payload


async def request_reset(client: AsyncClient, email: str = "a@x.com"):
    return await client.put("/users/api/reset-password", json={"email": email})


async def complete_reset(client: AsyncClient, token: str, password: str):
    return await client.post(
        "/users/api/reset-password-now",
        json={"reset_password_token": token, "password": password},
    )


@pytest_asyncio.fixture
async def registered(client: AsyncClient, test_data):
    await client.post("/users/api/register", json=register_payload(test_data))


@pytest.mark.asyncio
async def test_full_reset_flow(client: AsyncClient, registered, session_factory, email_sender):
    response = await request_reset(client)
    assert response.status_code == 201

    account = await fetch_account(session_factory, "alice")
    token = account.reset_token
    assert token is not None
    assert account.reset_token_expires_at > datetime.utcnow() + timedelta(hours=9)
    assert f"users/reset-password-now/{token}" in email_sender.sent[-1].html_body

    check = await client.get(f"/users/reset-password-now/{token}")
    assert check.status_code == 200

    done = await complete_reset(client, token, "brand-new-pass")
    assert done.status_code == 200
    assert email_sender.sent[-1].subject == "Reset Password Successful"

    account = await fetch_account(session_factory, "alice")
    assert account.reset_token is None
    assert account.reset_token_expires_at is None

    old = await client.post(
        "/users/api/authenticate", json={"username": "alice", "password": "secret1"}
    )
    assert old.status_code == 401
    new = await client.post(
        "/users/api/authenticate", json={"username": "alice", "password": "brand-new-pass"}
    )
    assert new.status_code == 200

    reused = await complete_reset(client, token, "another-pass")
    assert reused.status_code == 401
    assert reused.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"


@pytest.mark.asyncio
async def test_reset_for_unknown_email(client: AsyncClient):
    response = await request_reset(client, "nobody@x.com")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_second_request_invalidates_first_token(client: AsyncClient, registered, session_factory):
    await request_reset(client)
    first = (await fetch_account(session_factory, "alice")).reset_token
    await request_reset(client)
    second = (await fetch_account(session_factory, "alice")).reset_token

    assert first != second

    stale = await complete_reset(client, first, "brand-new-pass")
    assert stale.status_code == 401
    assert stale.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"

    fresh = await complete_reset(client, second, "brand-new-pass")
    assert fresh.status_code == 200


@pytest.mark.asyncio
async def test_expired_token_is_rejected(client: AsyncClient, registered, session_factory):
    await request_reset(client)

    async with session_factory() as session:
        result = await session.exec(select(Account).where(Account.username == "alice"))
        account = result.one()
        token = account.reset_token
        account.reset_token_expires_at = datetime.utcnow() - timedelta(seconds=1)
        session.add(account)
        await session.commit()

    check = await client.get(f"/users/reset-password-now/{token}")
    assert check.status_code == 401

    response = await complete_reset(client, token, "brand-new-pass")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"
    account = await fetch_account(session_factory, "alice")
    assert account.reset_token == token


@pytest.mark.asyncio
async def test_new_password_over_bcrypt_limit_keeps_token(client: AsyncClient, registered, session_factory, email_sender):
    await request_reset(client)
    token = (await fetch_account(session_factory, "alice")).reset_token
    sent_before = len(email_sender.sent)

    response = await complete_reset(client, token, "p" * 80)

    assert response.status_code == 422
    account = await fetch_account(session_factory, "alice")
    assert account.reset_token == token
    assert len(email_sender.sent) == sent_before

    retry = await complete_reset(client, token, "brand-new-pass")
    assert retry.status_code == 200
