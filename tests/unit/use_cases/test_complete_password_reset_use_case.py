"""
Unit tests for CompletePasswordResetUseCase
"""
import bcrypt
import pytest

from src.app.use_cases.auth import CompletePasswordResetUseCase
from src.domain.entities import Account
from src.domain.errors import ErrorCode


@pytest.fixture
def use_case(mock_uow, password_hasher, notifier):
    return CompletePasswordResetUseCase(mock_uow, password_hasher, notifier)


@pytest.mark.asyncio
async def test_successful_reset(use_case, mock_uow, notifier):
    account = Account(
        username="alice",
        email="a@x.com",
        display_name="Alice",
        password_hash="new_hash",
    )
    mock_uow.accounts.consume_reset_token.return_value = account

    result = await use_case.execute("reset_token", "NewPass123")

    assert result.is_ok()
    assert "successfully" in result.ok_value.message.lower()

    token, password_hash, _now = mock_uow.accounts.consume_reset_token.call_args[0]
    assert token == "reset_token"
    assert password_hash != "NewPass123"
    assert bcrypt.checkpw(b"NewPass123", password_hash.encode())

    mock_uow.commit.assert_called_once()
    notifier.send_password_changed.assert_called_once_with(account)


@pytest.mark.asyncio
async def test_invalid_or_expired_token(use_case, mock_uow, notifier):
    mock_uow.accounts.consume_reset_token.return_value = None

    result = await use_case.execute("expired_token", "NewPass123")

    assert result.is_err()
    assert result.err_value.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN
    mock_uow.commit.assert_not_called()
    notifier.send_password_changed.assert_not_called()


@pytest.mark.asyncio
async def test_confirmation_sent_after_unit_of_work_closes(use_case, mock_uow, notifier):
    mock_uow.accounts.consume_reset_token.return_value = Account(
        username="alice", email="a@x.com", display_name="Alice", password_hash="h"
    )
    notifier.send_password_changed.side_effect = (
        lambda *args: mock_uow.__aexit__.assert_awaited_once()
    )

    result = await use_case.execute("reset_token", "NewPass123")

    assert result.is_ok()
    notifier.send_password_changed.assert_awaited_once()
