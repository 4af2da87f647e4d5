import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_by_username = AsyncMock(return_value=None)
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_verification_token = AsyncMock(return_value=None)
    uow.accounts.get_by_reset_token = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)
    uow.accounts.consume_verification_token = AsyncMock(return_value=None)
    uow.accounts.consume_reset_token = AsyncMock(return_value=None)
    return uow


@pytest.fixture
def password_hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret="unit-test-secret")


@pytest.fixture
def notifier():
    notifier = MagicMock()
    notifier.send_verification = AsyncMock()
    notifier.send_password_reset = AsyncMock()
    notifier.send_password_changed = AsyncMock()
    return notifier
