import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.adapter.repositories.account_repository import translate_store_errors
from src.app.repositories.exceptions import DuplicateKeyError, StoreUnavailableError


def failing(exc):
    @translate_store_errors
    async def write():
        raise exc

    return write


@pytest.mark.asyncio
async def test_unique_violation_names_the_field():
    exc = IntegrityError(
        "INSERT", {}, Exception("UNIQUE constraint failed: accounts.email")
    )

    with pytest.raises(DuplicateKeyError) as info:
        await failing(exc)()

    assert info.value.field == "email"


@pytest.mark.asyncio
async def test_unknown_constraint():
    exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))

    with pytest.raises(DuplicateKeyError) as info:
        await failing(exc)()

    assert info.value.field is None


@pytest.mark.asyncio
async def test_operational_error_is_store_unavailable():
    exc = OperationalError("SELECT", {}, Exception("database is locked"))

    with pytest.raises(StoreUnavailableError):
        await failing(exc)()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message,field",
    [
        (
            'duplicate key value violates unique constraint "ix_accounts_email"\n'
            "DETAIL:  Key (email)=(username@x.com) already exists.",
            "email",
        ),
        (
            'duplicate key value violates unique constraint "ix_accounts_username"\n'
            "DETAIL:  Key (username)=(email) already exists.",
            "username",
        ),
        ("UNIQUE constraint failed: accounts.reset_token", "reset_token"),
    ],
)
async def test_field_read_from_column_token_not_value(message, field):
    exc = IntegrityError("INSERT", {}, Exception(message))

    with pytest.raises(DuplicateKeyError) as info:
        await failing(exc)()

    assert info.value.field == field
