import functools
import re
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.exceptions import DuplicateKeyError, StoreUnavailableError
from src.domain.entities import Account

UNIQUE_FIELDS = ("username", "email", "verification_token", "reset_token")


def _conflicting_field(exc: IntegrityError) -> Optional[str]:
    """
    Name the unique column a driver reported.

    SQLite says "accounts.username", PostgreSQL says "Key (username)=(...)" and
    echoes the offending value, so only the column token is matched.
    """
    message = str(exc.orig)
    for field in UNIQUE_FIELDS:
        if re.search(rf"\b{Account.__tablename__}\.{field}\b|\({field}\)=", message):
            return field
    return None


def translate_store_errors(method):
    @functools.wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except IntegrityError as exc:
            raise DuplicateKeyError(_conflicting_field(exc)) from exc
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(str(exc)) from exc

    return wrapper


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by id, always reloading the row from the store"""
        # Conditional updates bypass the identity map
        stmt = (
            select(Account)
            .where(Account.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        stmt = select(Account).where(Account.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_verification_token(self, token: str) -> Optional[Account]:
        """Get account by email verification token"""
        stmt = select(Account).where(Account.verification_token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[Account]:
        """Get account holding an unexpired reset token"""
        stmt = select(Account).where(
            Account.reset_token == token,
            Account.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    @translate_store_errors
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    @translate_store_errors
    async def consume_verification_token(
        self, token: str, now: datetime
    ) -> Optional[Account]:
        """Verify the account holding `token`; None if the token is unknown or already used"""
        account = await self.get_by_verification_token(token)
        if account is None:
            return None

        stmt = (
            update(Account)
            .where(Account.id == account.id, Account.verification_token == token)
            .values(verified=True, verification_token=None, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None

        return await self.get_by_id(account.id)

    @translate_store_errors
    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> Optional[Account]:
        """Swap in `password_hash` for the holder of an unexpired `token`"""
        account = await self.get_by_reset_token(token, now)
        if account is None:
            return None

        stmt = (
            update(Account)
            .where(
                Account.id == account.id,
                Account.reset_token == token,
                Account.reset_token_expires_at > now,
            )
            .values(
                password_hash=password_hash,
                reset_token=None,
                reset_token_expires_at=None,
                updated_at=now,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None

        return await self.get_by_id(account.id)
