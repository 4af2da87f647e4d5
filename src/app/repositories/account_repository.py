from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by id"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_verification_token(self, token: str) -> Optional[Account]:
        """Get account by email verification token"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[Account]:
        """Get account whose reset token matches and expires after `now`"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account, raising DuplicateKeyError on username/email conflict"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def consume_verification_token(
        self, token: str, now: datetime
    ) -> Optional[Account]:
        """
        Mark the matching account verified and clear its token in one
        conditional write. Returns None if no row was updated.
        """
        pass

    @abstractmethod
    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> Optional[Account]:
        """
        Replace the password hash and clear the reset window of the account
        holding an unexpired `token`, in one conditional write. Returns None
        if no row was updated.
        """
        pass
