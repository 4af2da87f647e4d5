"""
Account Entity

Identity record for a registered user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - a registered user identity.

    Business Rules:
    - Username and email are unique across all accounts (DB constraints)
    - Username is immutable after creation
    - Password stored as bcrypt hash, never plaintext
    - verification_token is set only while the account is unverified
    - reset_token and reset_token_expires_at are set together or not at all
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    display_name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Email verification
    verified: bool = Field(default=False)
    verification_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )

    # Password reset window
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_verified", "verified"),)
