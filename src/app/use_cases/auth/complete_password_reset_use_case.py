"""
Complete Password Reset Use Case

Redeems a reset token and replaces the account password.
"""

import logging

from result import Err, Ok, Result

from src.app.services.account_notifier import AccountNotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.errors import Error, ErrorCode
from .dtos import CompletePasswordResetResponse
from .store_guard import guard_store_faults

logger = logging.getLogger(__name__)


class CompletePasswordResetUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Token must match an account and expire strictly after now
    - New password is hashed with bcrypt before it reaches the store
    - Hash swap and reset-window clearing happen in one conditional write,
      so a token is redeemable at most once
    - Confirmation email is sent after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        notifier: AccountNotifier,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.notifier = notifier

    @guard_store_faults
    async def execute(
        self, token: str, new_password: str
    ) -> Result[CompletePasswordResetResponse, Error]:
        """
        Execute complete password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error(INVALID_OR_EXPIRED_TOKEN)
        """
        async with self.uow:
            password_hash = self.password_hasher.hash(new_password)

            account = await self.uow.accounts.consume_reset_token(
                token, password_hash, utc_now()
            )

            if account is None:
                return Err(
                    Error(
                        ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                        "Password reset token is invalid or has expired",
                    )
                )

            await self.uow.commit()

            logger.info("Password reset completed for %s", account.username)

        await self.notifier.send_password_changed(account)

        return Ok(
            CompletePasswordResetResponse(
                message=(
                    "Your Password reset request is complete and your password is "
                    "reseted successfully. Login into your account with your new password"
                )
            )
        )
