"""
Request Password Reset Use Case

Opens a password reset window and emails the reset link.
"""

import logging

from result import Err, Ok, Result

from src.app.services.account_notifier import AccountNotifier
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.errors import Error, ErrorCode
from .dtos import RequestPasswordResetResponse
from .store_guard import guard_store_faults

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email is reported as USER_NOT_FOUND
    - Reset token is 20 random bytes, hex encoded, expiring after 10 hours
    - A new request overwrites the previous token, invalidating it
    - Reset email is sent after commit; delivery failure does not fail the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: TokenService,
        notifier: AccountNotifier,
    ):
        self.uow = uow
        self.token_service = token_service
        self.notifier = notifier

    @guard_store_faults
    async def execute(self, email: str) -> Result[RequestPasswordResetResponse, Error]:
        """
        Execute request password reset use case.

        Args:
            email: Account email address

        Returns:
            Result with reset status, or Error(USER_NOT_FOUND)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                return Err(
                    Error(
                        ErrorCode.USER_NOT_FOUND,
                        "User with this email is not found",
                    )
                )

            reset_token, expires_at = self.token_service.issue_reset_token()

            account.reset_token = reset_token
            account.reset_token_expires_at = expires_at
            account.updated_at = utc_now()
            account = await self.uow.accounts.update(account)

            await self.uow.commit()

            logger.info("Password reset requested for %s", account.username)

        await self.notifier.send_password_reset(account, reset_token)

        return Ok(
            RequestPasswordResetResponse(
                message="Password Reset Link is sent in your email. Please Verify Now !!"
            )
        )
