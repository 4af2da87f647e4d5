"""
Verify Account Use Case

Handles email verification via the single-use verification token.
"""

import logging

from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.errors import Error, ErrorCode
from .dtos import VerifyAccountResponse
from .store_guard import guard_store_faults

logger = logging.getLogger(__name__)


class VerifyAccountUseCase:
    """
    Use case for account verification.

    Business Rules:
    - Token must match an account's verification_token
    - Sets verified = True and clears the token in one conditional write
    - A consumed token cannot be redeemed again (INVALID_TOKEN)
    - Concurrent redemption of the same token succeeds at most once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @guard_store_faults
    async def execute(self, token: str) -> Result[VerifyAccountResponse, Error]:
        """
        Execute account verification use case.

        Args:
            token: Verification token from email link

        Returns:
            Result with verification status, or Error(INVALID_TOKEN)
        """
        async with self.uow:
            account = await self.uow.accounts.consume_verification_token(
                token, utc_now()
            )

            if account is None:
                return Err(
                    Error(
                        ErrorCode.INVALID_TOKEN,
                        "Unauthorized access. Invalid Verification Code",
                    )
                )

            await self.uow.commit()

            logger.info("Verified account %s", account.username)

            return Ok(
                VerifyAccountResponse(message="Your account is verified successfully")
            )
