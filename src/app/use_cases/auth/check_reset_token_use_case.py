from result import Err, Ok, Result

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.errors import Error, ErrorCode
from .dtos import CheckResetTokenResponse
from .store_guard import guard_store_faults


class CheckResetTokenUseCase:
    """Report whether a reset token is still redeemable, without consuming it."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @guard_store_faults
    async def execute(self, token: str) -> Result[CheckResetTokenResponse, Error]:
        async with self.uow:
            account = await self.uow.accounts.get_by_reset_token(token, utc_now())

            if account is None:
                return Err(
                    Error(
                        ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                        "Password reset token is invalid or has expired",
                    )
                )

            return Ok(CheckResetTokenResponse(expires_at=account.reset_token_expires_at))
