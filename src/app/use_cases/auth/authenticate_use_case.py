"""
Authenticate Use Case

Checks username/password credentials and issues a session token.
"""

from result import Err, Ok, Result

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import SessionClaims, TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import Error, ErrorCode
from .dtos import AuthenticateResponse
from .store_guard import guard_store_faults


class AuthenticateUseCase:
    """
    Use case for login and session token issuance.

    Business Rules:
    - Password is checked with bcrypt, never compared in cleartext
    - Unknown username and wrong password are reported separately
    - Login is not gated on the account being verified
    - Session token is stateless (1 day expiry); nothing is persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    @guard_store_faults
    async def execute(self, username: str, password: str) -> Result[AuthenticateResponse, Error]:
        """
        Execute authenticate use case.

        Args:
            username: Account username
            password: Plain text password

        Returns:
            Result with AuthenticateResponse containing the session token, or Error
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)

            if account is None:
                return Err(Error(ErrorCode.USER_NOT_FOUND, "Username not found"))

            if not self.password_hasher.compare(password, account.password_hash):
                return Err(Error(ErrorCode.INCORRECT_PASSWORD, "Incorrect Password"))

            access_token = self.token_service.issue_session_token(
                SessionClaims(
                    account_id=str(account.id),
                    username=account.username,
                    email=account.email,
                    display_name=account.display_name,
                )
            )

            return Ok(AuthenticateResponse(access_token=access_token))
