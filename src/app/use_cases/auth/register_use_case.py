import logging

from result import Err, Ok, Result

from src.app.repositories.exceptions import DuplicateKeyError
from src.app.services.account_notifier import AccountNotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account
from src.domain.errors import Error, ErrorCode
from .register_dto import RegisterCommand, RegisterResponse
from .store_guard import guard_store_faults

logger = logging.getLogger(__name__)

USERNAME_TAKEN = Error(ErrorCode.USERNAME_TAKEN, "Username already exists")
EMAIL_TAKEN = Error(
    ErrorCode.EMAIL_TAKEN,
    "Email is already registered. Did you forget the password. Try resetting it",
)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse, Error]

    Business Logic:
    1. Reject a taken username or email (fast path lookups)
    2. Hash password with bcrypt
    3. Create Account with verified=False and a fresh verification token
    4. Let the store's unique constraints settle concurrent registrations
    5. Commit, then send the verification email
    6. Do not log the user in
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        notifier: AccountNotifier,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.notifier = notifier

    @guard_store_faults
    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse, Error]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated username, email, password, display name

        Returns:
            Result[RegisterResponse], or Error(USERNAME_TAKEN / EMAIL_TAKEN)
        """
        async with self.uow:
            if await self.uow.accounts.get_by_username(command.username):
                return Err(USERNAME_TAKEN)

            if await self.uow.accounts.get_by_email(command.email):
                return Err(EMAIL_TAKEN)

            account = Account(
                username=command.username,
                email=command.email,
                display_name=command.display_name,
                password_hash=self.password_hasher.hash(command.password),
                verified=False,
                verification_token=self.token_service.issue_opaque_token(),
            )

            # Lookups above can race; the unique constraints are authoritative
            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except DuplicateKeyError as exc:
                return Err(EMAIL_TAKEN if exc.field == "email" else USERNAME_TAKEN)

            logger.info("Registered account %s", account.username)

        # Unit of work is closed so no connection is held across the SMTP round trip
        await self.notifier.send_verification(account, account.verification_token)

        return Ok(
            RegisterResponse(
                message="Hurray! Your account is created. Please verify your email address",
                username=account.username,
                email=account.email,
                verified=account.verified,
            )
        )
