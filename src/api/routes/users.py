from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.account_notifier import AccountNotifier
from src.app.services.password_hasher import PasswordHasher, PlaintextPassword
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    VerifyAccountUseCase,
    AuthenticateUseCase,
    RequestPasswordResetUseCase,
    CheckResetTokenUseCase,
    CompletePasswordResetUseCase,
    GetProfileUseCase,
    VerifyAccountResponse,
    RequestPasswordResetResponse,
    CheckResetTokenResponse,
    CompletePasswordResetResponse,
    ProfileResponse,
)
from src.depends import (
    get_notifier,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)
from src.domain.errors import Error, ErrorCode

router = APIRouter(prefix="/users", tags=["Users"])

security = HTTPBearer(auto_error=False)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    email: EmailStr = Field(..., description="User email address")
    password: PlaintextPassword = Field(..., min_length=6, description="User password (min 6 chars)")


@router.post(
    "/api/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
    notifier: AccountNotifier = Depends(get_notifier),
):
    """
    Create a new, unverified account and email a verification link.

    Raises:
        - 400 Bad Request: Username or email already taken
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        display_name=request.name,
    )

    use_case = RegisterUseCase(uow, password_hasher, token_service, notifier)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.err_value)

    return result.ok_value


@router.get(
    "/verify-now/{verification_code}",
    status_code=status.HTTP_200_OK,
    response_model=VerifyAccountResponse,
)
async def verify_now(
    verification_code: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Verify an account via the link sent at registration.

    Raises:
        - 401 Unauthorized: Unknown or already used verification code
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyAccountUseCase(uow)
    result = await use_case.execute(verification_code)

    if result.is_err():
        raise_for_error(result.err_value)

    return result.ok_value


class AuthenticateRequest(BaseModel):
    """Login HTTP request payload"""

    username: str = Field(..., min_length=1, description="Username")
    password: PlaintextPassword = Field(..., min_length=6, description="User password")


class AuthenticateHttpResponse(BaseModel):
    success: bool = True
    token: str
    message: str


@router.post(
    "/api/authenticate",
    status_code=status.HTTP_200_OK,
    response_model=AuthenticateHttpResponse,
)
async def authenticate(
    request: AuthenticateRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Exchange username/password for a session token.

    Raises:
        - 404 Not Found: Username not found
        - 401 Unauthorized: Incorrect password
        - 500 Internal Server Error: Server error
    """
    use_case = AuthenticateUseCase(uow, password_hasher, token_service)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        raise_for_error(result.err_value)

    response = result.ok_value
    return AuthenticateHttpResponse(
        token=f"{response.token_type} {response.access_token}",
        message="Hurray! You are now logged In",
    )


class ProfileHttpResponse(BaseModel):
    user: ProfileResponse


@router.get(
    "/api/authenticate",
    status_code=status.HTTP_200_OK,
    response_model=ProfileHttpResponse,
)
async def get_authenticated_profile(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Return the identity claims of the bearer session token.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
    """
    if credentials is None:
        raise_for_error(Error(ErrorCode.UNAUTHENTICATED, "Unauthorized"))

    result = GetProfileUseCase(token_service).execute(credentials.credentials)

    if result.is_err():
        raise_for_error(result.err_value)

    return ProfileHttpResponse(user=result.ok_value)


class ResetPasswordRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.put(
    "/api/reset-password",
    status_code=status.HTTP_201_CREATED,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
    notifier: AccountNotifier = Depends(get_notifier),
):
    """
    Open a password reset window and email the reset link.

    Raises:
        - 404 Not Found: No account with this email
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow, token_service, notifier)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.err_value)

    return result.ok_value


@router.get(
    "/reset-password-now/{reset_password_token}",
    status_code=status.HTTP_200_OK,
    response_model=CheckResetTokenResponse,
)
async def check_reset_token(
    reset_password_token: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Check a reset link before showing the new-password form.

    Raises:
        - 401 Unauthorized: Token invalid or expired
        - 500 Internal Server Error: Server error
    """
    use_case = CheckResetTokenUseCase(uow)
    result = await use_case.execute(reset_password_token)

    if result.is_err():
        raise_for_error(result.err_value)

    return result.ok_value


class CompleteResetRequest(BaseModel):
    """Complete password reset HTTP request payload"""

    reset_password_token: str = Field(..., min_length=1, description="Token from email")
    password: PlaintextPassword = Field(..., min_length=6, description="New password (min 6 chars)")


@router.post(
    "/api/reset-password-now",
    status_code=status.HTTP_200_OK,
    response_model=CompletePasswordResetResponse,
)
async def complete_password_reset(
    request: CompleteResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    notifier: AccountNotifier = Depends(get_notifier),
):
    """
    Redeem a reset token and set the new password.

    Raises:
        - 401 Unauthorized: Token invalid or expired
        - 500 Internal Server Error: Server error
    """
    use_case = CompletePasswordResetUseCase(uow, password_hasher, notifier)
    result = await use_case.execute(request.reset_password_token, request.password)

    if result.is_err():
        raise_for_error(result.err_value)

    return result.ok_value
