"""
Authentication Use Cases

Account lifecycle business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse
from .verify_account_use_case import VerifyAccountUseCase
from .authenticate_use_case import AuthenticateUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .check_reset_token_use_case import CheckResetTokenUseCase
from .complete_password_reset_use_case import CompletePasswordResetUseCase
from .get_profile_use_case import GetProfileUseCase
from .dtos import (
    VerifyAccountResponse,
    AuthenticateResponse,
    RequestPasswordResetResponse,
    CheckResetTokenResponse,
    CompletePasswordResetResponse,
    ProfileResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "VerifyAccountUseCase",
    "AuthenticateUseCase",
    "RequestPasswordResetUseCase",
    "CheckResetTokenUseCase",
    "CompletePasswordResetUseCase",
    "GetProfileUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "VerifyAccountResponse",
    "AuthenticateResponse",
    "RequestPasswordResetResponse",
    "CheckResetTokenResponse",
    "CompletePasswordResetResponse",
    "ProfileResponse",
]
