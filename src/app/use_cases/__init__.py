"""
Use Cases

Organized into domain folders:
- auth/: Account lifecycle (register, verify, login, password reset)
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    RegisterResponse,
    VerifyAccountUseCase,
    AuthenticateUseCase,
    RequestPasswordResetUseCase,
    CheckResetTokenUseCase,
    CompletePasswordResetUseCase,
    GetProfileUseCase,
)

__all__ = [
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResponse",
    "VerifyAccountUseCase",
    "AuthenticateUseCase",
    "RequestPasswordResetUseCase",
    "CheckResetTokenUseCase",
    "CompletePasswordResetUseCase",
    "GetProfileUseCase",
]
