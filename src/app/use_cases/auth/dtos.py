"""
Account Use Case DTOs (Data Transfer Objects)

Response classes for the account lifecycle operations.
"""

from datetime import datetime

from pydantic import BaseModel


class VerifyAccountResponse(BaseModel):
    """Response for account verification use case"""

    success: bool = True
    message: str


class AuthenticateResponse(BaseModel):
    """Response for credential authentication use case"""

    access_token: str
    token_type: str = "Bearer"


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    success: bool = True
    message: str


class CheckResetTokenResponse(BaseModel):
    """Response for reset token check use case"""

    success: bool = True
    expires_at: datetime


class CompletePasswordResetResponse(BaseModel):
    """Response for complete password reset use case"""

    success: bool = True
    message: str


class ProfileResponse(BaseModel):
    """Claims of an authenticated session"""

    account_id: str
    username: str
    email: str
    display_name: str
