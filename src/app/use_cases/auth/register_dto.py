"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResponse: Output from use case (structured result)
"""

from pydantic import BaseModel

from src.app.services.password_hasher import PlaintextPassword


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    username: str
    email: str
    password: PlaintextPassword
    display_name: str


class RegisterResponse(BaseModel):
    """
    Register response - structured output from use case

    Registration does not log the user in, so no token is returned.
    """

    success: bool = True
    message: str
    username: str
    email: str
    verified: bool
