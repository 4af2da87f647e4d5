"""
Account Service Error Kinds

Every lifecycle operation returns one of these kinds or success.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Labelled failure kinds surfaced by the use cases"""

    USERNAME_TAKEN = "USERNAME_TAKEN"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True)
class Error:
    code: ErrorCode
    message: str
