"""
Password Hashing Policy

One-way salted bcrypt transform for account credentials.
"""

from typing import Annotated

import bcrypt
from pydantic import AfterValidator

# bcrypt only reads the first 72 bytes of its input and newer releases refuse more
MAX_PASSWORD_BYTES = 72


def check_password_length(plaintext: str) -> str:
    """Reject passwords bcrypt cannot hash in full; returns the value unchanged."""
    if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return plaintext


PlaintextPassword = Annotated[str, AfterValidator(check_password_length)]


class PasswordHasher:
    """
    Hash-at-write, hash-and-compare-at-read.

    Business Rules:
    - Stored value is always a bcrypt hash (salted, cost factor `rounds`)
    - Verification only through compare(); plaintext is never stored or compared
    - Plaintext longer than MAX_PASSWORD_BYTES is rejected at input, see
      check_password_length
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        hashed = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds))
        return hashed.decode("utf-8")

    def compare(self, plaintext: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                plaintext.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed hash (e.g. a legacy cleartext value) never matches
            return False
