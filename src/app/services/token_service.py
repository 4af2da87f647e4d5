"""
Token Issuer/Verifier

Mints opaque single-use tokens (verification, password reset) and signed
session tokens. Never touches the store.
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional, Tuple

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result

from src.domain.errors import Error, ErrorCode

OPAQUE_TOKEN_BYTES = 20
SESSION_TOKEN_ALGORITHM = "HS256"


class SessionClaims(BaseModel):
    """Identity claims carried by a session token"""

    account_id: str
    username: str
    email: str
    display_name: str


class TokenService:
    """
    Token issuance and verification.

    Business Rules:
    - Opaque tokens carry 20 bytes of entropy, hex encoded (40 chars)
    - Reset tokens expire `reset_ttl` after issuance
    - Session tokens are HS256 JWTs signed with the server secret and
      expire `session_ttl` after issuance; they are not stored
    """

    def __init__(
        self,
        secret: str,
        session_ttl: timedelta = timedelta(days=1),
        reset_ttl: timedelta = timedelta(milliseconds=36_000_000),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Session token secret must not be empty")
        self._secret = secret
        self.session_ttl = session_ttl
        self.reset_ttl = reset_ttl
        self._clock = clock or (lambda: datetime.now(UTC))

    def _now(self) -> datetime:
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        return now

    def issue_opaque_token(self) -> str:
        return secrets.token_hex(OPAQUE_TOKEN_BYTES)

    def issue_reset_token(self) -> Tuple[str, datetime]:
        """
        Mint a password reset token.

        Returns:
            (token, expires_at) where expires_at is naive UTC
        """
        expires_at = self._now() + self.reset_ttl
        return self.issue_opaque_token(), expires_at.replace(tzinfo=None)

    def issue_session_token(self, claims: SessionClaims) -> str:
        """
        Sign a session token for the given identity claims.

        Returns:
            JWT token string (HS256, `session_ttl` expiry)
        """
        now = self._now()
        payload = {
            **claims.model_dump(),
            "exp": now + self.session_ttl,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=SESSION_TOKEN_ALGORITHM)

    def verify_session_token(self, token: str) -> Result[SessionClaims, Error]:
        """
        Verify signature and expiry of a session token.

        Returns:
            Ok(SessionClaims), or Err(INVALID_OR_EXPIRED_TOKEN)
        """
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[SESSION_TOKEN_ALGORITHM]
            )
            claims = SessionClaims.model_validate(payload)
        except (JWTError, ValidationError):
            return Err(
                Error(
                    ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                    "Session token is invalid or has expired",
                )
            )
        return Ok(claims)
