from result import Err, Ok, Result

from src.app.services.token_service import TokenService
from src.domain.errors import Error, ErrorCode
from .dtos import ProfileResponse


class GetProfileUseCase:
    """
    Resolve the identity behind a session token.

    Stateless: the claims in the verified token are the profile, no store
    lookup is made.
    """

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def execute(self, token: str) -> Result[ProfileResponse, Error]:
        verified = self.token_service.verify_session_token(token)

        if verified.is_err():
            return Err(Error(ErrorCode.UNAUTHENTICATED, "Unauthorized"))

        return Ok(ProfileResponse(**verified.ok_value.model_dump()))
