from typing import NoReturn

from fastapi import status

from src.domain.errors import Error, ErrorCode


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Domain failures; any other code (STORE_UNAVAILABLE) is a server error
CLIENT_ERROR_STATUS = {
    ErrorCode.USERNAME_TAKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_TAKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INCORRECT_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_401_UNAUTHORIZED,
}


def raise_for_error(error: Error) -> NoReturn:
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
