import functools
import logging

from result import Err

from src.app.repositories.exceptions import StoreError
from src.domain.errors import Error, ErrorCode

logger = logging.getLogger(__name__)


def guard_store_faults(execute):
    """
    Turn credential store faults raised inside a use case into
    Err(STORE_UNAVAILABLE) so nothing escapes the use case boundary.
    """

    @functools.wraps(execute)
    async def wrapper(self, *args, **kwargs):
        try:
            return await execute(self, *args, **kwargs)
        except StoreError:
            logger.exception("Credential store failure in %s", type(self).__name__)
            return Err(
                Error(
                    ErrorCode.STORE_UNAVAILABLE,
                    "An error occurred, please try again later",
                )
            )

    return wrapper
