from typing import Optional

from sqlmodel import select

from src.domain.entities import Account


async def fetch_account(session_factory, username: str) -> Optional[Account]:
    """Read an account through a fresh session so no cached state leaks in."""
    async with session_factory() as session:
        result = await session.exec(select(Account).where(Account.username == username))
        return result.one_or_none()


def register_payload(test_data, key: str = "alice", **overrides) -> dict:
    return test_data.payload(key, **overrides)
