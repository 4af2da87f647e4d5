from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns the store uses."""
    return datetime.now(UTC).replace(tzinfo=None)
