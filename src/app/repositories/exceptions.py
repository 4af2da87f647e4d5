from typing import Optional


class StoreError(Exception):
    """Base class for credential store failures"""


class DuplicateKeyError(StoreError):
    """A uniqueness constraint rejected a write"""

    def __init__(self, field: Optional[str] = None):
        self.field = field
        super().__init__(f"Duplicate value for {field or 'unique key'}")


class StoreUnavailableError(StoreError):
    """The store could not be reached or failed mid-operation"""
