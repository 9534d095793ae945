"""
Document store error types
"""
from typing import Optional


class StoreError(Exception):
    """Base class for document store failures"""


class NotFound(StoreError):
    """Remote document does not exist yet; read as an empty collection"""


class TransientRemoteFailure(StoreError):
    """Network, auth, rate-limit or server failure talking to the remote API"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class Conflict(TransientRemoteFailure):
    """Version marker changed between read and conditional write"""


class MalformedData(StoreError):
    """Stored content is not a JSON array"""
