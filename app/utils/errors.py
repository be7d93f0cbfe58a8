"""
Guest registry error types
"""

from typing import Optional
from fastapi import status

class GuestServiceError(Exception):
    """Base error raised by guest operations, carries its HTTP status"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class ValidationError(GuestServiceError):
    """A required field is missing"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Name is required"

class NotFoundError(GuestServiceError):
    """No guest matches the identifier"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Guest not found"

class PersistenceError(GuestServiceError):
    """The storage engine rejected or failed a statement"""

class EncodingError(GuestServiceError):
    """QR code generation failed"""

    default_message = "Failed to generate QR code"
