"""
Pydantic schemas package
"""

from .common import *
from .guest import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "GuestCreate",
    "GuestUpdate",
    "GuestCreated",
    "GuestDetail",
    "GuestRecord",
]
