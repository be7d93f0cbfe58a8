"""
Guest-related Pydantic schemas
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class GuestCreate(BaseModel):
    """Schema for creating a guest"""
    name: Optional[str] = None

class GuestUpdate(BaseModel):
    """Schema for renaming a guest"""
    name: Optional[str] = None

class GuestCreated(BaseModel):
    """Returned once, right after a guest is registered"""
    id: int
    unique_id: str = Field(serialization_alias="uniqueId")
    name: str
    qr_code: str = Field(serialization_alias="qrCode")
    invitation_url: str = Field(serialization_alias="invitationUrl")

class GuestDetail(BaseModel):
    """Public view of a single guest, used by the invitation page"""
    name: str
    qr_code: str = Field(serialization_alias="qrCode")
    unique_id: str = Field(serialization_alias="uniqueId")

    model_config = ConfigDict(from_attributes=True)

class GuestRecord(BaseModel):
    """Full guest row for the admin listing"""
    id: int
    unique_id: str
    name: str
    qr_code: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
