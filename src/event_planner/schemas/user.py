"""
User Pydantic Schemas
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """
    Login body. Both fields are optional here so that absence is reported
    as ``Missing firebaseUid or email`` rather than a schema error.
    """

    firebase_uid: Optional[str] = Field(None, alias="firebaseUid", max_length=128)
    email: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    """Resolved user identity."""

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)
