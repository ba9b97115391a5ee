from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ProfileResponse(BaseModel):
    full_name: str
    email: EmailStr
    city: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    """Email is read-only; only name and city can change"""
    full_name: Optional[str] = Field(default=None, min_length=2, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
