"""
User Profile Models

The single personal profile kept for the local user. Name and email must be
non-empty (any non-empty email string is accepted); phone is optional.
"""

from pydantic import field_validator
from typing import Optional

from .cv_models import DomainModel


class UserProfile(DomainModel):
    # Basic Information
    id: str
    name: str
    email: str
    phone: Optional[str] = None

    # System Fields
    created_at: str
    updated_at: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("name must not be empty")
        return value.strip()

    @field_validator("email", mode="before")
    @classmethod
    def email_not_blank(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("email must not be empty")
        return str(value).strip()

    @field_validator("phone", mode="before")
    @classmethod
    def blank_phone_is_none(cls, value):
        if value is None or not str(value).strip():
            return None
        return str(value).strip()
