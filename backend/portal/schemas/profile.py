"""Profile Schemas — member self-service profile update.

Invariants:
    - name is required; blank or whitespace-only names are rejected
    - Optional strings are trimmed and blank values become None
    - image is only applied when the client sent the key (model_fields_set)
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from portal.schemas.validators import strip_optional, strip_required


class ProfileUpdate(BaseModel):
    """POST /api/profile/update body."""
    name: str = Field(max_length=255)
    phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=500)
    birthday: date | None = None
    interests: str | None = None
    bio: str | None = Field(None, max_length=1000)
    image: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")

    @field_validator("phone", "address", "interests", "bio", "image")
    @classmethod
    def strip_optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("birthday", mode="before")
    @classmethod
    def blank_birthday(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def image_provided(self) -> bool:
        return "image" in self.model_fields_set
