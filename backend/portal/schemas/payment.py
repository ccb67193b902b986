"""Payment Schemas — Paystack initialization request.

Invariants:
    - amount is in naira, strictly positive
    - email, full_name and purpose are required and non-blank
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from portal.schemas.validators import strip_optional, strip_required


class PaymentInitialize(BaseModel):
    """POST /api/payments/initialize body."""
    email: EmailStr
    amount: float = Field(gt=0)
    full_name: str = Field(max_length=255)
    phone: str | None = Field(None, max_length=20)
    purpose: str = Field(max_length=100)

    @field_validator("full_name", "purpose")
    @classmethod
    def required_text(cls, v: str, info) -> str:
        return strip_required(v, info.field_name)

    @field_validator("phone")
    @classmethod
    def optional_phone(cls, v: str | None) -> str | None:
        return strip_optional(v)
