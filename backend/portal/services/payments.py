"""Payment Operations — Paystack transaction initialization and verification.

Invariants:
    - Paystack receives amounts in kobo (naira * 100, rounded half-up)
    - Every transaction reference is "TPWBM_<epoch ms>_<7 random [a-z0-9]>"
    - verify_payment reports success only when Paystack's status is "success"
"""

import logging
import secrets
import string
import time
from decimal import ROUND_HALF_UP, Decimal

from portal.infrastructure.paystack import PaystackClient
from portal.schemas.payment import PaymentInitialize
from portal.seo.site_config import SiteConfig

logger = logging.getLogger(__name__)

_REFERENCE_ALPHABET = string.ascii_lowercase + string.digits


def generate_reference(now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_REFERENCE_ALPHABET) for _ in range(7))
    return f"TPWBM_{now_ms}_{suffix}"


def to_kobo(amount: float) -> int:
    return int(
        (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP),
    )


async def initialize_payment(
    client: PaystackClient, body: PaymentInitialize, site: SiteConfig,
) -> dict:
    reference = generate_reference()
    data = await client.initialize_transaction(
        email=body.email,
        amount_kobo=to_kobo(body.amount),
        reference=reference,
        metadata={
            "full_name": body.full_name,
            "phone": body.phone or "",
            "purpose": body.purpose,
            "church": site.name,
            "cancel_action": f"{site.url}/payments/cancelled",
        },
        callback_url=f"{site.url}/payments/success",
    )
    logger.info("Payment initialized", extra={"reference": reference})
    return {
        "authorization_url": data.get("authorization_url"),
        "access_code": data.get("access_code"),
        "reference": data.get("reference", reference),
    }


async def verify_payment(client: PaystackClient, reference: str) -> dict:
    data = await client.verify_transaction(reference)
    status = data.get("status")
    if status != "success":
        return {
            "success": False,
            "message": "Payment was not successful",
            "status": status,
        }

    customer = data.get("customer") or {}
    metadata = data.get("metadata") or {}
    return {
        "success": True,
        "payment": {
            "reference": data.get("reference", reference),
            "amount": (data.get("amount") or 0) / 100,
            "email": customer.get("email"),
            "status": status,
            "paid_at": data.get("paid_at"),
            "purpose": metadata.get("purpose") or "General Offering",
            "full_name": metadata.get("full_name") or customer.get("email"),
            "phone": metadata.get("phone") or "",
            "gateway_response": data.get("gateway_response"),
            "channel": data.get("channel"),
        },
    }
