"""Payment Routes — Paystack giving flow.

Invariants:
    - Amount validation happens before any Paystack call
    - verify reports success only for a "success" transaction status
"""

from fastapi import APIRouter, Depends, Query

from portal.api.dependencies import get_paystack, get_site
from portal.api.guard import GuardedRoute
from portal.core.errors import ServiceUnavailableError
from portal.infrastructure.paystack import PaystackClient
from portal.schemas.payment import PaymentInitialize
from portal.seo.site_config import SiteConfig
from portal.services import payments as payment_service

router = APIRouter(
    prefix="/api/payments", tags=["payments"], route_class=GuardedRoute,
)


def require_paystack(
    client: PaystackClient | None = Depends(get_paystack),
) -> PaystackClient:
    if client is None:
        raise ServiceUnavailableError("Payment gateway")
    return client


@router.post("/initialize")
async def initialize_payment(
    body: PaymentInitialize,
    client: PaystackClient = Depends(require_paystack),
    site: SiteConfig = Depends(get_site),
):
    data = await payment_service.initialize_payment(client, body, site)
    return {"success": True, "data": data}


@router.get("/verify")
async def verify_payment(
    reference: str = Query(..., min_length=1),
    client: PaystackClient = Depends(require_paystack),
):
    return await payment_service.verify_payment(client, reference.strip())
