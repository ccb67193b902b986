"""Paystack Client — transaction initialize and verify.

Invariants:
    - Amounts sent to Paystack are integers in kobo
    - Only the "data" object of a Paystack reply is returned to callers
"""

from urllib.parse import quote

from portal.infrastructure.http_client import ProviderClient


class PaystackClient(ProviderClient):
    service_name = "Paystack"

    def __init__(self, secret_key: str, base_url: str, **kwargs):
        super().__init__(
            base_url,
            headers={
                "Authorization": f"Bearer {secret_key}",
                "Content-Type": "application/json",
            },
            **kwargs,
        )

    async def initialize_transaction(
        self,
        email: str,
        amount_kobo: int,
        reference: str,
        metadata: dict,
        callback_url: str,
    ) -> dict:
        result = await self.request_json(
            "POST", "/transaction/initialize",
            json={
                "email": email,
                "amount": amount_kobo,
                "reference": reference,
                "metadata": metadata,
                "callback_url": callback_url,
            },
            public_message="Payment initialization failed",
        )
        return result.get("data") or {}

    async def verify_transaction(self, reference: str) -> dict:
        result = await self.request_json(
            "GET", f"/transaction/verify/{quote(reference, safe='')}",
            public_message="Payment verification failed",
        )
        return result.get("data") or {}
