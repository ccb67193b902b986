"""Provider HTTP Client — shared httpx wrapper for third-party JSON APIs.

Invariants:
    - Every request has a timeout (settings.http_timeout_seconds)
    - Transport failures, non-2xx statuses and non-JSON bodies all raise
      UpstreamServiceError; the caller never sees an httpx exception
    - No retries: one call, one outcome

Design Decisions:
    - One AsyncClient per provider, created at startup and closed in the lifespan
    - transport parameter lets tests inject httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from portal.core.errors import UpstreamServiceError

logger = logging.getLogger(__name__)


class ProviderClient:
    """Base class for Paystack, YouTube and Cloudinary clients."""

    service_name = "provider"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 15.0,
        headers: dict[str, str] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=headers,
            auth=auth,
            transport=transport,
        )

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        public_message: str = "Upstream service request failed",
    ) -> dict:
        try:
            response = await self.client.request(
                method, path, params=params, json=json,
            )
        except httpx.TimeoutException as e:
            logger.error(
                f"{self.service_name} request timed out: {e}",
                extra={"service": self.service_name, "endpoint": path},
            )
            raise UpstreamServiceError(
                self.service_name, f"timeout on {path}", public_message,
            )
        except httpx.HTTPError as e:
            logger.error(
                f"{self.service_name} transport error: {e}",
                extra={"service": self.service_name, "endpoint": path},
            )
            raise UpstreamServiceError(
                self.service_name, f"transport error on {path}", public_message,
            )

        if response.is_error:
            logger.error(
                f"{self.service_name} returned {response.status_code}: {response.text[:500]}",
                extra={
                    "service": self.service_name,
                    "endpoint": path,
                    "status_code": response.status_code,
                },
            )
            raise UpstreamServiceError(
                self.service_name,
                f"HTTP {response.status_code} on {path}",
                public_message,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            raise UpstreamServiceError(
                self.service_name, f"non-JSON body on {path}", public_message,
                status_code=response.status_code,
            )

    async def aclose(self) -> None:
        await self.client.aclose()
