"""Provider Dependencies — third-party clients built once and injected per request.

Invariants:
    - A provider whose credentials are unset is None; routes answer 503 for it
    - Clients are created in the lifespan and closed on shutdown
"""

import logging
from dataclasses import dataclass

from fastapi import Depends, Request

from portal.config import Settings
from portal.infrastructure.cloudinary import CloudinaryClient
from portal.infrastructure.paystack import PaystackClient
from portal.infrastructure.web_push import WebPushSender
from portal.infrastructure.youtube import YouTubeClient
from portal.seo.site_config import SiteConfig, get_site_config

logger = logging.getLogger(__name__)


@dataclass
class Providers:
    paystack: PaystackClient | None = None
    youtube: YouTubeClient | None = None
    cloudinary: CloudinaryClient | None = None
    web_push: WebPushSender | None = None

    async def aclose(self) -> None:
        for client in (self.paystack, self.youtube, self.cloudinary):
            if client is not None:
                await client.aclose()


def build_providers(settings: Settings) -> Providers:
    timeout = settings.http_timeout_seconds
    providers = Providers(
        web_push=WebPushSender(
            settings.vapid_public_key,
            settings.vapid_private_key,
            settings.vapid_subject,
            timeout_seconds=settings.http_timeout_seconds,
        ),
    )
    if settings.paystack_secret_key:
        providers.paystack = PaystackClient(
            settings.paystack_secret_key,
            settings.paystack_base_url,
            timeout_seconds=timeout,
        )
    if settings.youtube_api_key:
        providers.youtube = YouTubeClient(
            settings.youtube_api_key, timeout_seconds=timeout,
        )
    if (
        settings.cloudinary_cloud_name
        and settings.cloudinary_api_key
        and settings.cloudinary_api_secret
    ):
        providers.cloudinary = CloudinaryClient(
            settings.cloudinary_cloud_name,
            settings.cloudinary_api_key,
            settings.cloudinary_api_secret,
            settings.cloudinary_sermon_folder,
            timeout_seconds=timeout,
        )
    configured = [
        name for name, client in vars(providers).items()
        if client is not None and getattr(client, "is_configured", True)
    ]
    logger.info(f"Providers configured: {', '.join(configured) or 'none'}")
    return providers


def get_providers(request: Request) -> Providers:
    return getattr(request.app.state, "providers", None) or Providers()


def get_paystack(providers: Providers = Depends(get_providers)) -> PaystackClient | None:
    return providers.paystack


def get_youtube(providers: Providers = Depends(get_providers)) -> YouTubeClient | None:
    return providers.youtube


def get_cloudinary(
    providers: Providers = Depends(get_providers),
) -> CloudinaryClient | None:
    return providers.cloudinary


def get_web_push(providers: Providers = Depends(get_providers)) -> WebPushSender | None:
    sender = providers.web_push
    if sender is None or not sender.is_configured:
        return None
    return sender


def get_site() -> SiteConfig:
    return get_site_config()
