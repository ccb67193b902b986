"""Test doubles shared by the API tests."""

import httpx

from portal.infrastructure.web_push import PushOutcome


class FakePushSender:
    """Stands in for WebPushSender; statuses maps endpoint → HTTP status."""

    def __init__(self, public_key: str = "test-public-key"):
        self.public_key = public_key
        self.private_key = "test-private-key"
        self.statuses: dict[str, int] = {}
        self.sent: list[tuple[dict, dict]] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def send(self, subscription_info: dict, payload: dict) -> PushOutcome:
        self.sent.append((subscription_info, payload))
        status_code = self.statuses.get(subscription_info["endpoint"], 201)
        return PushOutcome(delivered=status_code < 400, status_code=status_code)


def mock_transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)
