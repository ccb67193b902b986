"""Web Push Sender — every delivery failure becomes a PushOutcome."""

import pytest
import requests
from pywebpush import WebPushException

from portal.infrastructure import web_push
from portal.infrastructure.web_push import WebPushSender

SUBSCRIPTION = {
    "endpoint": "https://push.example.com/abc",
    "keys": {"p256dh": "BKey", "auth": "secret"},
}


@pytest.fixture
def sender():
    return WebPushSender("public", "private", "mailto:admin@example.com", timeout_seconds=4.0)


def fake_webpush(calls: list, error: Exception | None = None):
    def _webpush(**kwargs):
        calls.append(kwargs)
        if error is not None:
            raise error
    return _webpush


async def test_delivered_with_timeout(sender, monkeypatch):
    calls = []
    monkeypatch.setattr(web_push, "webpush", fake_webpush(calls))
    outcome = await sender.send(SUBSCRIPTION, {"title": "Hi"})
    assert outcome.delivered is True
    assert calls[0]["timeout"] == 4.0
    assert calls[0]["vapid_claims"] == {"sub": "mailto:admin@example.com"}


async def test_gone_reply(sender, monkeypatch):
    response = requests.Response()
    response.status_code = 410
    monkeypatch.setattr(
        web_push, "webpush", fake_webpush([], WebPushException("Gone", response=response)),
    )
    outcome = await sender.send(SUBSCRIPTION, {})
    assert outcome.delivered is False
    assert outcome.gone is True


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("Name or service not known"),
    requests.exceptions.ReadTimeout("read timed out"),
    ValueError("Could not deserialize key data"),
])
async def test_unreachable_or_malformed_is_failed_outcome(sender, monkeypatch, error):
    monkeypatch.setattr(web_push, "webpush", fake_webpush([], error))
    outcome = await sender.send(SUBSCRIPTION, {})
    assert outcome.delivered is False
    assert outcome.gone is False
