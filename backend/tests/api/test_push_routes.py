"""Push Notification Routes — key discovery, subscribe, unsubscribe and admin send.

Invariants:
    - Unconfigured VAPID keys answer 503
    - Subscribing twice from one browser keeps one row
    - send drops subscriptions the push service reports as gone
"""

from sqlalchemy import func, select

from fakes import FakePushSender
from portal.models.notification_preference import NotificationPreference
from portal.models.push_subscription import PushSubscription

SUBSCRIPTION = {
    "subscription": {
        "endpoint": "https://push.example.com/send/abc",
        "keys": {"p256dh": "BPublicKey", "auth": "authSecret"},
    },
}


async def _subscription(test_db, user, endpoint):
    sub = PushSubscription(
        user_id=user.id, endpoint=endpoint, p256dh="k", auth="a",
    )
    test_db.add(sub)
    await test_db.commit()
    return sub


async def test_public_key_unconfigured_is_503(client):
    res = await client.get("/api/notifications/push/subscribe")
    assert res.status_code == 503
    assert res.json()["success"] is False


async def test_public_key_when_configured(client, providers):
    providers.web_push = FakePushSender(public_key="BVapidKey")
    res = await client.get("/api/notifications/push/subscribe")
    assert res.json() == {"success": True, "publicKey": "BVapidKey", "configured": True}


async def test_subscribe_unconfigured_is_503(client, member, auth_headers):
    res = await client.post(
        "/api/notifications/push/subscribe", json=SUBSCRIPTION,
        headers=auth_headers(member),
    )
    assert res.status_code == 503


async def test_subscribe_stores_subscription_and_enables_push(
    client, test_db, providers, member, auth_headers,
):
    providers.web_push = FakePushSender()
    res = await client.post(
        "/api/notifications/push/subscribe", json=SUBSCRIPTION,
        headers={**auth_headers(member), "User-Agent": "TestBrowser/1.0"},
    )
    assert res.status_code == 200
    assert res.json()["success"] is True

    sub = await test_db.scalar(select(PushSubscription))
    assert sub.user_id == member.id
    assert sub.p256dh == "BPublicKey"
    assert sub.user_agent == "TestBrowser/1.0"
    pref = await test_db.scalar(select(NotificationPreference))
    assert pref.push_enabled is True


async def test_resubscribe_same_endpoint_keeps_one_row(
    client, test_db, providers, member, auth_headers,
):
    providers.web_push = FakePushSender()
    headers = auth_headers(member)
    await client.post("/api/notifications/push/subscribe", json=SUBSCRIPTION, headers=headers)
    rotated = {
        "subscription": {
            "endpoint": SUBSCRIPTION["subscription"]["endpoint"],
            "keys": {"p256dh": "BRotated", "auth": "authSecret2"},
        },
    }
    await client.post("/api/notifications/push/subscribe", json=rotated, headers=headers)

    test_db.expire_all()
    count = await test_db.scalar(select(func.count()).select_from(PushSubscription))
    assert count == 1
    sub = await test_db.scalar(select(PushSubscription))
    assert sub.p256dh == "BRotated"


async def test_subscribe_rejects_missing_keys(client, providers, member, auth_headers):
    providers.web_push = FakePushSender()
    res = await client.post(
        "/api/notifications/push/subscribe",
        json={"subscription": {"endpoint": "https://push.example.com/x"}},
        headers=auth_headers(member),
    )
    assert res.status_code == 400


async def test_unsubscribe_requires_endpoint(client, member, auth_headers):
    res = await client.post(
        "/api/notifications/push/unsubscribe", json={"endpoint": "  "},
        headers=auth_headers(member),
    )
    assert res.status_code == 400


async def test_unsubscribe_removes_own_subscription(
    client, test_db, member, admin, auth_headers,
):
    await _subscription(test_db, member, "https://push.example.com/mine")
    await _subscription(test_db, admin, "https://push.example.com/theirs")

    res = await client.post(
        "/api/notifications/push/unsubscribe",
        json={"endpoint": "https://push.example.com/theirs"},
        headers=auth_headers(member),
    )
    assert res.json()["success"] is True
    res = await client.post(
        "/api/notifications/push/unsubscribe",
        json={"endpoint": "https://push.example.com/mine"},
        headers=auth_headers(member),
    )
    assert res.json() == {
        "success": True, "message": "Unsubscribed from push notifications",
    }

    test_db.expire_all()
    endpoints = set((await test_db.scalars(select(PushSubscription.endpoint))).all())
    assert endpoints == {"https://push.example.com/theirs"}


async def test_send_counts_and_drops_gone_subscriptions(
    client, test_db, providers, member, admin, auth_headers,
):
    sender = FakePushSender()
    sender.statuses["https://push.example.com/gone"] = 410
    sender.statuses["https://push.example.com/flaky"] = 500
    providers.web_push = sender
    await _subscription(test_db, member, "https://push.example.com/ok")
    await _subscription(test_db, member, "https://push.example.com/gone")
    await _subscription(test_db, admin, "https://push.example.com/flaky")

    res = await client.post(
        "/api/notifications/push/send",
        json={"title": "Service update", "body": "Starts at 9:30", "url": "/services"},
        headers=auth_headers(admin),
    )

    assert res.status_code == 200
    assert res.json() == {"success": True, "sent": 1, "failed": 2}
    test_db.expire_all()
    endpoints = set((await test_db.scalars(select(PushSubscription.endpoint))).all())
    assert endpoints == {"https://push.example.com/ok", "https://push.example.com/flaky"}
    assert sender.sent[0][1]["data"] == {"url": "/services"}


async def test_send_rejects_blank_title(client, providers, admin, auth_headers):
    providers.web_push = FakePushSender()
    res = await client.post(
        "/api/notifications/push/send", json={"title": " ", "body": "x"},
        headers=auth_headers(admin),
    )
    assert res.status_code == 400
