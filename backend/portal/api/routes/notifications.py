"""Push Notification Routes — VAPID key discovery, subscribe/unsubscribe, admin send.

Invariants:
    - subscribe and send answer 503 when VAPID keys are not configured
    - unsubscribe only removes the session user's own subscription
    - send is admin-only and reports sent/failed counts
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.dependencies import get_web_push
from portal.api.guard import GuardedRoute, require_admin, require_session
from portal.core.errors import ServiceUnavailableError
from portal.infrastructure.auth import SessionUser
from portal.infrastructure.database import get_db
from portal.infrastructure.web_push import WebPushSender
from portal.schemas.push import PushBroadcast, SubscribeRequest, UnsubscribeRequest
from portal.services.push_notifications import PushNotificationService

router = APIRouter(
    prefix="/api/notifications/push", tags=["notifications"],
    route_class=GuardedRoute,
)


def require_web_push(
    sender: WebPushSender | None = Depends(get_web_push),
) -> WebPushSender:
    if sender is None:
        raise ServiceUnavailableError("Push notifications")
    return sender


@router.get("/subscribe")
async def vapid_public_key(sender: WebPushSender = Depends(require_web_push)):
    return {"success": True, "publicKey": sender.public_key, "configured": True}


@router.post("/subscribe")
async def subscribe(
    body: SubscribeRequest,
    request: Request,
    user: SessionUser = Depends(require_session),
    sender: WebPushSender = Depends(require_web_push),
    db: AsyncSession = Depends(get_db),
):
    service = PushNotificationService(db, sender)
    await service.save_subscription(
        user.id, body.subscription, request.headers.get("user-agent"),
    )
    return {"success": True, "message": "Subscribed to push notifications"}


@router.post("/unsubscribe")
async def unsubscribe(
    body: UnsubscribeRequest,
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    service = PushNotificationService(db)
    await service.remove_subscription(user.id, body.endpoint)
    return {"success": True, "message": "Unsubscribed from push notifications"}


@router.post("/send")
async def send_notification(
    body: PushBroadcast,
    user: SessionUser = Depends(require_admin),
    sender: WebPushSender = Depends(require_web_push),
    db: AsyncSession = Depends(get_db),
):
    service = PushNotificationService(db, sender)
    outcome = await service.broadcast(
        body.to_payload(), audience=body.audience, notification_type=body.type,
    )
    return {"success": True, "sent": outcome.sent, "failed": outcome.failed}
