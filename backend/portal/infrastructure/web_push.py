"""Web Push Sender — delivers VAPID-signed notifications through pywebpush.

Invariants:
    - is_configured is False unless both VAPID keys are set
    - send() returns a PushOutcome; a delivery failure never raises
    - outcome.gone is True for 404/410 replies (subscription no longer valid)
    - Every delivery is bounded by timeout_seconds

Design Decisions:
    - pywebpush is synchronous: each send runs in a worker thread via asyncio.to_thread
"""

import asyncio
import json
import logging
from dataclasses import dataclass

from pywebpush import WebPushException, webpush
from requests import RequestException

logger = logging.getLogger(__name__)

_GONE_STATUSES = frozenset({404, 410})


@dataclass(frozen=True)
class PushOutcome:
    delivered: bool
    status_code: int | None = None

    @property
    def gone(self) -> bool:
        return self.status_code in _GONE_STATUSES


class WebPushSender:
    """Sends one payload to one subscription."""

    def __init__(
        self,
        public_key: str,
        private_key: str,
        subject: str,
        timeout_seconds: float = 15.0,
    ):
        self.public_key = public_key
        self.private_key = private_key
        self.subject = subject
        self.timeout_seconds = timeout_seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.public_key and self.private_key)

    async def send(self, subscription_info: dict, payload: dict) -> PushOutcome:
        try:
            await asyncio.to_thread(
                webpush,
                subscription_info=subscription_info,
                data=json.dumps(payload),
                vapid_private_key=self.private_key,
                vapid_claims={"sub": self.subject},
                timeout=self.timeout_seconds,
            )
        except WebPushException as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.warning(
                f"Push delivery failed: {e}",
                extra={"service": "webpush", "status_code": status_code},
            )
            return PushOutcome(delivered=False, status_code=status_code)
        except RequestException as e:
            logger.warning(
                f"Push service unreachable: {e}", extra={"service": "webpush"},
            )
            return PushOutcome(delivered=False)
        except ValueError as e:
            # Malformed p256dh/auth keys or VAPID key
            logger.warning(
                f"Push subscription rejected before sending: {e}",
                extra={"service": "webpush"},
            )
            return PushOutcome(delivered=False)
        return PushOutcome(delivered=True)
