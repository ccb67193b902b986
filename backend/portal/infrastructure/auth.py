"""Session Verification — reads the session issued by the auth provider.

Invariants:
    - Sessions are never created by request handlers; they are only verified
    - A token that fails signature, expiry or claim checks yields None, not an exception
    - The bearer header wins over the session cookie when both are present

Design Decisions:
    - HS256 JWT signed with AUTH_SECRET (python-jose), claims: sub, email, name, role
    - issue_token exists for local tooling and tests; production tokens come
      from the auth provider
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

from fastapi import Request
from jose import ExpiredSignatureError, JWTError, jwt

from portal.core.domain_types import UserRole, has_admin_access

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """Identity carried by a verified session."""
    id: UUID
    role: str
    email: str | None = None
    name: str | None = None

    @property
    def is_admin(self) -> bool:
        return has_admin_access(self.role)


class SessionVerifier:
    """Decodes and validates session tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def verify(self, token: str) -> SessionUser | None:
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except JWTError as e:
            logger.warning(f"Session token rejected: {e}")
            return None

        try:
            user_id = UUID(str(claims.get("sub", "")))
        except ValueError:
            logger.warning("Session token has no valid subject")
            return None

        return SessionUser(
            id=user_id,
            role=claims.get("role") or UserRole.MEMBER.value,
            email=claims.get("email"),
            name=claims.get("name"),
        )

    def issue_token(
        self,
        user_id: UUID,
        role: str = UserRole.MEMBER.value,
        email: str | None = None,
        name: str | None = None,
        expires_in: timedelta = timedelta(days=30),
    ) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "role": role,
            "email": email,
            "name": name,
            "iat": int(now.timestamp()),
            "exp": int((now + expires_in).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    header = request.headers.get("authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(cookie_name) or None
