"""Request Guard — session and role checks plus the catch-all handler boundary.

Invariants:
    - require_session raises UnauthenticatedError (401) before any handler code runs
    - require_admin raises ForbiddenError (403) for sessions without admin access
    - GuardedRoute never lets an unexpected exception escape the handler;
      it is logged and rendered as the generic 500 envelope
    - PortalError, RequestValidationError and HTTPException pass through to
      their registered handlers

Design Decisions:
    - Route class instead of per-endpoint try/except: every router built with
      route_class=GuardedRoute gets the same boundary
    - SQLAlchemy errors that escape a handler are rendered as DatabaseError
"""

import logging
from typing import Callable

from fastapi import Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.api.error_handlers import internal_error_response, portal_error_response
from portal.config import get_settings
from portal.core.errors import ForbiddenError, PortalError, UnauthenticatedError
from portal.infrastructure.auth import SessionUser, SessionVerifier, extract_token
from portal.infrastructure.database import to_database_error

logger = logging.getLogger(__name__)

_PASSTHROUGH = (PortalError, RequestValidationError, StarletteHTTPException)


class GuardedRoute(APIRoute):
    """APIRoute whose handler converts unexpected exceptions into a 500 envelope."""

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()

        async def guarded_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except _PASSTHROUGH:
                raise
            except SQLAlchemyError as e:
                logger.error(
                    f"Database error on {request.url.path}: {e}",
                    extra={"path": request.url.path},
                )
                return portal_error_response(request, to_database_error(e))
            except Exception as e:
                return internal_error_response(request, e)

        return guarded_handler


def get_session_verifier(request: Request) -> SessionVerifier:
    verifier = getattr(request.app.state, "session_verifier", None)
    if verifier is None:
        settings = get_settings()
        verifier = SessionVerifier(settings.auth_secret, settings.auth_algorithm)
    return verifier


async def require_session(
    request: Request,
    verifier: SessionVerifier = Depends(get_session_verifier),
) -> SessionUser:
    token = extract_token(request, get_settings().auth_cookie_name)
    user = verifier.verify(token) if token else None
    if user is None:
        raise UnauthenticatedError()
    return user


async def require_admin(user: SessionUser = Depends(require_session)) -> SessionUser:
    if not user.is_admin:
        raise ForbiddenError()
    return user
