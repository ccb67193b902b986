"""Portal API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Error handlers map PortalError → {success: false, error, code}
    - CORS configured from settings (not hardcoded)
    - Database, providers and session verifier initialized in the lifespan

Design Decisions:
    - Lifespan over @app.on_event: one place for startup and shutdown
    - Page routes registered last so /api/* paths are matched first
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.api.dependencies import build_providers
from portal.api.error_handlers import register_error_handlers
from portal.api.routes import (
    bookmarks, cloudinary, diagnostics, members, notifications, pages,
    payments, profile, seo, youtube,
)
from portal.config import get_settings
from portal.infrastructure.auth import SessionVerifier
from portal.infrastructure.database import init_db
from portal.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.providers = build_providers(settings)
    app.state.session_verifier = SessionVerifier(
        settings.auth_secret, settings.auth_algorithm,
    )
    logger.info("Portal API started")
    yield
    logger.info("Portal API shutting down")
    await app.state.providers.aclose()
    await db.dispose()


app = FastAPI(title="TPWBM Portal API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(bookmarks.router)
app.include_router(cloudinary.router)
app.include_router(members.router)
app.include_router(notifications.router)
app.include_router(profile.router)
app.include_router(diagnostics.router)
app.include_router(youtube.router)
app.include_router(payments.router)
app.include_router(seo.router)
app.include_router(pages.router)

register_error_handlers(app)
