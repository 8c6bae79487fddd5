# File: /app/main.py | Version: 2.0 | Title: FastAPI App (users + health routers, std error envelope)
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import init_db
from app.observability.sentry import init_sentry_if_configured
from app.routers import health, users

# Initialize logging & observability
configure_logging()
init_sentry_if_configured()

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    log.info("User service ready (db=%s)", settings.DATABASE_URL.split("://", 1)[0])
    yield


app = FastAPI(title="User Accounts API", version="1.0.0", lifespan=lifespan)

app.include_router(users.router)
app.include_router(health.router)

# Optional standardized error responses
if settings.ENABLE_STD_ERRORS:
    from app.core.error_handlers import register_exception_handlers

    register_exception_handlers(app)
