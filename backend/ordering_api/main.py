"""Restaurant Ordering API — FastAPI application entry point.

Invariants:
    - Every router is included by name below; nothing is discovered implicitly
    - Startup order: logging, database, bootstrap admin; shutdown disposes the engine
    - Allowed CORS origins come from settings
    - All errors leave through api/error_handlers.py

Design Decisions:
    - Lifespan context manager instead of startup/shutdown events
    - The application logger lives on app.state and is handed to the
      composite write coordinator, so its records share one logger name
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ordering_api.api.error_handlers import register_error_handlers
from ordering_api.api.routes import (
    auth, categories, health, menu_items, orders, restaurant_info, users,
)
from ordering_api.config import get_settings
from ordering_api.infrastructure import database
from ordering_api.infrastructure.observability import setup_logging
from ordering_api.services.accounts import ensure_admin_user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.admin_username and settings.admin_password:
        async with database.db_manager.session() as db:
            await ensure_admin_user(
                db, settings.admin_username, settings.admin_password,
                settings.admin_email,
            )
    logger.info("Restaurant ordering API started")
    yield
    logger.info("Restaurant ordering API shutting down")
    await database.db_manager.dispose()


app = FastAPI(
    title="Restaurant Ordering API", version="1.0.0", lifespan=lifespan,
)
app.state.logger = logging.getLogger("ordering_api")

# CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(menu_items.router)
app.include_router(orders.router)
app.include_router(restaurant_info.router)
app.include_router(users.router)

register_error_handlers(app)
