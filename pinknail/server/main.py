"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request monitoring), registers exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pinknail.core.database import init_db
from pinknail.core.logging_config import get_logger, setup_logging
from pinknail.core.monitoring import initialize_logfire

from .api.v1 import (
    analytics,
    auth,
    banners,
    bookings,
    business_info,
    contacts,
    expenses,
    gallery,
    gallery_categories,
    health,
    hero_settings,
    nail_options,
    services,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and logs startup and shutdown.
    """
    # Startup
    try:
        logger.info("Starting up Pink Nail API...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Pink Nail API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Pink Nail API

    Backend for the Pink Nail salon website. The public site browses services and
    the gallery and submits bookings and contact inquiries; the admin dashboard
    manages banners, services, gallery, bookings, contacts, expenses, business info and
    hero settings and reads the profit report.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)


app.include_router(health.router)
app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth")
app.include_router(services.router, prefix=f"{constant.API_V1_STR}/services")
app.include_router(bookings.router, prefix=f"{constant.API_V1_STR}/bookings")
app.include_router(gallery.router, prefix=f"{constant.API_V1_STR}/gallery")
app.include_router(gallery_categories.router, prefix=f"{constant.API_V1_STR}/gallery-categories")
app.include_router(nail_options.nail_shapes_router, prefix=f"{constant.API_V1_STR}/nail-shapes")
app.include_router(nail_options.nail_styles_router, prefix=f"{constant.API_V1_STR}/nail-styles")
app.include_router(banners.router, prefix=f"{constant.API_V1_STR}/banners")
app.include_router(contacts.router, prefix=f"{constant.API_V1_STR}/contacts")
app.include_router(expenses.router, prefix=f"{constant.API_V1_STR}/expenses")
app.include_router(analytics.router, prefix=f"{constant.API_V1_STR}/analytics")
app.include_router(business_info.router, prefix=f"{constant.API_V1_STR}/business-info")
app.include_router(hero_settings.router, prefix=f"{constant.API_V1_STR}/hero-settings")
