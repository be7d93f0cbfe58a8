"""
Wedding Guest Registry - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import Settings, settings as default_settings
from app.core.db import Database
from app.api import routes_guests, routes_public
from app.services.guest_service import GuestService
from app.services.qr_service import QRService
from app.utils.responses import register_exception_handlers

# Configure logging
logging.basicConfig(level=default_settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around its own database handle"""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        database = Database(settings.DATABASE_URL)
        database.create_all()
        app.state.guest_service = GuestService(
            database,
            qr_service=QRService(settings),
            settings=settings,
        )
        logger.info(f"Connected to database {database.engine.url.render_as_string(hide_password=True)}")
        yield
        database.dispose()
        logger.info("Application shutdown")

    # Create FastAPI application
    app = FastAPI(
        title="Wedding Guest Registry",
        description="Guest registration and QR check-in codes for wedding invitations",
        version="1.0.0",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(routes_public.router, tags=["public"])
    app.include_router(routes_guests.router, prefix="/api/guests", tags=["guests"])

    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
    )
