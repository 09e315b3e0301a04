"""
FastAPI application factory
"""
import logging
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from secure_feedback.core.config import Settings
from secure_feedback.core.database import create_session_factory, create_store_engine
from secure_feedback.routes import feedback

logger = logging.getLogger(__name__)


def create_app(settings: Settings, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the application around an immutable settings object.

    :param settings: Application settings, fixed for the process lifetime
    :param engine: Store engine; built from settings when not given
    :return: Configured FastAPI app
    """
    if engine is None:
        engine = create_store_engine(settings)

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION
    )
    app.state.settings = settings
    app.state.session_factory = create_session_factory(engine)

    app.include_router(feedback.router)

    @app.get("/health", tags=["health"])
    def health_check():
        """Health check endpoint"""
        return {
            "service": settings.API_TITLE,
            "version": settings.API_VERSION,
            "status": "healthy"
        }

    logger.info(f"{settings.API_TITLE} initialized")
    return app
