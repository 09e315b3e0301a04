"""
FastAPI application entry point
"""
import logging

from secure_feedback.application import create_app
from secure_feedback.core.config import Settings

settings = Settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

settings.log_config_summary()

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    logger.info(f"App running on port {settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
