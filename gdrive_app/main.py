"""
Main application module.

This module initializes and configures the FastAPI application serving the
Google Drive app's calls.
"""

from dotenv import load_dotenv
from fastapi import FastAPI

from gdrive_app import __version__
from gdrive_app.middleware.error_handler import add_error_handlers
from gdrive_app.routes.app import router as app_router
from gdrive_app.routes.oauth import router as oauth_router
from gdrive_app.routes.upload import router as upload_router
from gdrive_app.utils.config import get_settings
from gdrive_app.utils.logger import get_logger, setup_logging

# Load environment variables
load_dotenv()

setup_logging()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application with routes and error handlers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.APP_DISPLAY_NAME,
        description=settings.APP_DESCRIPTION,
        version=__version__
    )

    add_error_handlers(app)

    app.include_router(app_router)
    app.include_router(oauth_router)
    app.include_router(upload_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(f"App {settings.APP_ID} configured with root URL {settings.APP_ROOT_URL}")
    return app


app = create_app()
