"""
Entry point for running the Google Drive app with uvicorn.
"""

import logging

from gdrive_app.utils.config import get_settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting Google Drive app on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    uvicorn.run(
        "gdrive_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
