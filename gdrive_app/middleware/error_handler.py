"""
Error handling middleware for the application.

The host renders whatever a call returns, so every failure is reported as an
"error" call response with HTTP 200 instead of an HTTP error status.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from gdrive_app.utils.api_response import error_response
from gdrive_app.exceptions import AppException, GoogleDriveAppError, MattermostApiError

# Configure logging
logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle malformed call requests."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Invalid call request on {request.url.path}: {', '.join(error_messages)}")
        return JSONResponse(
            content=error_response(f"Invalid call request: {', '.join(error_messages)}"),
            status_code=status.HTTP_200_OK
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle user-facing exceptions."""
        logger.info(f"Call {request.url.path} failed ({exc.exception_type.value}): {exc.message}")
        return JSONResponse(
            content=error_response(exc.message),
            status_code=status.HTTP_200_OK
        )

    @app.exception_handler(MattermostApiError)
    async def mattermost_error_handler(request: Request, exc: MattermostApiError) -> JSONResponse:
        """Handle failures talking to Mattermost."""
        logger.error(f"Mattermost error in {request.url.path}: {str(exc)}")
        return JSONResponse(
            content=error_response(str(exc)),
            status_code=status.HTTP_200_OK
        )

    @app.exception_handler(GoogleDriveAppError)
    async def app_error_handler(request: Request, exc: GoogleDriveAppError) -> JSONResponse:
        """Handle general app errors."""
        error_msg = str(exc) or "Error processing call"
        logger.error(f"Call {request.url.path} failed: {error_msg}")
        return JSONResponse(
            content=error_response(error_msg),
            status_code=status.HTTP_200_OK
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error in {request.url.path}: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=error_response("An unexpected error occurred"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
