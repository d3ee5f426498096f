"""
Custom exceptions for the application.
"""

from enum import Enum


class ExceptionType(str, Enum):
    """Rendering hint for a user-facing exception."""
    TEXT_ERROR = "text"
    MARKDOWN = "markdown"


class GoogleDriveAppError(Exception):
    """Base exception for Google Drive app errors."""
    pass


class AppException(GoogleDriveAppError):
    """User-facing failure carrying how its message should be rendered."""

    def __init__(self, exception_type: ExceptionType, message: str):
        super().__init__(message)
        self.exception_type = exception_type
        self.message = message


class MattermostApiError(GoogleDriveAppError):
    """Raised when the Mattermost REST API answers with an error status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class KVStoreError(MattermostApiError):
    """Raised when the Apps key/value store cannot be read or written."""
    pass
