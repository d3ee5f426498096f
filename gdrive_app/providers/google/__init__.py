"""
Google provider package: OAuth flow and API client factories.
"""

from gdrive_app.providers.google.client import (
    get_credentials,
    get_google_docs_client,
    get_google_drive_client,
    get_google_sheets_client,
    get_google_slides_client,
    get_oauth_google_client,
)

__all__ = [
    "get_credentials",
    "get_google_docs_client",
    "get_google_drive_client",
    "get_google_sheets_client",
    "get_google_slides_client",
    "get_oauth_google_client",
]
