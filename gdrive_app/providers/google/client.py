"""
Factories for Google OAuth flows and API clients.

Clients are built per call from the OAuth2 app descriptor and the refresh
token the host expands into the call context; nothing is cached between calls.
"""

import os
import logging
from typing import Any, Dict, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from gdrive_app.exceptions import AppException, ExceptionType
from gdrive_app.schemas.call import AppCallRequest, Oauth2App
from gdrive_app.utils.oauth_scopes import get_google_oauth_scopes

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
NOT_CONFIGURED_MESSAGE = (
    "Google OAuth2 is not configured for this app. Ask a system admin to set the client ID and secret."
)

# Google may return the scopes in a different order or with extras already granted
os.environ.setdefault("OAUTHLIB_RELAX_TOKEN_SCOPE", "1")


def _client_config(oauth2_app: Oauth2App) -> Dict[str, Any]:
    return {
        "web": {
            "client_id": oauth2_app.client_id,
            "client_secret": oauth2_app.client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": [oauth2_app.complete_url] if oauth2_app.complete_url else [],
        }
    }


def _require_oauth2_app(call: AppCallRequest) -> Oauth2App:
    oauth2_app = call.context.oauth2
    if not oauth2_app or not oauth2_app.client_id or not oauth2_app.client_secret:
        raise AppException(ExceptionType.MARKDOWN, NOT_CONFIGURED_MESSAGE)
    return oauth2_app


def get_oauth_google_client(call: AppCallRequest) -> Flow:
    """
    Create the OAuth flow for the app's Google client.

    The flow redirects to the host's OAuth2 complete URL. PKCE is not used:
    the connect and complete calls run in separate requests and the code
    verifier could not be carried between them.
    """
    oauth2_app = _require_oauth2_app(call)
    flow = Flow.from_client_config(
        _client_config(oauth2_app),
        scopes=get_google_oauth_scopes(),
        autogenerate_code_verifier=False,
    )
    flow.redirect_uri = oauth2_app.complete_url
    return flow


def get_credentials(call: AppCallRequest, refresh_token: Optional[str] = None) -> Credentials:
    """Build user credentials from the stored (or given) refresh token."""
    oauth2_app = _require_oauth2_app(call)
    if refresh_token is None and oauth2_app.user:
        refresh_token = oauth2_app.user.refresh_token
    if not refresh_token:
        raise AppException(ExceptionType.MARKDOWN, "You need to connect your Google account first")

    return Credentials(
        None,
        refresh_token=refresh_token,
        token_uri=TOKEN_URI,
        client_id=oauth2_app.client_id,
        client_secret=oauth2_app.client_secret,
        scopes=get_google_oauth_scopes(),
    )


def _build(api_name: str, api_version: str, call: AppCallRequest, refresh_token: Optional[str] = None):
    credentials = get_credentials(call, refresh_token)
    logger.debug(f"Building Google {api_name} {api_version} client")
    return build(api_name, api_version, credentials=credentials, cache_discovery=False)


def get_google_drive_client(call: AppCallRequest, refresh_token: Optional[str] = None):
    return _build("drive", "v3", call, refresh_token)


# Reserved for editing uploaded Sheets, Docs and Slides files; uploads only use Drive.
def get_google_sheets_client(call: AppCallRequest, refresh_token: Optional[str] = None):
    return _build("sheets", "v4", call, refresh_token)


def get_google_docs_client(call: AppCallRequest, refresh_token: Optional[str] = None):
    return _build("docs", "v1", call, refresh_token)


def get_google_slides_client(call: AppCallRequest, refresh_token: Optional[str] = None):
    return _build("slides", "v1", call, refresh_token)
