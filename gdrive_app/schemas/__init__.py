"""
Schemas package for call payloads and stored records.
"""

from gdrive_app.schemas.call import (
    ActingUser,
    AppCall,
    AppCallRequest,
    AppCallResponse,
    AppCallValues,
    AppContext,
    AppForm,
    Oauth2App,
    Oauth2CurrentUser,
    PostSummary,
)
from gdrive_app.schemas.kvstore import KVGoogleData

__all__ = [
    "ActingUser",
    "AppCall",
    "AppCallRequest",
    "AppCallResponse",
    "AppCallValues",
    "AppContext",
    "AppForm",
    "Oauth2App",
    "Oauth2CurrentUser",
    "PostSummary",
    "KVGoogleData",
]
