from gdrive_app.services.oauth_google import (
    get_connect_link,
    oauth2_complete,
    oauth2_connect,
    oauth2_disconnect,
)
from gdrive_app.services.upload_google import (
    upload_file_confirmation_call,
    upload_file_confirmation_submit,
)

__all__ = [
    "get_connect_link",
    "oauth2_complete",
    "oauth2_connect",
    "oauth2_disconnect",
    "upload_file_confirmation_call",
    "upload_file_confirmation_submit",
]
