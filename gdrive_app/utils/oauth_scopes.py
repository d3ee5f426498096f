"""OAuth scopes requested from Google when a user connects."""

from typing import List

GOOGLE_OAUTH_SCOPES = [
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/presentations",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
]


def get_google_oauth_scopes() -> List[str]:
    """Return a fresh copy of the fixed scope set."""
    return list(GOOGLE_OAUTH_SCOPES)
