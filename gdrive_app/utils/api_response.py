"""
Standardized call response utilities.

The Apps framework expects every call to be answered with a call response
object; errors are reported with HTTP 200 and type "error" so the host can
render the message to the user.
"""

from typing import Any, Dict, Optional

from gdrive_app.constants import AppCallResponseTypes
from gdrive_app.schemas.call import AppCallResponse, AppForm


def ok_response(text: Optional[str] = None, data: Any = None) -> Dict[str, Any]:
    """
    Create an "ok" call response.

    Args:
        text: Optional markdown shown to the user
        data: Optional payload for the host (e.g. the OAuth2 connect URL)

    Returns:
        Dict with the serialized call response
    """
    response = AppCallResponse(type=AppCallResponseTypes.OK, text=text, data=data)
    return response.model_dump(exclude_none=True)


def form_response(form: AppForm) -> Dict[str, Any]:
    """Create a call response asking the host to render a form."""
    response = AppCallResponse(type=AppCallResponseTypes.FORM, form=form)
    return response.model_dump(exclude_none=True)


def error_response(message: str) -> Dict[str, Any]:
    """
    Create an "error" call response.

    Args:
        message: Error message shown to the user

    Returns:
        Dict with the serialized call response
    """
    response = AppCallResponse(type=AppCallResponseTypes.ERROR, text=message)
    return response.model_dump(exclude_none=True)
