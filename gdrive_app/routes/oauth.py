"""
Router for the Google account connection calls.
This module handles the calls the host makes for:
- The connect command
- The OAuth2 connect and complete steps
- The disconnect command
"""

import logging
from fastapi import APIRouter

from gdrive_app.constants import Routes
from gdrive_app.schemas.call import AppCallRequest
from gdrive_app.services.oauth_google import (
    get_connect_link,
    oauth2_complete,
    oauth2_connect,
    oauth2_disconnect,
)
from gdrive_app.utils.api_response import ok_response

router = APIRouter(tags=["oauth"])

logger = logging.getLogger(__name__)


@router.post(Routes.CONNECT_SUBMIT)
async def connect_submit(call: AppCallRequest):
    """Reply with the connection status or the link to connect"""
    message = await get_connect_link(call)
    return ok_response(text=message)


@router.post(Routes.OAUTH2_CONNECT)
async def connect(call: AppCallRequest):
    """Return the Google authorization URL to the host"""
    url = await oauth2_connect(call)
    return ok_response(data=url)


@router.post(Routes.OAUTH2_COMPLETE)
async def complete(call: AppCallRequest):
    """Finish the OAuth2 flow"""
    await oauth2_complete(call)
    return ok_response()


@router.post(Routes.DISCONNECT_SUBMIT)
async def disconnect_submit(call: AppCallRequest):
    """Disconnect the acting user's Google account"""
    await oauth2_disconnect(call)
    return ok_response()
