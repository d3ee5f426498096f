"""
Router for the app's manifest, bindings and help calls.
"""

import logging
from fastapi import APIRouter

from gdrive_app.constants import Routes
from gdrive_app.schemas.call import AppCallRequest
from gdrive_app.services.bindings import HELP_TEXT, get_bindings, get_manifest
from gdrive_app.utils.api_response import ok_response

router = APIRouter(tags=["app"])

logger = logging.getLogger(__name__)


@router.get(Routes.MANIFEST)
async def manifest():
    """Serve the app manifest"""
    return get_manifest()


@router.post(Routes.BINDINGS)
async def bindings(call: AppCallRequest):
    """Return the bindings for the acting user"""
    return ok_response(data=get_bindings(call))


@router.post(Routes.HELP_SUBMIT)
async def help_submit(call: AppCallRequest):
    """Show command help"""
    return ok_response(text=HELP_TEXT)
