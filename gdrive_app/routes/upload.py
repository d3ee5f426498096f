"""
Router for uploading post attachments to Google Drive.
"""

import logging
from fastapi import APIRouter

from gdrive_app.constants import Routes
from gdrive_app.schemas.call import AppCallRequest
from gdrive_app.services.upload_google import (
    upload_file_confirmation_call,
    upload_file_confirmation_submit,
)
from gdrive_app.utils.api_response import form_response, ok_response

router = APIRouter(tags=["upload"])

logger = logging.getLogger(__name__)


@router.post(Routes.SAVE_FILE_CALL)
async def save_file_call(call: AppCallRequest):
    """Open the upload confirmation form"""
    form = await upload_file_confirmation_call(call)
    return form_response(form)


@router.post(Routes.SAVE_FILE_SUBMIT)
async def save_file_submit(call: AppCallRequest):
    """Upload the post's files"""
    message = await upload_file_confirmation_submit(call)
    return ok_response(text=message)
