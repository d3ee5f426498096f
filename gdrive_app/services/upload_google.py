"""
Uploading post attachments to Google Drive.

The post menu item opens a confirmation form; submitting it downloads every
file attached to the post from Mattermost and uploads it to the user's Drive.
"""

import io
import logging
from typing import Any, Dict, List

from googleapiclient.http import MediaIoBaseUpload

from gdrive_app.constants import GOOGLE_DRIVE_ICON, AppExpandLevels, Routes
from gdrive_app.exceptions import AppException, ExceptionType
from gdrive_app.providers.google.client import get_google_drive_client
from gdrive_app.providers.mattermost.client import MattermostClient
from gdrive_app.schemas.call import AppCall, AppCallRequest, AppForm
from gdrive_app.utils.config import get_settings
from gdrive_app.utils.helpers import is_connected, try_call
from gdrive_app.utils.markdown import bold, hyperlink

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "Selected post doesn't have any files to be uploaded"
NOT_CONNECTED_MESSAGE = "You need to connect your Google account first"
DEFAULT_MIME_TYPE = "application/octet-stream"


async def _get_post_file_ids(call: AppCallRequest) -> List[str]:
    context = call.context
    if not context.post:
        raise AppException(ExceptionType.MARKDOWN, NO_FILES_MESSAGE)

    mm_client = MattermostClient(context.mattermost_site_url, context.acting_user_access_token)
    post = await mm_client.get_post(context.post.id)
    file_ids = post.get('file_ids') or []
    if not file_ids:
        raise AppException(ExceptionType.MARKDOWN, NO_FILES_MESSAGE)
    return file_ids


async def upload_file_confirmation_call(call: AppCallRequest) -> AppForm:
    """
    Build the form asking the user to confirm the upload.

    Raises:
        AppException: If the post has no attached files
    """
    await _get_post_file_ids(call)

    return AppForm(
        title='Upload to Google Drive',
        header='Do you want to upload this file to Google Drive?',
        icon=GOOGLE_DRIVE_ICON,
        fields=[],
        submit=AppCall(
            path=Routes.SAVE_FILE_SUBMIT,
            expand={
                'acting_user': AppExpandLevels.EXPAND_SUMMARY,
                'acting_user_access_token': AppExpandLevels.EXPAND_ALL,
                'oauth2_app': AppExpandLevels.EXPAND_SUMMARY,
                'oauth2_user': AppExpandLevels.EXPAND_SUMMARY,
                'post': AppExpandLevels.EXPAND_SUMMARY,
            }
        )
    )


def _upload_to_drive(drive, name: str, mime_type: str, content: bytes) -> Dict[str, Any]:
    media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mime_type, resumable=True)
    body = {'name': name}
    folder_id = get_settings().DRIVE_UPLOAD_FOLDER_ID
    if folder_id:
        body['parents'] = [folder_id]
    return drive.files().create(
        body=body,
        media_body=media,
        fields='id,name,webViewLink',
        supportsAllDrives=True,
    ).execute()


async def upload_file_confirmation_submit(call: AppCallRequest) -> str:
    """
    Upload every file attached to the confirmed post to Google Drive.

    Args:
        call: Submit call with the post, the acting user's token and the
            stored Google refresh token expanded

    Returns:
        Markdown message listing the uploaded files

    Raises:
        AppException: If the user is not connected, the post has no files,
            or Google rejects an upload
    """
    context = call.context
    if not is_connected(context.oauth2):
        raise AppException(ExceptionType.MARKDOWN, NOT_CONNECTED_MESSAGE)

    file_ids = await _get_post_file_ids(call)
    mm_client = MattermostClient(context.mattermost_site_url, context.acting_user_access_token)
    drive = get_google_drive_client(call)

    lines = []
    for file_id in file_ids:
        file_info = await mm_client.get_file_info(file_id)
        content = await mm_client.get_file(file_id)
        name = file_info.get('name') or file_id
        mime_type = file_info.get('mime_type') or DEFAULT_MIME_TYPE

        uploaded = await try_call(
            lambda: _upload_to_drive(drive, name, mime_type, content),
            ExceptionType.TEXT_ERROR,
            'Google failed: '
        )
        logger.info(f"Uploaded file {file_id} to Drive as {uploaded.get('id')}")

        link = uploaded.get('webViewLink')
        lines.append(f"- {hyperlink(name, link) if link else name}")

    return "\n".join([f"{bold('Uploaded to Google Drive')}:"] + lines)
