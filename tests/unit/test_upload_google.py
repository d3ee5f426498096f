"""
Unit tests for uploading post attachments to Google Drive.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from googleapiclient.http import MediaIoBaseUpload

from gdrive_app.constants import Routes
from gdrive_app.exceptions import AppException, ExceptionType
from gdrive_app.services.upload_google import (
    NO_FILES_MESSAGE,
    NOT_CONNECTED_MESSAGE,
    upload_file_confirmation_call,
    upload_file_confirmation_submit,
)
from tests.fixtures.calls import CONNECTED_USER, SITE_URL, USER_TOKEN, make_call


@pytest.fixture
def mm_client(monkeypatch):
    """Mock the Mattermost client used by the upload handlers."""
    client = MagicMock()
    client.get_post = AsyncMock(return_value={"id": "post_1", "file_ids": ["file_1", "file_2"]})
    client.get_file_info = AsyncMock(side_effect=lambda file_id: {
        "id": file_id,
        "name": f"{file_id}.pdf",
        "mime_type": "application/pdf",
    })
    client.get_file = AsyncMock(return_value=b"%PDF-1.4")
    client_class = MagicMock(return_value=client)
    monkeypatch.setattr("gdrive_app.services.upload_google.MattermostClient", client_class)
    client.client_class = client_class
    return client


@pytest.fixture
def drive(monkeypatch):
    drive = MagicMock()
    drive.files.return_value.create.return_value.execute.side_effect = [
        {"id": "drive_1", "name": "file_1.pdf", "webViewLink": "https://drive.google.com/file/d/drive_1/view"},
        {"id": "drive_2", "name": "file_2.pdf"},
    ]
    monkeypatch.setattr("gdrive_app.services.upload_google.get_google_drive_client", MagicMock(return_value=drive))
    return drive


class TestUploadFileConfirmationCall:
    """Tests for upload_file_confirmation_call."""

    @pytest.mark.asyncio
    async def test_post_without_files(self, mm_client):
        mm_client.get_post.return_value = {"id": "post_1", "file_ids": []}
        call = make_call(post={"id": "post_1"})

        with pytest.raises(AppException) as exc_info:
            await upload_file_confirmation_call(call)

        assert exc_info.value.exception_type == ExceptionType.MARKDOWN
        assert exc_info.value.message == NO_FILES_MESSAGE

    @pytest.mark.asyncio
    async def test_post_with_missing_file_ids(self, mm_client):
        mm_client.get_post.return_value = {"id": "post_1"}
        with pytest.raises(AppException):
            await upload_file_confirmation_call(make_call(post={"id": "post_1"}))

    @pytest.mark.asyncio
    async def test_returns_confirmation_form(self, mm_client):
        form = await upload_file_confirmation_call(make_call(post={"id": "post_1"}))

        mm_client.client_class.assert_called_once_with(SITE_URL, USER_TOKEN)
        mm_client.get_post.assert_awaited_once_with("post_1")
        assert form.title == "Upload to Google Drive"
        assert form.fields == []
        assert form.submit.path == Routes.SAVE_FILE_SUBMIT
        assert form.submit.expand == {
            "acting_user": "summary",
            "acting_user_access_token": "all",
            "oauth2_app": "summary",
            "oauth2_user": "summary",
            "post": "summary",
        }


class TestUploadFileConfirmationSubmit:
    """Tests for upload_file_confirmation_submit."""

    @pytest.mark.asyncio
    async def test_requires_connection(self, mm_client, drive):
        with pytest.raises(AppException) as exc_info:
            await upload_file_confirmation_submit(make_call(post={"id": "post_1"}))
        assert exc_info.value.message == NOT_CONNECTED_MESSAGE
        mm_client.get_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_uploads_every_file(self, mm_client, drive):
        call = make_call(post={"id": "post_1"}, oauth2_user=dict(CONNECTED_USER))
        message = await upload_file_confirmation_submit(call)

        create = drive.files.return_value.create
        assert create.call_count == 2
        first = create.call_args_list[0].kwargs
        assert first["body"] == {"name": "file_1.pdf"}
        assert first["fields"] == "id,name,webViewLink"
        assert isinstance(first["media_body"], MediaIoBaseUpload)
        assert first["media_body"].mimetype() == "application/pdf"

        assert "[file_1.pdf](https://drive.google.com/file/d/drive_1/view)" in message
        assert "- file_2.pdf" in message

    @pytest.mark.asyncio
    async def test_uploads_into_configured_folder(self, mm_client, drive, monkeypatch):
        monkeypatch.setenv("DRIVE_UPLOAD_FOLDER_ID", "folder_1")
        from gdrive_app.utils.config import get_settings
        get_settings.cache_clear()

        call = make_call(post={"id": "post_1"}, oauth2_user=dict(CONNECTED_USER))
        await upload_file_confirmation_submit(call)

        body = drive.files.return_value.create.call_args_list[0].kwargs["body"]
        assert body["parents"] == ["folder_1"]

    @pytest.mark.asyncio
    async def test_drive_failure(self, mm_client, drive):
        drive.files.return_value.create.return_value.execute.side_effect = Exception("storage quota exceeded")
        call = make_call(post={"id": "post_1"}, oauth2_user=dict(CONNECTED_USER))

        with pytest.raises(AppException) as exc_info:
            await upload_file_confirmation_submit(call)
        assert exc_info.value.message == "Google failed: storage quota exceeded"
        assert exc_info.value.exception_type == ExceptionType.TEXT_ERROR
