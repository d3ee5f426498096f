"""
Integration tests for the call routes served to the Apps framework.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from gdrive_app.main import create_app
from gdrive_app.services.oauth_google import CONNECTED_MESSAGE
from tests.fixtures.calls import CONNECTED_USER, USER_ID, USER_TOKEN, make_call_payload


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_manifest(client):
    response = client.get("/manifest.json")
    assert response.status_code == 200
    assert response.json()["app_id"] == "google-drive"


def test_bindings(client):
    response = client.post("/bindings", json=make_call_payload())
    body = response.json()
    assert body["type"] == "ok"
    assert body["data"][0]["location"] == "/command"


def test_help(client):
    body = client.post("/help/submit", json=make_call_payload()).json()
    assert body["type"] == "ok"
    assert "/drive connect" in body["text"]


def test_connect_submit_when_connected(client):
    body = client.post("/connect/submit", json=make_call_payload(oauth2_user=dict(CONNECTED_USER))).json()
    assert body == {"type": "ok", "text": "You are already logged into Google"}


def test_oauth2_connect_returns_url(client):
    body = client.post("/oauth2/connect", json=make_call_payload(values={"state": "st8"})).json()
    assert body["type"] == "ok"
    assert body["data"].startswith("https://accounts.google.com/o/oauth2/auth?")
    assert "state=st8" in body["data"]


def test_oauth2_complete_without_code(client):
    response = client.post("/oauth2/complete", json=make_call_payload(values={"error_description": "access_denied"}))
    assert response.status_code == 200
    assert response.json() == {"type": "error", "text": "access_denied"}


def test_oauth2_complete(client, fake_kv, mock_google, mock_post_bot_channel):
    response = client.post("/oauth2/complete", json=make_call_payload(values={"code": "auth_code"}))

    assert response.json() == {"type": "ok"}
    assert fake_kv.google_data().user_ids() == [USER_ID]
    assert mock_post_bot_channel.await_args.args[1] == CONNECTED_MESSAGE



def test_oauth2_complete_rejected_code(client, fake_kv, mock_google, mock_post_bot_channel):
    mock_google["flow"].fetch_token.side_effect = Exception("(invalid_grant) Bad Request")
    response = client.post("/oauth2/complete", json=make_call_payload(values={"code": "used_code"}))

    assert response.status_code == 200
    assert response.json() == {"type": "error", "text": "Google failed: (invalid_grant) Bad Request"}
    assert fake_kv.calls == []

def test_disconnect_without_session(client, fake_kv):
    body = client.post("/disconnect/submit", json=make_call_payload()).json()
    assert body["type"] == "error"
    assert body["text"].startswith("Impossible to disconnect")
    assert fake_kv.calls == []


def test_disconnect(client, fake_kv, mock_post_bot_channel):
    fake_kv.values["google_data"] = {"userData": [{USER_ID: dict(CONNECTED_USER)}]}
    body = client.post("/disconnect/submit", json=make_call_payload(oauth2_user=dict(CONNECTED_USER))).json()

    assert body == {"type": "ok"}
    assert fake_kv.google_data().user_ids() == []
    assert fake_kv.oauth2_users[USER_TOKEN] == {}


def test_save_file_call_without_files(client, monkeypatch):
    mm_client = MagicMock()
    mm_client.get_post = AsyncMock(return_value={"id": "post_1", "file_ids": []})
    monkeypatch.setattr("gdrive_app.services.upload_google.MattermostClient", MagicMock(return_value=mm_client))

    body = client.post("/save-file/call", json=make_call_payload(post={"id": "post_1"})).json()
    assert body == {"type": "error", "text": "Selected post doesn't have any files to be uploaded"}


def test_save_file_call_returns_form(client, monkeypatch):
    mm_client = MagicMock()
    mm_client.get_post = AsyncMock(return_value={"id": "post_1", "file_ids": ["file_1"]})
    monkeypatch.setattr("gdrive_app.services.upload_google.MattermostClient", MagicMock(return_value=mm_client))

    body = client.post("/save-file/call", json=make_call_payload(post={"id": "post_1"})).json()
    assert body["type"] == "form"
    assert body["form"]["submit"]["path"] == "/save-file/submit"
    assert body["form"]["fields"] == []


def test_save_file_submit(client, monkeypatch):
    monkeypatch.setattr(
        "gdrive_app.routes.upload.upload_file_confirmation_submit",
        AsyncMock(return_value="**Uploaded to Google Drive**:\n- a.txt"),
    )
    payload = make_call_payload(post={"id": "post_1"}, oauth2_user=dict(CONNECTED_USER))
    body = client.post("/save-file/submit", json=payload).json()
    assert body == {"type": "ok", "text": "**Uploaded to Google Drive**:\n- a.txt"}


def test_invalid_call_body(client):
    body = client.post("/connect/submit", json={"context": {"acting_user": {"username": "no-id"}}}).json()
    assert body["type"] == "error"
    assert body["text"].startswith("Invalid call request")
