"""
Client for the Mattermost REST API.

This module handles the calls the app makes on behalf of the bot or the
acting user:
- Fetching posts and the files attached to them
- Opening direct message channels
- Creating posts
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from gdrive_app.constants import MATTERMOST_API
from gdrive_app.exceptions import MattermostApiError
from gdrive_app.utils.config import get_settings

logger = logging.getLogger(__name__)


class MattermostClient:
    """Thin async wrapper around the Mattermost REST API v4."""

    def __init__(self, mattermost_url: str, access_token: str, timeout: Optional[float] = None):
        """Initialize the client.

        Args:
            mattermost_url: Base URL of the Mattermost server
            access_token: Bot or user access token used as bearer token
            timeout: Request timeout in seconds, defaults to HTTP_TIMEOUT
        """
        if not mattermost_url:
            raise ValueError("mattermost_url is required")
        self.mattermost_url = mattermost_url.rstrip('/')
        self.api_url = f"{self.mattermost_url}{MATTERMOST_API}"
        self.headers = {
            'Authorization': f'Bearer {access_token}',
            'Content-Type': 'application/json'
        }
        self.timeout = timeout if timeout is not None else get_settings().HTTP_TIMEOUT

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.api_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.request(method, url, headers=self.headers, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"Mattermost API error on {method} {path}", extra={
                    "status_code": e.response.status_code,
                })
                raise MattermostApiError(
                    f"Mattermost API request failed with status {e.response.status_code}",
                    status_code=e.response.status_code
                ) from e
            except httpx.RequestError as e:
                logger.error(f"Could not reach Mattermost on {method} {path}: {str(e)}")
                raise MattermostApiError(f"Could not reach Mattermost: {str(e)}") from e
        return response

    async def get_post(self, post_id: str) -> Dict[str, Any]:
        response = await self._request("GET", f"/posts/{post_id}")
        return response.json()

    async def get_file_info(self, file_id: str) -> Dict[str, Any]:
        response = await self._request("GET", f"/files/{file_id}/info")
        return response.json()

    async def get_file(self, file_id: str) -> bytes:
        response = await self._request("GET", f"/files/{file_id}")
        return response.content

    async def create_direct_channel(self, user_ids: List[str]) -> Dict[str, Any]:
        """Open (or fetch) the direct message channel between two users."""
        response = await self._request("POST", "/channels/direct", json=user_ids)
        return response.json()

    async def create_post(self, channel_id: str, message: str) -> Dict[str, Any]:
        response = await self._request("POST", "/posts", json={
            "channel_id": channel_id,
            "message": message,
        })
        return response.json()
