"""
Key/value storage provided by the Mattermost Apps framework.

The store is scoped by the token used: the bot token reaches the app-wide
keys (the shared google_data directory), the acting user's token reaches the
user's own OAuth2 record.
"""

import logging
from typing import Any, Optional

import httpx

from gdrive_app.constants import APPS_PLUGIN_API
from gdrive_app.exceptions import KVStoreError
from gdrive_app.schemas.call import Oauth2CurrentUser
from gdrive_app.schemas.kvstore import KVGoogleData
from gdrive_app.utils.config import get_settings

logger = logging.getLogger(__name__)


class KVStoreClient:
    """Repository over the Apps plugin KV and OAuth2 user endpoints."""

    def __init__(self, mattermost_url: str, access_token: str, timeout: Optional[float] = None):
        if not mattermost_url:
            raise ValueError("mattermost_url is required")
        self.api_url = f"{mattermost_url.rstrip('/')}{APPS_PLUGIN_API}"
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
                logger.error(f"KV store error on {method} {path}", extra={
                    "status_code": e.response.status_code,
                })
                raise KVStoreError(
                    f"KV store request failed with status {e.response.status_code}",
                    status_code=e.response.status_code
                ) from e
            except httpx.RequestError as e:
                logger.error(f"Could not reach KV store on {method} {path}: {str(e)}")
                raise KVStoreError(f"Could not reach KV store: {str(e)}") from e
        return response

    async def kv_get(self, key: str) -> Any:
        """Read a value; an empty body means the key is unset."""
        response = await self._request("GET", f"/kv/{key}")
        if not response.content:
            return None
        return response.json()

    async def kv_set(self, key: str, value: Any) -> None:
        await self._request("POST", f"/kv/{key}", json=value)

    async def store_oauth2_user(self, record: Oauth2CurrentUser) -> None:
        """Overwrite the acting user's OAuth2 record."""
        await self._request("POST", "/oauth2/user", json=record.to_kv())

    async def get_google_data(self, key: Optional[str] = None) -> KVGoogleData:
        raw = await self.kv_get(key or get_settings().GOOGLE_DATA_KV_KEY)
        return KVGoogleData.from_kv(raw)

    async def set_google_data(self, google_data: KVGoogleData, key: Optional[str] = None) -> None:
        await self.kv_set(key or get_settings().GOOGLE_DATA_KV_KEY, google_data.to_kv())
