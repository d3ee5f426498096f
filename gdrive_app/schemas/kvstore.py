"""
Schemas for the records persisted in the Apps key/value store.
"""

import logging
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gdrive_app.schemas.call import Oauth2CurrentUser

logger = logging.getLogger(__name__)


def _entry_user_id(entry: Dict[str, Oauth2CurrentUser]) -> Optional[str]:
    return next(iter(entry), None)


class KVGoogleData(BaseModel):
    """
    Shared directory mapping Mattermost user IDs to their Google credential.

    Stored as {"userData": [{<user_id>: {refresh_token, user_email}}, ...]}.
    Each entry holds a single key; a user ID appears at most once as long as
    writes go through upsert_user().
    """

    model_config = ConfigDict(populate_by_name=True)

    user_data: List[Dict[str, Oauth2CurrentUser]] = Field(default_factory=list, alias="userData")

    @field_validator("user_data", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return value or []

    @classmethod
    def from_kv(cls, raw: Any) -> "KVGoogleData":
        """Build the directory from a raw store value; anything but an object is empty."""
        if not isinstance(raw, dict):
            if raw not in (None, ""):
                logger.warning(f"Ignoring malformed google data of type {type(raw).__name__}")
            return cls()
        return cls.model_validate(raw)

    def to_kv(self) -> Dict[str, Any]:
        return {
            "userData": [
                {user_id: record.to_kv() for user_id, record in entry.items()}
                for entry in self.user_data
            ]
        }

    def _index_of(self, user_id: str) -> int:
        for index, entry in enumerate(self.user_data):
            if _entry_user_id(entry) == user_id:
                return index
        return -1

    def find_user(self, user_id: str) -> Optional[Oauth2CurrentUser]:
        index = self._index_of(user_id)
        if index < 0:
            return None
        return self.user_data[index][user_id]

    def upsert_user(self, user_id: str, record: Oauth2CurrentUser) -> None:
        """Replace the user's entry in place, or append one if missing."""
        index = self._index_of(user_id)
        if index < 0:
            self.user_data.append({user_id: record})
        else:
            self.user_data[index] = {user_id: record}

    def remove_user(self, user_id: str) -> bool:
        """Remove the user's entry. Returns False when there was none."""
        index = self._index_of(user_id)
        if index < 0:
            return False
        del self.user_data[index]
        return True

    def user_ids(self) -> List[str]:
        return [user_id for user_id in map(_entry_user_id, self.user_data) if user_id]
