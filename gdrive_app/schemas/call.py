"""
Schemas for the call requests and responses exchanged with the Apps framework.

The host expands only the context fields a call asks for, so almost every
field is optional. Context models are frozen: handlers derive a new context
with model_copy() instead of mutating the one they received.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActingUser(BaseModel):
    """Summary of the Mattermost user who triggered the call."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(..., description="Mattermost user ID")
    username: Optional[str] = Field(None, description="Mattermost username")
    email: Optional[str] = Field(None, description="Mattermost email address")


class Oauth2CurrentUser(BaseModel):
    """Google credential linked to a Mattermost user. An empty record means disconnected."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    refresh_token: Optional[str] = Field(None, description="Google OAuth2 refresh token")
    user_email: Optional[str] = Field(None, description="Email of the connected Google account")

    def to_kv(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Oauth2App(BaseModel):
    """OAuth2 integration descriptor supplied by the host."""

    model_config = ConfigDict(frozen=True, extra="allow")

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    connect_url: Optional[str] = None
    complete_url: Optional[str] = None
    user: Optional[Oauth2CurrentUser] = None

    @field_validator("user", mode="before")
    @classmethod
    def _empty_user(cls, value):
        # The host sends {} once a user has disconnected
        if value == {}:
            return None
        return value


class PostSummary(BaseModel):
    """The post a call was made on."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    channel_id: Optional[str] = None
    user_id: Optional[str] = None
    message: Optional[str] = None
    file_ids: List[str] = Field(default_factory=list)

    @field_validator("file_ids", mode="before")
    @classmethod
    def _none_file_ids(cls, value):
        return value or []


class AppContext(BaseModel):
    """Request context expanded by the host for a single call."""

    model_config = ConfigDict(frozen=True, extra="allow")

    app_id: Optional[str] = None
    location: Optional[str] = None
    mattermost_site_url: Optional[str] = None
    app_path: Optional[str] = None
    bot_user_id: Optional[str] = None
    bot_access_token: Optional[str] = None
    acting_user: Optional[ActingUser] = None
    acting_user_access_token: Optional[str] = None
    oauth2: Optional[Oauth2App] = None
    post: Optional[PostSummary] = None


class AppCallValues(BaseModel):
    """Submitted form values and OAuth2 callback parameters."""

    model_config = ConfigDict(frozen=True, extra="allow")

    state: Optional[str] = None
    code: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None


class AppCallRequest(BaseModel):
    """A call sent by the host to one of the app's paths."""

    model_config = ConfigDict(frozen=True, extra="allow")

    path: Optional[str] = None
    context: AppContext = Field(default_factory=AppContext)
    values: AppCallValues = Field(default_factory=AppCallValues)

    @field_validator("context", "values", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return {} if value is None else value


class AppCall(BaseModel):
    """A call the host should make, with the context it has to expand."""

    path: str
    expand: Optional[Dict[str, str]] = None
    state: Optional[Dict[str, Any]] = None


class AppField(BaseModel):
    name: str
    type: str = "text"
    label: Optional[str] = None
    description: Optional[str] = None
    is_required: bool = False


class AppForm(BaseModel):
    """Form descriptor rendered by the host."""

    title: Optional[str] = None
    header: Optional[str] = None
    icon: Optional[str] = None
    fields: List[AppField] = Field(default_factory=list)
    submit: Optional[AppCall] = None


class AppBinding(BaseModel):
    """A UI location (command, menu item) bound to a call."""

    location: Optional[str] = None
    label: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    hint: Optional[str] = None
    submit: Optional[AppCall] = None
    form: Optional[AppForm] = None
    bindings: Optional[List["AppBinding"]] = None


class AppCallResponse(BaseModel):
    """Response to a call."""

    type: str
    text: Optional[str] = None
    data: Optional[Any] = None
    form: Optional[AppForm] = None


AppBinding.model_rebuild()
