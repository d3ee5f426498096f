"""
Google account connection lifecycle.

This module handles the OAuth2 calls the host makes for the app:
- Reporting whether the acting user is connected
- Building the Google authorization URL
- Completing the flow and storing the user's credential
- Disconnecting the user
"""

import logging

from gdrive_app.exceptions import AppException, ExceptionType, GoogleDriveAppError
from gdrive_app.providers.google.client import (
    NOT_CONFIGURED_MESSAGE,
    get_google_drive_client,
    get_oauth_google_client,
)
from gdrive_app.repositories.kvstore import KVStoreClient
from gdrive_app.schemas.call import AppCallRequest, Oauth2CurrentUser
from gdrive_app.services.post_in_channel import post_bot_channel
from gdrive_app.utils.helpers import is_connected, try_call
from gdrive_app.utils.markdown import hyperlink

logger = logging.getLogger(__name__)

MISSING_CODE_MESSAGE = "Bad Request: code param not provided"
ALREADY_CONNECTED_MESSAGE = "You are already logged into Google"
CONNECTED_MESSAGE = "You have successfully connected your Google account!"
DISCONNECTED_MESSAGE = "You have successfully disconnected your Google account!"
NO_SESSION_MESSAGE = "Impossible to disconnect. There is no active session"
NO_REFRESH_TOKEN_MESSAGE = "Google did not return a refresh token. Please try to connect again."


async def get_connect_link(call: AppCallRequest) -> str:
    """Tell the user they are connected, or give them the link to connect."""
    oauth2 = call.context.oauth2
    if is_connected(oauth2):
        return ALREADY_CONNECTED_MESSAGE

    if not oauth2 or not oauth2.connect_url:
        raise AppException(ExceptionType.MARKDOWN, NOT_CONFIGURED_MESSAGE)
    return f"Follow this {hyperlink('link', oauth2.connect_url)} to connect Mattermost to your Google Account."


async def oauth2_connect(call: AppCallRequest) -> str:
    """
    Build the Google authorization URL for the acting user.

    The host's state token is passed through unchanged so it can bind the
    completion call to this request. Offline access with a forced consent
    screen makes Google return a refresh token on every connect, not only the
    first one.
    """
    flow = get_oauth_google_client(call)
    auth_url, _ = flow.authorization_url(
        access_type='offline',
        prompt='consent',
        state=call.values.state,
    )
    return auth_url


async def oauth2_complete(call: AppCallRequest) -> None:
    """
    Finish the OAuth2 flow.

    Exchanges the authorization code, looks up the Google account email,
    stores the credential for the acting user and in the shared directory,
    then notifies the user. Steps run in order and stop at the first failure.

    Raises:
        GoogleDriveAppError: If the provider did not return a code
        AppException: If Google rejects the code exchange or the profile
            lookup, or returns no refresh token
    """
    context = call.context
    values = call.values

    if not values.code:
        raise GoogleDriveAppError(values.error_description or MISSING_CODE_MESSAGE)

    if not context.acting_user:
        raise GoogleDriveAppError("Acting user is required to complete the connection")

    flow = get_oauth_google_client(call)
    await try_call(
        lambda: flow.fetch_token(code=values.code),
        ExceptionType.TEXT_ERROR,
        'Google failed: '
    )
    refresh_token = flow.credentials.refresh_token
    if not refresh_token:
        raise AppException(ExceptionType.TEXT_ERROR, NO_REFRESH_TOKEN_MESSAGE)

    drive = get_google_drive_client(call, refresh_token=refresh_token)
    about_user = await try_call(
        lambda: drive.about().get(fields='user').execute(),
        ExceptionType.TEXT_ERROR,
        'Google failed: '
    )

    stored_token = Oauth2CurrentUser(
        refresh_token=refresh_token,
        user_email=about_user.get('user', {}).get('emailAddress'),
    )
    user_id = context.acting_user.id
    logger.info(f"Google account {stored_token.user_email} connected for user {user_id}")

    kv_store_oauth = KVStoreClient(context.mattermost_site_url, context.acting_user_access_token)
    await kv_store_oauth.store_oauth2_user(stored_token)

    # TODO: the directory is read-modify-written without a revision check; move
    # to one key per user once the host KV store offers list-by-prefix.
    kv_store = KVStoreClient(context.mattermost_site_url, context.bot_access_token)
    google_data = await kv_store.get_google_data()
    google_data.upsert_user(user_id, stored_token)
    await kv_store.set_google_data(google_data)

    await post_bot_channel(call, CONNECTED_MESSAGE)


async def oauth2_disconnect(call: AppCallRequest) -> None:
    """
    Forget the acting user's Google credential.

    Raises:
        AppException: If the user has no active connection
    """
    context = call.context
    if not is_connected(context.oauth2):
        raise AppException(ExceptionType.MARKDOWN, NO_SESSION_MESSAGE)
    if not context.acting_user:
        raise GoogleDriveAppError("Acting user is required to disconnect")

    user_id = context.acting_user.id

    kv_store_oauth = KVStoreClient(context.mattermost_site_url, context.acting_user_access_token)
    await kv_store_oauth.store_oauth2_user(Oauth2CurrentUser())

    kv_store = KVStoreClient(context.mattermost_site_url, context.bot_access_token)
    google_data = await kv_store.get_google_data()
    if not google_data.remove_user(user_id):
        logger.warning(f"User {user_id} was not in the Google directory")
    await kv_store.set_google_data(google_data)

    logger.info(f"Google account disconnected for user {user_id}")
    await post_bot_channel(call, DISCONNECTED_MESSAGE)
