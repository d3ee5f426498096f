"""Notifications sent by the bot to the acting user."""

import logging
from typing import Any, Dict

from gdrive_app.exceptions import GoogleDriveAppError
from gdrive_app.providers.mattermost.client import MattermostClient
from gdrive_app.schemas.call import AppCallRequest

logger = logging.getLogger(__name__)


async def post_bot_channel(call: AppCallRequest, message: str) -> Dict[str, Any]:
    """
    Post a message in the direct channel between the bot and the acting user.

    Args:
        call: The call whose context carries the bot token and acting user
        message: Markdown message to post

    Returns:
        The created post
    """
    context = call.context
    if not context.bot_user_id or not context.acting_user:
        raise GoogleDriveAppError("Bot user and acting user are required to post in the bot channel")

    mm_client = MattermostClient(context.mattermost_site_url, context.bot_access_token)
    channel = await mm_client.create_direct_channel([context.bot_user_id, context.acting_user.id])
    post = await mm_client.create_post(channel["id"], message)
    logger.info(f"Posted bot message to user {context.acting_user.id}")
    return post
