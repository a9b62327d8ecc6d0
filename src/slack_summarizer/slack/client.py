"""Thin async wrapper around the Slack Web API.

Logs API errors and re-raises them; the pipeline stages decide how a failure
degrades.
"""

from typing import Any, Dict, List, Optional
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient
from ..log import get_logger

logger = get_logger("slack_client")

class SlackClientWrapper:
    def __init__(self, client: AsyncWebClient):
        self.client = client

    @classmethod
    def from_token(cls, token: str) -> "SlackClientWrapper":
        return cls(AsyncWebClient(token=token))

    async def fetch_history(self, channel_id: str, limit: int) -> List[Dict[str, Any]]:
        """
        Reads the latest messages of a channel (newest first, as Slack returns them).
        Requires 'channels:history' scope.
        """
        try:
            response = await self.client.conversations_history(
                channel=channel_id,
                limit=limit
            )
            return response.get("messages") or []
        except SlackApiError as e:
            logger.error(f"Error fetching history for {channel_id}: {e.response['error']}")
            raise

    async def fetch_thread_replies(self, channel_id: str, thread_ts: str, limit: int) -> List[Dict[str, Any]]:
        """Reads a thread, parent message first."""
        try:
            response = await self.client.conversations_replies(
                channel=channel_id,
                ts=thread_ts,
                limit=limit
            )
            return response.get("messages") or []
        except SlackApiError as e:
            logger.error(f"Error fetching replies for {channel_id}/{thread_ts}: {e.response['error']}")
            raise

    async def resolve_user(self, user_id: str) -> Optional[str]:
        """Returns the user's handle, or None if Slack has no name for it."""
        try:
            response = await self.client.users_info(user=user_id)
        except SlackApiError as e:
            logger.error(f"Error resolving user {user_id}: {e.response['error']}")
            raise
        user = response.get("user") or {}
        return user.get("name") or None

    async def post_message(self, payload: Dict[str, Any]):
        """
        Post a prepared chat.postMessage payload (see post_blocks.build_post_payload).
        """
        try:
            await self.client.chat_postMessage(**payload)
        except SlackApiError as e:
            if e.response["error"] == "ratelimited":
                logger.warning("Slack rate limited, dropping reply")
            else:
                logger.error(f"Slack API error: {e.response['error']}")
            raise

    async def auth_identity(self) -> Dict[str, Optional[str]]:
        """Who is this token? Used once at startup to learn the bot's user id."""
        response = await self.client.auth_test()
        return {"user_id": response.get("user_id"), "user": response.get("user")}
