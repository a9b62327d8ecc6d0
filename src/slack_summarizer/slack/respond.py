from typing import Optional
from .client import SlackClientWrapper
from .post_blocks import build_post_payload
from ..schemas.results import StageResult
from ..log import get_logger

logger = get_logger("responder")

class Responder:
    """Posts results back where the trigger came from. Never retries."""

    def __init__(self, slack: SlackClientWrapper):
        self.slack = slack

    async def reply(self, channel_id: str, text: str, thread_ts: Optional[str] = None) -> StageResult[str]:
        payload = build_post_payload(channel=channel_id, text=text, thread_ts=thread_ts)
        try:
            await self.slack.post_message(payload)
        except Exception as e:
            logger.error(f"Error posting message: {e}")
            return StageResult(status="failed", value=text, error=str(e))
        logger.info(f"Posted reply to {channel_id} (thread={thread_ts})")
        return StageResult(status="ok", value=text)
