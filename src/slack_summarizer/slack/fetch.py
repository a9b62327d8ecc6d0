from typing import List, Optional
from .client import SlackClientWrapper
from ..schemas.messages import RawMessage
from ..schemas.results import StageResult
from ..log import get_logger

logger = get_logger("fetch")

class MessageFetcher:
    """
    Retrieves a bounded window of channel or thread messages.
    Order is kept exactly as Slack returns it.
    """

    def __init__(self, slack: SlackClientWrapper):
        self.slack = slack

    async def fetch(
        self,
        channel_id: str,
        limit: int,
        thread_ts: Optional[str] = None,
    ) -> StageResult[List[RawMessage]]:
        try:
            if thread_ts:
                payloads = await self.slack.fetch_thread_replies(channel_id, thread_ts, limit)
            else:
                payloads = await self.slack.fetch_history(channel_id, limit)
        except Exception as e:
            logger.error(f"Error fetching messages: {e}")
            return StageResult(status="failed", value=[], error=str(e))

        messages = [RawMessage.from_slack(p, channel_id) for p in payloads]
        logger.info(f"Fetched {len(messages)} messages from {channel_id} (limit={limit}, thread={thread_ts})")
        if not messages:
            return StageResult(status="empty", value=[])
        return StageResult(status="ok", value=messages)
