from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict

IGNORED_SUBTYPES = ("bot_message", "message_changed", "message_deleted")


class Trigger(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel: str
    text: str
    thread_ts: Optional[str] = None
    user: Optional[str] = None


def parse_event(event: Dict[str, Any]) -> Optional[Trigger]:
    """
    Parse an app_mention or message event into a Trigger.
    Returns None for events that must not start a pipeline run.
    """
    channel = event.get("channel")
    if not channel:
        return None

    # Ignore bots (including our own replies) and edits/deletions
    if event.get("subtype") in IGNORED_SUBTYPES:
        return None
    if event.get("bot_id"):
        return None

    return Trigger(
        channel=channel,
        text=event.get("text") or "",
        thread_ts=event.get("thread_ts"),
        user=event.get("user"),
    )
