"""Slack message payload builders.

Provides build_post_payload() for chat.postMessage with mrkdwn formatting.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..rendering.slack_format import markdown_to_slack_mrkdwn


def build_post_payload(
    channel: str,
    text: str,
    thread_ts: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Payload for chat.postMessage.
    Without thread_ts the reply becomes a new top-level message.
    """
    payload: Dict[str, Any] = {
        "channel": channel,
        "text": markdown_to_slack_mrkdwn(text),
        "mrkdwn": True,
        "unfurl_links": False,
        "unfurl_media": False,
    }
    if thread_ts:
        payload["thread_ts"] = thread_ts
    return payload
