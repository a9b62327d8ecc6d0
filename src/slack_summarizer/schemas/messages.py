"""Pydantic schemas for Slack messages and transcript entries.

Defines RawMessage, TranscriptEntry and the per-request UserMap alias.
"""

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict

# author id -> display name, rebuilt for every request
UserMap = Dict[str, str]

UNKNOWN_USER = "Unknown"


class RawMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    author_id: str = ""
    channel_id: str
    thread_ts: Optional[str] = None

    @classmethod
    def from_slack(cls, payload: Dict[str, Any], channel_id: str) -> "RawMessage":
        """
        Build from a conversations.history / conversations.replies item.
        Bot posts and file shares may lack `user` or `text`.
        """
        return cls(
            text=payload.get("text") or "",
            author_id=payload.get("user") or "",
            channel_id=payload.get("channel") or channel_id,
            thread_ts=payload.get("thread_ts"),
        )


class TranscriptEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str
    speaker: str

    def as_prompt_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}
