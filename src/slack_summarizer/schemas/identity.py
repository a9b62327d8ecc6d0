from typing import Optional
from pydantic import BaseModel, ConfigDict


class BotIdentity(BaseModel):
    """
    Who the bot is in the workspace.
    Supplied at startup so the same pipeline can run under different bot users.
    """
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    display_name: str = "summarizer"
    command_prefix: str = "!summarize"

    @property
    def mention_token(self) -> Optional[str]:
        if not self.user_id:
            return None
        return f"<@{self.user_id}>"
