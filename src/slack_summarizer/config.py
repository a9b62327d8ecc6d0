from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    SLACK_BOT_TOKEN: str = Field(..., description="Slack Bot User OAuth Token")
    SLACK_APP_TOKEN: Optional[str] = Field(None, description="Slack App-Level Token (for Socket Mode)")
    SLACK_SIGNING_SECRET: Optional[str] = Field(None, description="Signing secret (for HTTP mode)")
    OPENAI_API_KEY: str = Field(..., description="OpenAI API Key")
    OPENAI_ORGANIZATION_ID: Optional[str] = None
    OPENAI_PROJECT_ID: Optional[str] = None
    MODEL: str = "gpt-4o"
    TEMPERATURE: float = 0.5
    DEFAULT_LIMIT: int = Field(10, gt=0, description="Messages summarized when no --limit is given")
    SUMMARY_LANGUAGE: str = "Korean"
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000

    # Bot identity
    BOT_USER_ID: Optional[str] = Field(None, description="Bot user id; looked up with auth.test when unset")
    BOT_DISPLAY_NAME: str = "summarizer"
    COMMAND_PREFIX: str = "!summarize"

    PROMPTS_DIR: str = "data/prompts"

    model_config = SettingsConfigDict(
        # later files win: .env.local > .env > .env.development.local > .env.development
        env_file=(".env.development", ".env.development.local", ".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
