import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Settings require these; set before anything imports slack_summarizer.config
os.environ.setdefault("SLACK_BOT_TOKEN", "xoxb-test")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")

from slack_summarizer.llm.client import LLMClient
from slack_summarizer.llm.summarize import SummarizationEngine
from slack_summarizer.pipeline.dispatcher import Dispatcher
from slack_summarizer.schemas.identity import BotIdentity
from slack_summarizer.slack.client import SlackClientWrapper
from slack_summarizer.slack.fetch import MessageFetcher
from slack_summarizer.slack.respond import Responder
from slack_summarizer.slack.users import UserResolver

from helpers import USERS, make_completion


@pytest.fixture
def identity():
    return BotIdentity(user_id="UBOT", display_name="summarizer", command_prefix="!summarize")


@pytest.fixture
def slack_web():
    """
    Stand-in for slack_sdk's AsyncWebClient.
    users_info knows alice, bob and the bot; everyone else is user_not_found.
    """
    from slack_sdk.errors import SlackApiError

    async def users_info(user):
        if user not in USERS:
            raise SlackApiError("user_not_found", {"ok": False, "error": "user_not_found"})
        return {"ok": True, "user": {"id": user, "name": USERS[user]}}

    web = MagicMock()
    web.conversations_history = AsyncMock(return_value={"ok": True, "messages": []})
    web.conversations_replies = AsyncMock(return_value={"ok": True, "messages": []})
    web.users_info = AsyncMock(side_effect=users_info)
    web.chat_postMessage = AsyncMock(return_value={"ok": True})
    web.auth_test = AsyncMock(return_value={"ok": True, "user_id": "UBOT", "user": "summarizer"})
    return web


@pytest.fixture
def slack(slack_web):
    return SlackClientWrapper(slack_web)


@pytest.fixture
def openai_client():
    """Stand-in for openai.AsyncOpenAI; answers every completion with 'A summary.'"""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("A summary."))
    return client


@pytest.fixture
def llm(openai_client):
    return LLMClient(openai_client, model="gpt-4o")


@pytest.fixture
def dispatcher(slack, llm, identity):
    return Dispatcher(
        fetcher=MessageFetcher(slack),
        resolver=UserResolver(slack),
        engine=SummarizationEngine(llm, language="Korean", temperature=0.5),
        responder=Responder(slack),
        identity=identity,
        default_limit=10,
    )
