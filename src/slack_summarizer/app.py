"""Bolt app assembly shared by the Socket Mode and HTTP entry points.

All clients are created here and injected into the Dispatcher; nothing below
this module reaches for global client instances.
"""

from typing import Optional
from slack_bolt.async_app import AsyncApp
from .config import Settings, get_settings
from .llm.client import LLMClient
from .llm.prompts import load_prompt
from .llm.summarize import SummarizationEngine
from .pipeline.dispatcher import Dispatcher
from .schemas.identity import BotIdentity
from .slack.client import SlackClientWrapper
from .slack.fetch import MessageFetcher
from .slack.respond import Responder
from .slack.users import UserResolver
from .log import get_logger

logger = get_logger("app")

async def resolve_identity(slack: SlackClientWrapper, settings: Settings) -> BotIdentity:
    user_id = settings.BOT_USER_ID
    if not user_id:
        try:
            user_id = (await slack.auth_identity())["user_id"]
        except Exception as e:
            logger.warning(f"auth.test failed, bot mentions will not be filtered by id: {e}")
    logger.info(f"Bot identity: {user_id} ({settings.BOT_DISPLAY_NAME})")
    return BotIdentity(
        user_id=user_id,
        display_name=settings.BOT_DISPLAY_NAME,
        command_prefix=settings.COMMAND_PREFIX,
    )

def build_dispatcher(
    slack: SlackClientWrapper,
    llm: LLMClient,
    identity: BotIdentity,
    settings: Settings,
) -> Dispatcher:
    template = load_prompt("summarize_system", settings.PROMPTS_DIR)
    if template:
        logger.info(f"Using system prompt override from {settings.PROMPTS_DIR}")
    return Dispatcher(
        fetcher=MessageFetcher(slack),
        resolver=UserResolver(slack),
        engine=SummarizationEngine(
            llm,
            language=settings.SUMMARY_LANGUAGE,
            temperature=settings.TEMPERATURE,
            template=template,
        ),
        responder=Responder(slack),
        identity=identity,
        default_limit=settings.DEFAULT_LIMIT,
    )

def register_listeners(app: AsyncApp, dispatcher: Dispatcher):
    @app.event("app_mention")
    async def handle_app_mention(event, logger):
        """Mention trigger: `@summarizer summarize`, `@summarizer what did we decide? --limit 30`."""
        try:
            await dispatcher.handle_mention(event)
        except Exception:
            logger.exception("Error handling app_mention event")

    @app.message(dispatcher.pattern)
    async def handle_command_message(message, logger):
        """Pattern trigger: `!summarize "question" 20`."""
        try:
            await dispatcher.handle_pattern_message(message)
        except Exception:
            logger.exception("Error handling message event")

    # Acknowledge everything else so Bolt does not warn about unhandled messages
    @app.event("message")
    async def ignore_other_messages():
        pass

async def build_app(settings: Optional[Settings] = None) -> AsyncApp:
    settings = settings or get_settings()
    app = AsyncApp(
        token=settings.SLACK_BOT_TOKEN,
        signing_secret=settings.SLACK_SIGNING_SECRET,
    )
    slack = SlackClientWrapper(app.client)
    identity = await resolve_identity(slack, settings)
    dispatcher = build_dispatcher(slack, LLMClient.from_settings(settings), identity, settings)
    register_listeners(app, dispatcher)
    return app
