"""Trigger event -> reply.

One run per trigger: parse, then either reply directly (help/version) or
fetch -> resolve users -> build transcript -> summarize -> reply. Each stage
degrades to an empty or fallback value instead of aborting; an empty fetch
ends the run without posting.
"""

from typing import Any, Dict, Optional

from .. import __version__
from ..commands.parser import (
    build_pattern,
    help_text,
    parse_command,
    parse_pattern_message,
    strip_bot_mention,
)
from ..llm.summarize import SummarizationEngine
from ..schemas.identity import BotIdentity
from ..schemas.intent import (
    DEFAULT_LIMIT,
    HelpIntent,
    Intent,
    QuestionIntent,
    VersionIntent,
)
from ..slack.fetch import MessageFetcher
from ..slack.parse import parse_event
from ..slack.respond import Responder
from ..slack.users import UserResolver
from ..transcript.builder import build_transcript
from ..log import get_logger

logger = get_logger("dispatcher")


class Dispatcher:
    def __init__(
        self,
        fetcher: MessageFetcher,
        resolver: UserResolver,
        engine: SummarizationEngine,
        responder: Responder,
        identity: BotIdentity,
        default_limit: int = DEFAULT_LIMIT,
        version: str = __version__,
    ):
        self.fetcher = fetcher
        self.resolver = resolver
        self.engine = engine
        self.responder = responder
        self.identity = identity
        self.default_limit = default_limit
        self.version = version
        self.pattern = build_pattern(identity.command_prefix)

    async def handle_mention(self, event: Dict[str, Any]) -> Optional[str]:
        trigger = parse_event(event)
        if trigger is None:
            return None
        prompt = strip_bot_mention(trigger.text, self.identity.user_id)
        logger.info(f"Mention from {trigger.user} in {trigger.channel}: {prompt!r}")
        intent = parse_command(prompt, self.default_limit)
        return await self.dispatch(intent, trigger.channel, trigger.thread_ts)

    async def handle_pattern_message(self, event: Dict[str, Any]) -> Optional[str]:
        trigger = parse_event(event)
        if trigger is None:
            return None
        intent = parse_pattern_message(trigger.text, self.pattern, self.default_limit)
        logger.info(f"Command from {trigger.user} in {trigger.channel}: {intent!r}")
        return await self.dispatch(intent, trigger.channel, trigger.thread_ts)

    async def dispatch(
        self,
        intent: Intent,
        channel_id: str,
        thread_ts: Optional[str] = None,
    ) -> Optional[str]:
        """
        Run one trigger to completion.
        Returns the text handed to the responder, or None when nothing was posted.
        """
        if isinstance(intent, HelpIntent):
            text = help_text(self.identity.display_name, self.default_limit)
            await self.responder.reply(channel_id, text, thread_ts)
            return text
        if isinstance(intent, VersionIntent):
            text = f"v{self.version}"
            await self.responder.reply(channel_id, text, thread_ts)
            return text

        fetched = await self.fetcher.fetch(channel_id, intent.limit, thread_ts)
        if not fetched.value:
            logger.info(f"Nothing to summarize in {channel_id} ({fetched.status})")
            return None

        users = await self.resolver.resolve(m.author_id for m in fetched.value)
        entries = build_transcript(fetched.value, users.value, self.identity)

        question = intent.text if isinstance(intent, QuestionIntent) else None
        summary = await self.engine.summarize(entries, question)

        posted = await self.responder.reply(channel_id, summary.value, thread_ts)
        logger.info(
            f"Run finished: fetch={fetched.status} users={users.status} "
            f"summary={summary.status} post={posted.status}"
        )
        return summary.value
