"""Trigger text -> Intent.

Pure functions only: no Slack or model calls happen here, so every default
rule can be tested in isolation.
"""

import re
from typing import Dict, Optional

from ..schemas.intent import (
    DEFAULT_LIMIT,
    HelpIntent,
    Intent,
    QuestionIntent,
    SummarizeIntent,
    VersionIntent,
)

HELP_FLAG = "--help"
VERSION_FLAG = "--version"
LIMIT_FLAG = "--limit"
SUMMARIZE_WORD = "summarize"

OPTIONS: Dict[str, str] = {
    HELP_FLAG: "Show help",
    VERSION_FLAG: "Show version",
    LIMIT_FLAG: "Set the limit of messages to summarize",
}

# Leading integer, the way JavaScript's parseInt reads "20 messages"
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")
_LEADING_MENTION_RE = re.compile(r"^\s*<@[A-Z0-9]+(?:\|[^>]*)?>")


def parse_limit(raw: Optional[str], default: int = DEFAULT_LIMIT) -> int:
    """
    Parse a message-count limit. Anything that is not a positive
    integer (missing, empty, garbage, zero, negative) yields `default`.
    """
    if raw is None:
        return default
    match = _LEADING_INT_RE.match(raw.strip())
    if not match:
        return default
    value = int(match.group(0))
    return value if value > 0 else default


def strip_bot_mention(text: str, bot_user_id: Optional[str] = None) -> str:
    """
    Remove the bot's mention token from an app_mention text.
    Without a known bot id, the leading mention token is removed instead.
    """
    if bot_user_id:
        pattern = re.compile(rf"<@{re.escape(bot_user_id)}(?:\|[^>]*)?>")
        stripped, count = pattern.subn("", text, count=1)
        if count:
            return stripped.strip()
    return _LEADING_MENTION_RE.sub("", text, count=1).strip()


def _intent_for_prompt(prompt: Optional[str], limit: int) -> Intent:
    question = (prompt or "").strip()
    if not question or question == SUMMARIZE_WORD:
        return SummarizeIntent(limit=limit)
    return QuestionIntent(text=question, limit=limit)


def parse_command(text: str, default_limit: int = DEFAULT_LIMIT) -> Intent:
    """
    Parse mention text (bot mention already stripped).

    `--help` / `--version` win when they are the whole text. Otherwise an
    optional `--limit N` is split off at its first occurrence and whatever
    precedes it decides between a summary and a question.
    """
    trimmed = text.strip()
    if trimmed == HELP_FLAG:
        return HelpIntent()
    if trimmed == VERSION_FLAG:
        return VersionIntent()

    prompt = text
    limit = default_limit
    if LIMIT_FLAG in text:
        prompt, _, rest = text.partition(LIMIT_FLAG)
        # Text following the number is dropped
        limit = parse_limit(rest.split(LIMIT_FLAG, 1)[0], default_limit)

    return _intent_for_prompt(prompt, limit)


def build_pattern(command_prefix: str = "!summarize") -> "re.Pattern[str]":
    """
    Regex for the message trigger: the command word, an optional quoted
    question (group 1) and an optional message count (group 2).
    """
    return re.compile(
        re.escape(command_prefix) + r'\s*(?:["“](.*)["”])?\s*([0-9]*)'
    )


COMMAND_PATTERN = build_pattern()


def parse_pattern_message(
    text: str,
    pattern: "re.Pattern[str]" = COMMAND_PATTERN,
    default_limit: int = DEFAULT_LIMIT,
) -> Intent:
    """Parse a `!summarize "question" N` message into an Intent."""
    match = pattern.search(text)
    if not match:
        return SummarizeIntent(limit=default_limit)
    question, raw_limit = match.group(1), match.group(2)
    return _intent_for_prompt(question, parse_limit(raw_limit, default_limit))


def help_text(display_name: str = "summarizer", default_limit: int = DEFAULT_LIMIT) -> str:
    lines = [
        f"Usage: @{display_name} [summarize|question] [options]",
        f" If no question is provided but '{SUMMARIZE_WORD}', "
        f"the last {default_limit} messages will be summarized.",
    ]
    lines += [f"{flag}: {description}" for flag, description in OPTIONS.items()]
    return "```" + "\n".join(lines) + "```"
