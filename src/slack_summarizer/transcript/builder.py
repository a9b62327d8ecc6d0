"""Raw Slack messages -> sanitized, speaker-attributed transcript.

This is the only place message text is rewritten before it reaches the model.
"""

import re
from typing import Iterable, List

from ..schemas.identity import BotIdentity
from ..schemas.messages import UNKNOWN_USER, RawMessage, TranscriptEntry, UserMap
from ..log import get_logger

logger = get_logger("transcript")

# <@U123> or <@U123|label>
MENTION_RE = re.compile(r"<@([A-Z0-9]+)(?:\|[^>]*)?>")


def rewrite_mentions(text: str, user_map: UserMap) -> str:
    """
    Replace every mention token with the mentioned user's name.
    Tokens are consumed in a single pass, so running this again on its own
    output changes nothing.
    """
    return MENTION_RE.sub(lambda m: user_map.get(m.group(1), UNKNOWN_USER), text)


def is_command(message: RawMessage, identity: BotIdentity) -> bool:
    return message.text.lstrip().startswith(identity.command_prefix)


def is_addressed_to_bot(message: RawMessage, identity: BotIdentity) -> bool:
    if not identity.user_id:
        return False
    if message.author_id == identity.user_id:
        return True
    return message.text.lstrip().startswith(identity.mention_token)


def build_transcript(
    messages: Iterable[RawMessage],
    user_map: UserMap,
    identity: BotIdentity,
) -> List[TranscriptEntry]:
    entries: List[TranscriptEntry] = []
    skipped = 0
    for message in messages:
        if is_command(message, identity):
            skipped += 1
            continue

        speaker = user_map.get(message.author_id, UNKNOWN_USER)
        if speaker == identity.display_name:
            skipped += 1
            continue

        if is_addressed_to_bot(message, identity):
            skipped += 1
            continue

        text = rewrite_mentions(message.text, user_map)
        entries.append(TranscriptEntry(speaker=speaker, content=f"{speaker}: {text}"))

    logger.debug(f"Transcript: {len(entries)} entries, {skipped} skipped")
    return entries
