"""Slack mrkdwn formatting for model output.

Chat models answer in Markdown; Slack renders its own mrkdwn dialect.
"""

from __future__ import annotations

import re
from typing import List

# **bold** -> *bold*
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
# "## Heading" -> "*Heading*"
_HEADING_RE = re.compile(r"^#{1,6}[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)
# [label](https://url) -> <https://url|label>
_LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^\s)]+)\)")
_CODE_BLOCK_RE = re.compile(r"(```[\s\S]*?```)")


def _convert_segment(text: str) -> str:
    text = _HEADING_RE.sub(r"**\1**", text)
    text = _BOLD_RE.sub(r"*\1*", text)
    return _LINK_RE.sub(r"<\2|\1>", text)


def markdown_to_slack_mrkdwn(text: str) -> str:
    """
    Convert Markdown bold, headings and links to Slack mrkdwn.
    Triple-backtick code blocks are left untouched.
    """
    out: List[str] = []
    for part in _CODE_BLOCK_RE.split(text):
        if part.startswith("```") and part.endswith("```") and len(part) >= 6:
            out.append(part)
        else:
            out.append(_convert_segment(part))
    return "".join(out)
