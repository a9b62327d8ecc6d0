"""Slack Summarizer - A Slack bot that summarizes recent conversation using LLMs.

The bot listens for mentions (``@summarizer summarize``) and ``!summarize``
messages, reads the recent channel or thread history, and replies in place
with a summary or with an answer to a question about that history.

Components:
- main_socket: Socket Mode event listener
- main_http: HTTP (Events API) listener
- pipeline: trigger dispatch (parse -> fetch -> transcript -> summarize -> reply)
- commands: trigger text parsing
- slack: Slack API integration
- transcript: speaker resolution and message sanitizing
- llm: prompt construction and model calls
"""

__version__ = "1.0.0"
