import asyncio
from types import SimpleNamespace

USERS = {"UA": "alice", "UB": "bob", "UBOT": "summarizer"}


def run(coro):
    """Drive a coroutine to completion from a plain pytest test."""
    return asyncio.run(coro)


def make_completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)


def slack_message(user, text, **extra):
    return {"type": "message", "user": user, "text": text, "ts": "1700000000.000100", **extra}
