"""Run the summarize pipeline once against a channel or thread.

Prints the summary instead of posting it unless --post is given.

Usage:
    python scripts/summarize_channel.py C0123ABC --limit 20
    python scripts/summarize_channel.py C0123ABC --thread 1718000000.000100 --question "what was decided?"
"""
import argparse
import asyncio
from dotenv import load_dotenv
from slack_summarizer.app import build_dispatcher, resolve_identity
from slack_summarizer.config import get_settings
from slack_summarizer.llm.client import LLMClient
from slack_summarizer.log import setup_logging
from slack_summarizer.schemas.intent import QuestionIntent, SummarizeIntent
from slack_summarizer.slack.client import SlackClientWrapper
from slack_summarizer.schemas.results import StageResult


class PrintResponder:
    """Writes replies to stdout instead of Slack."""

    async def reply(self, channel_id, text, thread_ts=None):
        print(f"\n--- reply for {channel_id} (thread={thread_ts}) ---\n{text}\n")
        return StageResult(status="ok", value=text)


async def run(args):
    settings = get_settings()
    slack = SlackClientWrapper.from_token(settings.SLACK_BOT_TOKEN)
    identity = await resolve_identity(slack, settings)
    dispatcher = build_dispatcher(slack, LLMClient.from_settings(settings), identity, settings)
    if not args.post:
        dispatcher.responder = PrintResponder()

    limit = args.limit or settings.DEFAULT_LIMIT
    if args.question:
        intent = QuestionIntent(text=args.question, limit=limit)
    else:
        intent = SummarizeIntent(limit=limit)

    print(f"Running {intent.kind} on {args.channel} (limit={limit})...")
    result = await dispatcher.dispatch(intent, args.channel, args.thread)
    if result is None:
        print("No messages found.")


def positive_int(raw):
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{raw!r} is not an integer")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"limit must be positive, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Summarize a Slack channel or thread once.")
    parser.add_argument("channel", help="Channel id (C...)")
    parser.add_argument("--thread", help="Thread ts to summarize instead of the channel")
    parser.add_argument("--limit", type=positive_int, help="Number of messages to read")
    parser.add_argument("--question", help="Ask a question instead of summarizing")
    parser.add_argument("--post", action="store_true", help="Post the result to Slack")
    return parser


def main():
    args = build_parser().parse_args()

    load_dotenv()
    setup_logging()
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
