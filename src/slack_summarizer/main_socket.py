"""
Socket Mode event listener for the summarizer.
Connects to Slack via WebSocket - no public URL needed.

Usage:
    python -m slack_summarizer.main_socket
"""
import asyncio
import sys
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from .app import build_app
from .config import get_settings
from .log import setup_logging, get_logger

logger = get_logger("socket_listener")

async def run():
    settings = get_settings()
    if not settings.SLACK_APP_TOKEN:
        logger.error("SLACK_APP_TOKEN is required for Socket Mode")
        sys.exit(1)

    app = await build_app(settings)
    handler = AsyncSocketModeHandler(app, settings.SLACK_APP_TOKEN)
    logger.info("Starting Socket Mode listener...")
    await handler.start_async()

def main():
    """Start the Socket Mode handler (blocks)."""
    setup_logging()
    asyncio.run(run())

if __name__ == "__main__":
    main()
