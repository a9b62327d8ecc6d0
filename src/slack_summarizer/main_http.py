"""
HTTP (Events API) listener for the summarizer.
Slack posts events to /slack/events; Bolt verifies the request signature.

Usage:
    python -m slack_summarizer.main_http
    uvicorn slack_summarizer.main_http:api --port 3000
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
from .app import build_app
from .config import get_settings
from .log import setup_logging, get_logger

logger = get_logger("http_listener")

@asynccontextmanager
async def lifespan(api: FastAPI):
    setup_logging()
    settings = get_settings()
    if not settings.SLACK_SIGNING_SECRET:
        logger.warning("SLACK_SIGNING_SECRET is not set; Slack requests will be rejected")
    app = await build_app(settings)
    api.state.slack_handler = AsyncSlackRequestHandler(app)
    logger.info("Slack Bolt app is ready on /slack/events")
    yield

api = FastAPI(lifespan=lifespan)

@api.post("/slack/events")
async def slack_events(request: Request):
    return await request.app.state.slack_handler.handle(request)

@api.get("/healthz")
async def healthz():
    return {"status": "ok"}

def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(api, host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    main()
