from typing import Iterable
from .client import SlackClientWrapper
from ..schemas.messages import UNKNOWN_USER, UserMap
from ..schemas.results import StageResult
from ..log import get_logger

logger = get_logger("users")

class UserResolver:
    """Maps author ids to display names, once per request (no cache)."""

    def __init__(self, slack: SlackClientWrapper):
        self.slack = slack

    async def resolve(self, user_ids: Iterable[str]) -> StageResult[UserMap]:
        user_map: UserMap = {}
        failures = []
        for user_id in dict.fromkeys(user_ids):
            if not user_id:
                user_map[user_id] = UNKNOWN_USER
                continue
            try:
                name = await self.slack.resolve_user(user_id)
            except Exception as e:
                logger.warning(f"Could not resolve user {user_id}: {e}")
                failures.append(user_id)
                name = None
            user_map[user_id] = name or UNKNOWN_USER

        if failures:
            return StageResult(
                status="failed",
                value=user_map,
                error=f"unresolved users: {', '.join(failures)}",
            )
        return StageResult(status="ok" if user_map else "empty", value=user_map)
