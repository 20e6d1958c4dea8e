"""Redis-backed session lookup.

Sessions are written by the auth service as ``auth_<token> -> user id``;
this side only reads them.
"""
import logging
from typing import Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "auth_"


def create_redis_client(redis_url: str) -> redis.Redis:
    """Build a pooled client that returns str values."""
    return redis.from_url(redis_url, encoding="utf-8", decode_responses=True)


class RedisSessionStore:
    """Resolves auth tokens to user ids through Redis."""

    def __init__(self, client: redis.Redis):
        self._client = client

    async def resolve(self, token: str) -> Optional[str]:
        if not token:
            return None
        user_id = await self._client.get(f"{SESSION_KEY_PREFIX}{token}")
        if not user_id:
            logger.debug("No session for presented token")
            return None
        return user_id
