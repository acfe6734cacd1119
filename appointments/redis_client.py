from typing import Optional

from redis import Redis

from .config import settings


def build_redis(url: Optional[str]) -> Optional[Redis]:
    """Redis client for REDIS_URL, or None when Redis is not configured."""
    if not url:
        return None
    return Redis.from_url(url, socket_timeout=2.0)


redis_client = build_redis(settings.redis_url)
