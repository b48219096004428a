import json
import logging
from urllib.parse import urlsplit, urlunsplit
from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError
from domain.errors import EventDecodeError, EventNotFound, StoreError
from domain.event import Event
from infra.core_types import EventStore

logger = logging.getLogger(__name__)

def strip_redis_username(url: str) -> str:
    """Blank out the user of a Redis URL that carries a password; other URLs are left alone"""
    parts = urlsplit(url)
    if parts.password is None:
        return url

    host = parts.hostname or ''
    if ':' in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    host = f":{parts.password}@{host}"
    return urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))

def create_redis_pool(
    url: str,
    max_connections: int = 10,
    health_check_interval: int = 30
) -> ConnectionPool:
    """Build the single connection pool shared by every store operation"""
    return ConnectionPool.from_url(
        strip_redis_username(url),
        max_connections=max_connections,
        health_check_interval=health_check_interval
    )

class RedisEventStore(EventStore):
    """Events stored as JSON strings under their own id"""
    def __init__(self, redis: Redis):
        self.redis = redis

    async def get(self, event_id: str) -> Event:
        try:
            raw = await self.redis.get(event_id)
        except RedisError as e:
            raise StoreError(f"Failed to get event {event_id}: {e}") from e

        if raw is None:
            raise EventNotFound(event_id)

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise EventDecodeError(f"Stored event {event_id} is not JSON: {e}") from e

        return Event.from_dict(data)

    async def set(self, event: Event) -> None:
        try:
            await self.redis.set(event.id, json.dumps(event.to_dict()))
        except RedisError as e:
            raise StoreError(f"Failed to store event {event.id}: {e}") from e
        logger.debug(f"Stored event {event.id} with status {event.status.value}")
