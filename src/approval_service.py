import os
import logging
from typing import Optional
from dotenv import load_dotenv
from redis.asyncio import Redis
from domain.constants import ServiceConfig
from domain.dependencies import Dependencies
from infra.dispatcher import TaskDispatcher
from infra.notifier import HttpNotifier
from infra.redis import RedisEventStore, create_redis_pool

logger = logging.getLogger(__name__)

class ApprovalService:
    """
    Runtime for the approval events service: owns the Redis pool, the
    notification client and the dispatcher for detached callback jobs.
    """
    @staticmethod
    def create() -> 'ApprovalService':
        """Factory method that reads the environment and builds the service"""
        load_dotenv()

        redis_url = os.getenv('REDIS_URL') or os.getenv('REDISTOGO_URL') or 'redis://localhost:6379'
        pool = create_redis_pool(
            redis_url,
            max_connections=int(os.getenv('REDIS_MAX_CONNECTIONS', 10)),
            health_check_interval=int(os.getenv('REDIS_HEALTH_CHECK_INTERVAL', 30))
        )
        notifier = HttpNotifier(timeout=float(os.getenv('NOTIFY_TIMEOUT', 10)))

        return ApprovalService(Redis(connection_pool=pool), notifier)

    def __init__(
        self,
        redis: Redis,
        notifier: HttpNotifier,
        dispatcher: Optional[TaskDispatcher] = None
    ):
        self.redis = redis
        self.notifier = notifier
        self.dispatcher = dispatcher or TaskDispatcher()
        self.deps = Dependencies(
            event_store=RedisEventStore(redis),
            notifier=notifier
        )

    async def aclose(self) -> None:
        """Let in-flight callback jobs finish, then release connections"""
        logger.info(f"Stopping {ServiceConfig.NAME}, {self.dispatcher.pending} callback job(s) in flight")
        try:
            await self.dispatcher.drain()
        finally:
            await self.notifier.aclose()
            await self.redis.aclose()
            await self.redis.connection_pool.disconnect()
