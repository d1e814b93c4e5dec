import logging
from src.infrastructure.database.client import DatabaseClient

logger = logging.getLogger(__name__)


class HealthService:
    def __init__(self, db_client: DatabaseClient, app_version: str):
        self.db_client = db_client
        self.app_version = app_version

    async def check_database_health(self) -> bool:
        healthy = await self.db_client.health_check()
        if not healthy:
            logger.warning("Health check reports database unavailable")
        return healthy
